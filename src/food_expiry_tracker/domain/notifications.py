"""Domain models for expiry notifications."""

from dataclasses import dataclass

DEFAULT_REMINDER_DAYS = 2


@dataclass(frozen=True)
class NotificationPreferences:
    """Per-user notification settings."""

    notifications_enabled: bool = False
    telegram_chat_id: int | None = None
    reminder_days: int = DEFAULT_REMINDER_DAYS

    @property
    def can_notify(self) -> bool:
        """Return True when notifications are on and a destination is known."""
        return self.notifications_enabled and self.telegram_chat_id is not None
