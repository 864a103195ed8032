"""Expiry notifications."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from food_expiry_tracker.domain.food_items import FoodItem
from food_expiry_tracker.domain.notifications import NotificationPreferences

logger = logging.getLogger(__name__)

EXPIRING_TITLE = "Food Items Expiring Soon!"


class NotificationPreferencesRepository(Protocol):
    """Persistence interface for notification preferences."""

    def get_preferences(self, user_id: UUID) -> NotificationPreferences | None:
        """Return stored preferences, if any."""

    def save_preferences(
        self, user_id: UUID, preferences: NotificationPreferences
    ) -> None:
        """Persist preferences for a user."""


class Notifier(Protocol):
    """Interface for delivering a notification."""

    async def notify(self, chat_id: int, title: str, body: str) -> None:
        """Deliver a title/body notification."""


@dataclass
class NotificationService:
    """Service that warns users about items close to expiry."""

    repository: NotificationPreferencesRepository
    notifier: Notifier

    def get_preferences(self, user_id: UUID) -> NotificationPreferences:
        """Return the user's preferences, or defaults when unset."""
        return self.repository.get_preferences(user_id) or NotificationPreferences()

    def save_preferences(
        self, user_id: UUID, preferences: NotificationPreferences
    ) -> None:
        """Persist the user's preferences."""
        if preferences.reminder_days < 0:
            raise ValueError("reminder_days must not be negative")
        self.repository.save_preferences(user_id, preferences)

    async def notify_expiring(
        self, user_id: UUID, items: list[FoodItem], today: date | None = None
    ) -> bool:
        """Send one message listing expiring items; return True when sent."""
        preferences = self.get_preferences(user_id)
        if not preferences.can_notify:
            return False
        expiring = expiring_soon(
            items, today or date.today(), window_days=preferences.reminder_days
        )
        if not expiring:
            return False
        names = ", ".join(item.name for item in expiring)
        await self.notifier.notify(
            chat_id=preferences.telegram_chat_id,
            title=EXPIRING_TITLE,
            body=f"These items are expiring soon: {names}",
        )
        logger.info(
            "Sent expiry notification",
            extra={"user_id": str(user_id), "count": len(expiring)},
        )
        return True


def expiring_soon(
    items: list[FoodItem], today: date, window_days: int = 2
) -> list[FoodItem]:
    """Return unconsumed items expiring between today and the window end."""
    return [
        item
        for item in items
        if not item.is_consumed and 0 <= item.days_until_expiry(today) <= window_days
    ]
