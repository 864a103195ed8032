"""Supabase repository for notification preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from food_expiry_tracker.domain.notifications import (
    DEFAULT_REMINDER_DAYS,
    NotificationPreferences,
)
from food_expiry_tracker.services.notifications import (
    NotificationPreferencesRepository,
)


@dataclass
class SupabaseNotificationPreferencesRepository(NotificationPreferencesRepository):
    """Supabase implementation for the user_settings table."""

    client: Client

    def get_preferences(self, user_id: UUID) -> NotificationPreferences | None:
        """Return stored preferences, if any."""
        response = (
            self.client.table("user_settings")
            .select("notifications_enabled, telegram_chat_id, reminder_days")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        chat_id = row.get("telegram_chat_id")
        reminder_days = row.get("reminder_days")
        return NotificationPreferences(
            notifications_enabled=bool(row.get("notifications_enabled", False)),
            telegram_chat_id=int(chat_id) if chat_id is not None else None,
            reminder_days=(
                int(reminder_days)
                if reminder_days is not None
                else DEFAULT_REMINDER_DAYS
            ),
        )

    def save_preferences(
        self, user_id: UUID, preferences: NotificationPreferences
    ) -> None:
        """Upsert preferences for a user."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "notifications_enabled": preferences.notifications_enabled,
                "telegram_chat_id": preferences.telegram_chat_id,
                "reminder_days": preferences.reminder_days,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()
