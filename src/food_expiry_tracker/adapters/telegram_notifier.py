"""Telegram Bot API notifier."""

from dataclasses import dataclass

import httpx

from food_expiry_tracker.services.notifications import Notifier


@dataclass
class HttpxTelegramNotifier(Notifier):
    """Sends notifications as Telegram messages using httpx."""

    bot_token: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, bot_token: str) -> "HttpxTelegramNotifier":
        """Create a notifier with a managed httpx session."""
        return cls(bot_token=bot_token, http_client=httpx.AsyncClient())

    async def notify(self, chat_id: int, title: str, body: str) -> None:
        """Send a message using Telegram's sendMessage API."""
        url = f"https://api.telegram.org/bot{self.bot_token}/sendMessage"
        payload: dict[str, object] = {"chat_id": chat_id, "text": f"{title}\n{body}"}
        response = await self.http_client.post(url, json=payload, timeout=10)
        response.raise_for_status()

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()


@dataclass
class DisabledNotifier(Notifier):
    """Notifier used when no bot token is configured."""

    async def notify(self, chat_id: int, title: str, body: str) -> None:
        """Refuse to deliver notifications."""
        raise RuntimeError("Telegram notifications are not configured")
