"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_expiry_tracker.adapters.openai_ocr_client import OpenAIOcrClient
from food_expiry_tracker.adapters.supabase_auth_client import SupabaseAuthClient
from food_expiry_tracker.adapters.supabase_food_item_repository import (
    SupabaseFoodItemRepository,
)
from food_expiry_tracker.adapters.supabase_notification_preferences_repository import (
    SupabaseNotificationPreferencesRepository,
)
from food_expiry_tracker.adapters.telegram_notifier import (
    DisabledNotifier,
    HttpxTelegramNotifier,
)
from food_expiry_tracker.config import Settings
from food_expiry_tracker.services.auth import AuthClient
from food_expiry_tracker.services.food_items import FoodItemService
from food_expiry_tracker.services.inventory import InventoryService
from food_expiry_tracker.services.notifications import NotificationService, Notifier
from food_expiry_tracker.services.produce import ProduceScanService
from food_expiry_tracker.services.qr import QrScanService
from food_expiry_tracker.services.receipts import ReceiptService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_client: AuthClient
    food_item_service: FoodItemService
    receipt_service: ReceiptService
    qr_scan_service: QrScanService
    produce_scan_service: ProduceScanService
    inventory_service: InventoryService
    notification_service: NotificationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_item_repository = SupabaseFoodItemRepository(supabase_client)
    preferences_repository = SupabaseNotificationPreferencesRepository(
        supabase_client
    )
    food_item_service = FoodItemService(
        repository=food_item_repository,
        fallback_days=resolved_settings.expiry_fallback_days,
    )
    ocr_client = OpenAIOcrClient.create(resolved_settings.openai_api_key)
    receipt_service = ReceiptService(
        client=ocr_client,
        model=resolved_settings.openai_ocr_model,
        fallback_days=resolved_settings.expiry_fallback_days,
    )
    telegram_notifier: HttpxTelegramNotifier | None = None
    notifier: Notifier
    if resolved_settings.telegram_bot_token:
        telegram_notifier = HttpxTelegramNotifier.create(
            resolved_settings.telegram_bot_token
        )
        notifier = telegram_notifier
    else:
        notifier = DisabledNotifier()

    async def close_resources() -> None:
        await ocr_client.close()
        if telegram_notifier is not None:
            await telegram_notifier.close()

    return AppContainer(
        settings=resolved_settings,
        auth_client=SupabaseAuthClient(supabase_client),
        food_item_service=food_item_service,
        receipt_service=receipt_service,
        qr_scan_service=QrScanService(food_item_service),
        produce_scan_service=ProduceScanService(food_item_service),
        inventory_service=InventoryService(food_item_repository),
        notification_service=NotificationService(
            repository=preferences_repository, notifier=notifier
        ),
        close_resources=close_resources,
    )
