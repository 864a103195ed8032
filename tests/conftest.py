"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from food_expiry_tracker.config import Settings
from food_expiry_tracker.containers import AppContainer
from food_expiry_tracker.domain.food_items import FoodItem, NewFoodItem
from food_expiry_tracker.domain.notifications import NotificationPreferences
from food_expiry_tracker.services.auth import AuthClient
from food_expiry_tracker.services.food_items import (
    FoodItemRepository,
    FoodItemService,
)
from food_expiry_tracker.services.inventory import InventoryService
from food_expiry_tracker.services.notifications import (
    NotificationPreferencesRepository,
    NotificationService,
    Notifier,
)
from food_expiry_tracker.services.produce import ProduceScanService
from food_expiry_tracker.services.qr import QrScanService
from food_expiry_tracker.services.receipts import OcrClient, ReceiptService

TEST_USER_ID = UUID("6f1c2c1e-2f40-4a7c-9d55-8a1d2a3b4c5d")
TEST_TOKEN = "valid-token"
AUTH_HEADERS = {"Authorization": f"Bearer {TEST_TOKEN}"}


def make_item(  # noqa: PLR0913
    name: str,
    expiry_date: date,
    *,
    category: str | None = "Other",
    purchase_date: date | None = None,
    quantity: int = 1,
    is_consumed: bool = False,
    user_id: UUID = TEST_USER_ID,
) -> FoodItem:
    return FoodItem(
        id=uuid4(),
        user_id=user_id,
        name=name,
        category=category,
        purchase_date=purchase_date or expiry_date,
        expiry_date=expiry_date,
        quantity=quantity,
        is_consumed=is_consumed,
        notes=None,
    )


@dataclass
class InMemoryFoodItemRepository(FoodItemRepository):
    """In-memory food item repository for tests."""

    items: dict[UUID, FoodItem] = field(default_factory=dict)

    def list_items(self, user_id: UUID) -> list[FoodItem]:
        owned = [item for item in self.items.values() if item.user_id == user_id]
        return sorted(owned, key=lambda item: item.expiry_date)

    def create_items(self, user_id: UUID, items: list[NewFoodItem]) -> list[FoodItem]:
        created = []
        for new_item in items:
            item = FoodItem(
                id=uuid4(),
                user_id=user_id,
                name=new_item.name,
                category=new_item.category,
                purchase_date=new_item.purchase_date,
                expiry_date=new_item.expiry_date,
                quantity=new_item.quantity,
                is_consumed=False,
                notes=new_item.notes,
            )
            self.items[item.id] = item
            created.append(item)
        return created

    def delete_item(self, user_id: UUID, item_id: UUID) -> None:
        item = self.items.get(item_id)
        if item and item.user_id == user_id:
            del self.items[item_id]

    def set_consumed(
        self, user_id: UUID, item_id: UUID, is_consumed: bool
    ) -> FoodItem | None:
        item = self.items.get(item_id)
        if item is None or item.user_id != user_id:
            return None
        updated = replace(item, is_consumed=is_consumed)
        self.items[item_id] = updated
        return updated


@dataclass
class InMemoryNotificationPreferencesRepository(NotificationPreferencesRepository):
    """In-memory notification preferences repository for tests."""

    preferences: dict[UUID, NotificationPreferences] = field(default_factory=dict)

    def get_preferences(self, user_id: UUID) -> NotificationPreferences | None:
        return self.preferences.get(user_id)

    def save_preferences(
        self, user_id: UUID, preferences: NotificationPreferences
    ) -> None:
        self.preferences[user_id] = preferences


@dataclass
class FakeNotifier(Notifier):
    """Fake notifier that records messages."""

    messages: list[tuple[int, str, str]] = field(default_factory=list)

    async def notify(self, chat_id: int, title: str, body: str) -> None:
        self.messages.append((chat_id, title, body))


@dataclass
class FakeOcrClient(OcrClient):
    """Fake OCR client returning fixed receipt lines."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "lines": [
                "SUPERMART RECEIPT",
                "Amul Milk 500ml   28.00",
                "Fresh Aloo 1kg    40.00",
                "Dish soap         99.00",
                "",
            ]
        }
    )
    last_request: dict[str, object] | None = None

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.last_request = {
            "model": model,
            "image_data_url": image_data_url,
            "schema": schema,
            "prompt": prompt,
        }
        return self.payload


@dataclass
class FakeAuthClient(AuthClient):
    """Fake auth client accepting a single token."""

    tokens: dict[str, UUID] = field(
        default_factory=lambda: {TEST_TOKEN: TEST_USER_ID}
    )

    def get_user_id(self, access_token: str) -> UUID | None:
        return self.tokens.get(access_token)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def food_item_repository() -> InMemoryFoodItemRepository:
    return InMemoryFoodItemRepository()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def container(
    settings: Settings,
    food_item_repository: InMemoryFoodItemRepository,
    notifier: FakeNotifier,
) -> AppContainer:
    food_item_service = FoodItemService(
        repository=food_item_repository,
        fallback_days=settings.expiry_fallback_days,
    )
    receipt_service = ReceiptService(
        client=FakeOcrClient(),
        model=settings.openai_ocr_model,
        fallback_days=settings.expiry_fallback_days,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        auth_client=FakeAuthClient(),
        food_item_service=food_item_service,
        receipt_service=receipt_service,
        qr_scan_service=QrScanService(food_item_service),
        produce_scan_service=ProduceScanService(food_item_service),
        inventory_service=InventoryService(food_item_repository),
        notification_service=NotificationService(
            repository=InMemoryNotificationPreferencesRepository(),
            notifier=notifier,
        ),
        close_resources=close_resources,
    )
