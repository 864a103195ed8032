"""Food item endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from food_expiry_tracker.api.auth import current_user_id
from food_expiry_tracker.api.models import (
    ConsumedIn,
    DashboardOut,
    FoodItemOut,
    ManualItemIn,
    QrScanIn,
)
from food_expiry_tracker.domain.inventory import (
    InventoryFilters,
    ItemStatus,
    PurchaseWindow,
    SortField,
    StockLevel,
)
from food_expiry_tracker.services.qr import InvalidQrPayloadError
from food_expiry_tracker.services.receipts import to_new_items

if TYPE_CHECKING:
    from food_expiry_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["items"])


@router.get("/items")
async def list_items(  # noqa: PLR0913
    request: Request,
    user_id: UUID = Depends(current_user_id),
    query: str | None = None,
    status_filter: ItemStatus | None = Query(default=None, alias="status"),
    category: str | None = None,
    stock: StockLevel | None = None,
    purchased_within: PurchaseWindow | None = None,
    sort: SortField = SortField.EXPIRY_DATE,
    descending: bool = False,
) -> list[FoodItemOut]:
    """Return the user's items, soonest expiry first unless sorted otherwise."""
    container: AppContainer = request.app.state.container
    filters = InventoryFilters(
        query=query,
        status=status_filter,
        category=category,
        stock=stock,
        purchased_within=purchased_within,
        sort_field=sort,
        descending=descending,
    )
    items = container.inventory_service.get_report(user_id, filters)
    return [FoodItemOut.from_domain(item) for item in items]


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def add_item(
    body: ManualItemIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> FoodItemOut:
    """Add a manually entered item."""
    container: AppContainer = request.app.state.container
    try:
        item = container.food_item_service.add_manual_item(
            user_id,
            name=body.name,
            category=body.category,
            quantity=body.quantity,
            expiry_date=body.expiry_date,
            notes=body.notes,
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return FoodItemOut.from_domain(item)


@router.post("/items/qr", status_code=status.HTTP_201_CREATED)
async def add_from_qr(
    body: QrScanIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> FoodItemOut:
    """Add an item from decoded QR code text."""
    container: AppContainer = request.app.state.container
    try:
        item = container.qr_scan_service.add_from_payload(user_id, body.payload)
    except InvalidQrPayloadError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return FoodItemOut.from_domain(item)


@router.post("/items/receipt", status_code=status.HTTP_201_CREATED)
async def add_from_receipt(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> list[FoodItemOut]:
    """OCR a receipt image sent as the raw request body and add its items."""
    container: AppContainer = request.app.state.container
    image_bytes = await request.body()
    if not image_bytes:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Receipt image is required",
        )
    try:
        scanned = await container.receipt_service.scan(image_bytes)
    except Exception as exc:
        logger.exception("Receipt OCR failed", extra={"user_id": str(user_id)})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to process the receipt image",
        ) from exc
    items = container.food_item_service.add_items(user_id, to_new_items(scanned))
    return [FoodItemOut.from_domain(item) for item in items]


@router.patch("/items/{item_id}")
async def set_consumed(
    item_id: UUID,
    body: ConsumedIn,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> FoodItemOut:
    """Mark an item as consumed or not consumed."""
    container: AppContainer = request.app.state.container
    item = container.food_item_service.set_consumed(user_id, item_id, body.is_consumed)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return FoodItemOut.from_domain(item)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(
    item_id: UUID, request: Request, user_id: UUID = Depends(current_user_id)
) -> None:
    """Delete an item."""
    container: AppContainer = request.app.state.container
    container.food_item_service.delete_item(user_id, item_id)


@router.get("/dashboard")
async def dashboard(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> DashboardOut:
    """Return dashboard counts and inventory health."""
    container: AppContainer = request.app.state.container
    stats, health = container.inventory_service.get_dashboard(user_id)
    return DashboardOut.from_domain(stats, health)
