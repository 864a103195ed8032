"""Notification settings and delivery endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from food_expiry_tracker.api.auth import current_user_id
from food_expiry_tracker.api.models import NotificationPreferencesIO

if TYPE_CHECKING:
    from food_expiry_tracker.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["notifications"])


@router.get("/settings/notifications")
async def get_preferences(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> NotificationPreferencesIO:
    """Return the user's notification preferences."""
    container: AppContainer = request.app.state.container
    preferences = container.notification_service.get_preferences(user_id)
    return NotificationPreferencesIO.from_domain(preferences)


@router.put("/settings/notifications")
async def save_preferences(
    body: NotificationPreferencesIO,
    request: Request,
    user_id: UUID = Depends(current_user_id),
) -> NotificationPreferencesIO:
    """Replace the user's notification preferences."""
    container: AppContainer = request.app.state.container
    container.notification_service.save_preferences(user_id, body.to_domain())
    return body


@router.post("/notifications/check")
async def check_expiring(
    request: Request, user_id: UUID = Depends(current_user_id)
) -> dict[str, bool]:
    """Notify the user about items expiring soon."""
    container: AppContainer = request.app.state.container
    items = container.food_item_service.list_items(user_id)
    try:
        sent = await container.notification_service.notify_expiring(user_id, items)
    except Exception as exc:
        logger.exception(
            "Failed to send notification", extra={"user_id": str(user_id)}
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to deliver notification",
        ) from exc
    return {"sent": sent}
