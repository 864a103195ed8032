"""Produce scanner and expiry rule endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from food_expiry_tracker.api.auth import current_user_id
from food_expiry_tracker.api.models import (
    ExpiryLookupOut,
    FoodItemOut,
    PredictIn,
    ProduceOut,
    RotPredictionOut,
    SavedPredictionOut,
)
from food_expiry_tracker.domain.expiry_rules import find_rule
from food_expiry_tracker.domain.rot_prediction import UnknownProduceError

if TYPE_CHECKING:
    from food_expiry_tracker.containers import AppContainer

router = APIRouter(tags=["produce"])


@router.get("/produce")
async def list_produce(request: Request) -> list[ProduceOut]:
    """Return the produce that can be scanned."""
    container: AppContainer = request.app.state.container
    return [
        ProduceOut(
            key=key,
            name=info.name,
            kind=info.kind,
            base_shelf_life=info.base_shelf_life,
            optimal_temp=info.optimal_temp,
            optimal_humidity=info.optimal_humidity,
        )
        for key, info in container.produce_scan_service.catalog()
    ]


@router.post("/produce/predict")
async def predict(body: PredictIn, request: Request) -> RotPredictionOut:
    """Predict the rot date for produce under the given conditions."""
    container: AppContainer = request.app.state.container
    try:
        prediction = container.produce_scan_service.predict(
            body.produce_key, body.conditions.to_domain()
        )
    except UnknownProduceError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return RotPredictionOut.from_domain(prediction)


@router.post("/produce/save")
async def save_prediction(
    body: PredictIn, request: Request, user_id: UUID = Depends(current_user_id)
) -> SavedPredictionOut:
    """Predict the rot date and track the produce as a food item."""
    container: AppContainer = request.app.state.container
    try:
        item, prediction = container.produce_scan_service.save_prediction(
            user_id, body.produce_key, body.conditions.to_domain()
        )
    except UnknownProduceError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    return SavedPredictionOut(
        item=FoodItemOut.from_domain(item),
        prediction=RotPredictionOut.from_domain(prediction),
    )


@router.get("/expiry-rules/lookup")
async def lookup_expiry(
    name: str, request: Request, purchase_date: date | None = None
) -> ExpiryLookupOut:
    """Return the rule matched by an item name and its expiry date."""
    container: AppContainer = request.app.state.container
    service = container.food_item_service
    rule = find_rule(name)
    return ExpiryLookupOut(
        name=name,
        matched=rule is not None,
        category=rule.category if rule else None,
        days_until_expiry=rule.days_until_expiry if rule else service.fallback_days,
        expiry_date=service.expiry_for(name, purchase_date=purchase_date),
    )
