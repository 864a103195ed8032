"""Produce freshness scanning."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from food_expiry_tracker.domain.food_items import FoodItem, NewFoodItem
from food_expiry_tracker.domain.produce import ProduceInfo, get_produce, list_produce
from food_expiry_tracker.domain.rot_prediction import (
    RotPrediction,
    StorageConditions,
    UnknownProduceError,
    predict_rot_date,
)
from food_expiry_tracker.services.food_items import FoodItemService


@dataclass
class ProduceScanService:
    """Runs rot predictions and stores the results as food items."""

    food_item_service: FoodItemService

    def catalog(self) -> list[tuple[str, ProduceInfo]]:
        """Return the selectable produce entries."""
        return list_produce()

    def predict(
        self, produce_key: str, conditions: StorageConditions, today: date | None = None
    ) -> RotPrediction:
        """Predict the rot date for produce."""
        return predict_rot_date(produce_key, conditions, today=today)

    def save_prediction(
        self,
        user_id: UUID,
        produce_key: str,
        conditions: StorageConditions,
        today: date | None = None,
    ) -> tuple[FoodItem, RotPrediction]:
        """Predict the rot date and track the produce until then."""
        produce = get_produce(produce_key)
        if produce is None:
            raise UnknownProduceError(produce_key)
        purchase_date = today or date.today()
        prediction = predict_rot_date(produce_key, conditions, today=purchase_date)
        item = NewFoodItem(
            name=produce.name,
            category=produce.kind,
            purchase_date=purchase_date,
            expiry_date=prediction.rot_date,
            notes=prediction.explanation,
        )
        stored = self.food_item_service.add_items(user_id, [item])[0]
        return stored, prediction
