"""Services for managing the food catalog."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import uuid4

from macro_tracker.domain.errors import FoodNotFoundError
from macro_tracker.domain.foods import Food
from macro_tracker.services.nutrition import calories_from_macros

_logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = (
    "name",
    "calories",
    "carbs",
    "fat",
    "protein",
    "unit",
    "serving_size",
)


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def list_foods(self) -> list[Food]:
        """Return all foods."""

    def get_food(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""

    def create_food(self, food: Food) -> Food:
        """Persist a new food and return it."""

    def update_food(self, food: Food) -> Food:
        """Persist changes to an existing food and return it."""

    def delete_food(self, food_id: str) -> bool:
        """Delete a food, returning False when it did not exist."""


@dataclass
class FoodCatalogService:
    """Application service for food catalog operations."""

    repository: FoodRepository

    def list_foods(self) -> list[Food]:
        """Return all foods in the catalog."""
        return self.repository.list_foods()

    def foods_by_id(self) -> dict[str, Food]:
        """Return the catalog keyed by food id."""
        return {food.id: food for food in self.repository.list_foods()}

    def get_food(self, food_id: str) -> Food:
        """Return a food or raise when it is missing."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def create_food(self, payload: dict[str, object]) -> Food:
        """Create a food, deriving calories from macros when not supplied."""
        carbs = float(payload["carbs"])
        fat = float(payload["fat"])
        protein = float(payload["protein"])
        calories = payload.get("calories")
        food = Food(
            id=str(uuid4()),
            name=str(payload["name"]),
            calories=(
                float(calories)
                if calories is not None
                else calories_from_macros(carbs, fat, protein)
            ),
            carbs=carbs,
            fat=fat,
            protein=protein,
            unit=str(payload["unit"]),
            serving_size=float(payload["serving_size"]),
        )
        created = self.repository.create_food(food)
        _logger.info("Created food %s (%s)", created.id, created.name)
        return created

    def update_food(self, food_id: str, changes: dict[str, object]) -> Food:
        """Apply a partial update; fields that are absent or None are kept."""
        current = self.get_food(food_id)
        updates = {
            key: value
            for key, value in changes.items()
            if key in _EDITABLE_FIELDS and value is not None
        }
        return self.repository.update_food(replace(current, **updates))

    def delete_food(self, food_id: str) -> None:
        """Delete a food; log entries referencing it are left untouched."""
        if not self.repository.delete_food(food_id):
            raise FoodNotFoundError(food_id)
        _logger.info("Deleted food %s", food_id)
