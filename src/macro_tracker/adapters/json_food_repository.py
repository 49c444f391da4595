"""File-backed repository for the food catalog."""

from dataclasses import dataclass

from macro_tracker.adapters.json_store import JsonFileStore
from macro_tracker.domain.foods import Food
from macro_tracker.services.foods import FoodRepository


@dataclass
class JsonFoodRepository(FoodRepository):
    """Stores foods as a JSON array in ``foods.json``."""

    store: JsonFileStore

    def list_foods(self) -> list[Food]:
        """Return all foods."""
        return [_parse_food(row) for row in _rows(self.store.read())]

    def get_food(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""
        for food in self.list_foods():
            if food.id == food_id:
                return food
        return None

    def create_food(self, food: Food) -> Food:
        """Append a food."""
        self.store.update(lambda data: [*_rows(data), _serialize_food(food)])
        return food

    def update_food(self, food: Food) -> Food:
        """Replace the stored row with the same id."""

        def mutate(data: object) -> list[dict[str, object]]:
            return [
                _serialize_food(food) if row.get("id") == food.id else row
                for row in _rows(data)
            ]

        self.store.update(mutate)
        return food

    def delete_food(self, food_id: str) -> bool:
        """Remove a food by id."""
        removed = False

        def mutate(data: object) -> list[dict[str, object]]:
            nonlocal removed
            rows = _rows(data)
            kept = [row for row in rows if row.get("id") != food_id]
            removed = len(kept) != len(rows)
            return kept

        self.store.update(mutate)
        return removed


def _rows(data: object) -> list[dict[str, object]]:
    return list(data) if isinstance(data, list) else []


def _serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "carbs": food.carbs,
        "fat": food.fat,
        "protein": food.protein,
        "unit": food.unit,
        "servingSize": food.serving_size,
    }


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a stored food row into a domain model."""
    return Food(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=float(row.get("calories", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        protein=float(row.get("protein", 0.0)),
        unit=str(row.get("unit", "")),
        serving_size=float(row.get("servingSize", 0.0)),
    )
