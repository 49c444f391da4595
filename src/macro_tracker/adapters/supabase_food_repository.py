"""Supabase implementation for the food catalog."""

from dataclasses import dataclass

from supabase import Client

from macro_tracker.domain.foods import Food
from macro_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for foods."""

    client: Client

    def list_foods(self) -> list[Food]:
        """Return all foods ordered by name."""
        response = self.client.table("foods").select("*").order("name").execute()
        return [_parse_food(row) for row in response.data or []]

    def get_food(self, food_id: str) -> Food | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0])

    def create_food(self, food: Food) -> Food:
        """Insert a food row and return it."""
        response = self.client.table("foods").insert(_serialize_food(food)).execute()
        if not response.data:
            raise RuntimeError("Failed to create food")
        return _parse_food(response.data[0])

    def update_food(self, food: Food) -> Food:
        """Update a food row and return it."""
        payload = _serialize_food(food)
        payload.pop("id")
        response = (
            self.client.table("foods").update(payload).eq("id", food.id).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food")
        return _parse_food(response.data[0])

    def delete_food(self, food_id: str) -> bool:
        """Delete a food row."""
        response = self.client.table("foods").delete().eq("id", food_id).execute()
        return bool(response.data)


def _serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "carbs": food.carbs,
        "fat": food.fat,
        "protein": food.protein,
        "unit": food.unit,
        "serving_size": food.serving_size,
    }


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    return Food(
        id=str(row["id"]),
        name=str(row.get("name", "")),
        calories=float(row.get("calories", 0.0)),
        carbs=float(row.get("carbs", 0.0)),
        fat=float(row.get("fat", 0.0)),
        protein=float(row.get("protein", 0.0)),
        unit=str(row.get("unit", "")),
        serving_size=float(row.get("serving_size", 0.0)),
    )
