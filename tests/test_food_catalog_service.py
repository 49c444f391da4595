"""Tests for the food catalog service."""

import pytest

from macro_tracker.domain.errors import FoodNotFoundError
from macro_tracker.services.foods import FoodCatalogService
from tests.conftest import InMemoryFoodRepository


def test_create_food_derives_calories_from_macros() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    food = service.create_food(
        {
            "name": "Oats",
            "carbs": 27,
            "fat": 3,
            "protein": 5,
            "unit": "g",
            "serving_size": 40,
        }
    )

    assert food.calories == 27 * 4 + 3 * 9 + 5 * 4
    assert service.get_food(food.id) == food


def test_create_food_keeps_explicit_calories() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    food = service.create_food(
        {
            "name": "Almonds",
            "calories": 164,
            "carbs": 6,
            "fat": 14,
            "protein": 6,
            "unit": "oz",
            "serving_size": 1,
        }
    )

    assert food.calories == 164


def test_update_food_is_partial() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())
    food = service.create_food(
        {
            "name": "Rice",
            "carbs": 28,
            "fat": 0.3,
            "protein": 2.7,
            "unit": "g",
            "serving_size": 100,
        }
    )

    updated = service.update_food(food.id, {"name": "Jasmine rice", "unit": None})

    assert updated.name == "Jasmine rice"
    assert updated.unit == "g"
    assert updated.carbs == 28
    assert service.foods_by_id()[food.id].name == "Jasmine rice"


def test_missing_food_raises() -> None:
    service = FoodCatalogService(InMemoryFoodRepository())

    with pytest.raises(FoodNotFoundError):
        service.get_food("nope")
    with pytest.raises(FoodNotFoundError):
        service.update_food("nope", {"name": "x"})
    with pytest.raises(FoodNotFoundError):
        service.delete_food("nope")


def test_delete_food_removes_it() -> None:
    repository = InMemoryFoodRepository()
    service = FoodCatalogService(repository)
    food = service.create_food(
        {
            "name": "Egg",
            "carbs": 0.6,
            "fat": 5,
            "protein": 6,
            "unit": "egg",
            "serving_size": 1,
        }
    )

    service.delete_food(food.id)

    assert service.list_foods() == []
    assert not repository.foods
