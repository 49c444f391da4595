"""Tests for nutrition scaling and daily aggregation."""

import math
from datetime import date

import pytest

from macro_tracker.domain.errors import NutritionValidationError
from macro_tracker.domain.foods import FoodEntry
from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.services.nutrition import (
    calories_from_macros,
    compute_targets,
    macro_percentages,
    scale_entries,
    scale_nutrition,
    summarize_day,
)
from tests.conftest import make_food

DAY = date(2025, 3, 24)
GOALS = MacroGoalSettings(
    daily_calorie_goal=2000,
    carb_percentage=50,
    fat_percentage=20,
    protein_percentage=30,
)


def _entry(entry_id: str, food_id: str, quantity: float) -> FoodEntry:
    return FoodEntry(id=entry_id, food_id=food_id, quantity=quantity, date=DAY)


def test_scale_at_serving_size_returns_reference_values() -> None:
    food = make_food(calories=123.4, carbs=11.1, fat=3.3, protein=7.7, serving_size=85)

    scaled = scale_nutrition(food, 85)

    assert scaled.multiplier == 1
    assert scaled.calories == food.calories
    assert scaled.carbs == food.carbs
    assert scaled.fat == food.fat
    assert scaled.protein == food.protein


def test_scale_zero_quantity_is_zero() -> None:
    scaled = scale_nutrition(make_food(), 0)

    assert (scaled.calories, scaled.carbs, scaled.fat, scaled.protein) == (0, 0, 0, 0)


def test_scaling_is_linear() -> None:
    food = make_food(calories=97, carbs=13.3, fat=2.9, protein=4.1, serving_size=28)

    single = scale_nutrition(food, 17.5)
    double = scale_nutrition(food, 35)

    assert math.isclose(double.calories, 2 * single.calories)
    assert math.isclose(double.carbs, 2 * single.carbs)
    assert math.isclose(double.fat, 2 * single.fat)
    assert math.isclose(double.protein, 2 * single.protein)


def test_scale_150g_of_100g_food() -> None:
    scaled = scale_nutrition(make_food(), 150)

    assert scaled.calories == 300
    assert scaled.carbs == 30
    assert scaled.fat == 7.5
    assert scaled.protein == 15


def test_scale_uses_entry_id_when_given() -> None:
    food = make_food()

    assert scale_nutrition(food, 50).id == food.id
    assert scale_nutrition(food, 50, entry_id="entry-9").id == "entry-9"
    assert scale_nutrition(food, 50, entry_id="entry-9").food_id == food.id


@pytest.mark.parametrize("serving_size", [0, -10, math.inf, math.nan])
def test_scale_rejects_invalid_serving_size(serving_size: float) -> None:
    with pytest.raises(NutritionValidationError):
        scale_nutrition(make_food(serving_size=serving_size), 100)


@pytest.mark.parametrize("quantity", [math.inf, -math.inf, math.nan, -1])
def test_scale_rejects_invalid_quantity(quantity: float) -> None:
    with pytest.raises(NutritionValidationError):
        scale_nutrition(make_food(), quantity)


def test_target_grams_use_4_9_4_calories_per_gram() -> None:
    targets = compute_targets(GOALS)

    assert targets.calories == 2000
    assert targets.carbs == 250
    assert math.isclose(targets.fat, 400 / 9)
    assert targets.protein == 150


def test_empty_day_remaining_equals_targets() -> None:
    summary = summarize_day([], {}, GOALS)
    targets = compute_targets(GOALS)

    assert summary.total_calories == 0
    assert summary.total_carbs == 0
    assert summary.total_fat == 0
    assert summary.total_protein == 0
    assert summary.remaining_calories == targets.calories
    assert summary.remaining_carbs == targets.carbs
    assert summary.remaining_fat == targets.fat
    assert summary.remaining_protein == targets.protein


def test_two_entries_end_to_end() -> None:
    food = make_food()
    entries = [_entry("e1", food.id, 150), _entry("e2", food.id, 150)]

    summary = summarize_day(entries, {food.id: food}, GOALS)

    assert summary.total_calories == 600
    assert summary.total_carbs == 60
    assert summary.total_fat == 15
    assert summary.total_protein == 30
    assert summary.remaining_calories == 1400
    assert summary.remaining_carbs == 190
    assert summary.remaining_protein == 120


def test_entries_with_unknown_food_are_excluded() -> None:
    food = make_food()
    entries = [_entry("e1", food.id, 100), _entry("e2", "missing", 500)]

    summary = summarize_day(entries, {food.id: food}, GOALS)
    scaled = scale_entries(entries, {food.id: food})

    assert summary.total_calories == 200
    assert [item.id for item in scaled] == ["e1"]


def test_remaining_is_clamped_at_zero() -> None:
    food = make_food(calories=900, carbs=0, fat=100, protein=0)
    entries = [_entry("e1", food.id, 300)]

    summary = summarize_day(entries, {food.id: food}, GOALS)

    assert summary.total_calories == 2700
    assert summary.remaining_calories == 0
    assert summary.remaining_fat == 0
    assert summary.remaining_carbs == 250


def test_aggregation_is_order_independent() -> None:
    rice = make_food(id="rice", calories=130, carbs=28.2, fat=0.3, protein=2.7)
    oil = make_food(id="oil", calories=884, carbs=0, fat=100, protein=0)
    chicken = make_food(id="chicken", calories=165, carbs=0, fat=3.6, protein=31)
    foods = {food.id: food for food in (rice, oil, chicken)}
    entries = [
        _entry("a", "rice", 180),
        _entry("b", "oil", 13.5),
        _entry("c", "chicken", 142),
    ]

    forward = summarize_day(entries, foods, GOALS)
    backward = summarize_day(list(reversed(entries)), foods, GOALS)

    assert math.isclose(forward.total_calories, backward.total_calories)
    assert math.isclose(forward.total_carbs, backward.total_carbs)
    assert math.isclose(forward.total_fat, backward.total_fat)
    assert math.isclose(forward.total_protein, backward.total_protein)


def test_percentages_not_summing_to_100_are_used_as_given() -> None:
    goals = MacroGoalSettings(
        daily_calorie_goal=1000,
        carb_percentage=80,
        fat_percentage=80,
        protein_percentage=80,
    )

    summary = summarize_day([], {}, goals)

    assert summary.remaining_carbs == 200
    assert math.isclose(summary.remaining_fat, 800 / 9)


def test_calories_from_macros() -> None:
    assert calories_from_macros(carbs=20, fat=5, protein=10) == 165


def test_macro_percentages() -> None:
    assert macro_percentages(0, 0, 0).carbs == 0
    shares = macro_percentages(carbs=50, fat=25, protein=25)
    assert (shares.carbs, shares.fat, shares.protein) == (50, 25, 25)
