"""Nutrition scaling and daily aggregation."""

import math
from collections.abc import Iterable, Mapping

from macro_tracker.domain.errors import NutritionValidationError
from macro_tracker.domain.foods import Food, FoodEntry
from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.domain.nutrition import (
    DailySummary,
    MacroPercentages,
    MacroTargets,
    ScaledNutrition,
)

CALORIES_PER_GRAM_CARBS = 4
CALORIES_PER_GRAM_FAT = 9
CALORIES_PER_GRAM_PROTEIN = 4


def calories_from_macros(carbs: float, fat: float, protein: float) -> float:
    """Return calories implied by macro grams."""
    return (
        carbs * CALORIES_PER_GRAM_CARBS
        + fat * CALORIES_PER_GRAM_FAT
        + protein * CALORIES_PER_GRAM_PROTEIN
    )


def has_valid_serving_size(food: Food) -> bool:
    """Return whether the food's serving size can be scaled against."""
    return math.isfinite(food.serving_size) and food.serving_size > 0


def scale_nutrition(
    food: Food, quantity: float, entry_id: str | None = None
) -> ScaledNutrition:
    """Scale a food's reference nutrition to a logged quantity.

    The result carries ``entry_id`` when given so it can be traced back to a
    log entry, otherwise the food id. Values are not rounded.
    """
    if not has_valid_serving_size(food):
        raise NutritionValidationError(
            f"Food {food.id} has non-positive serving size {food.serving_size}"
        )
    if not math.isfinite(quantity):
        raise NutritionValidationError(f"Quantity must be finite, got {quantity}")
    if quantity < 0:
        raise NutritionValidationError(f"Quantity must not be negative, got {quantity}")

    multiplier = quantity / food.serving_size
    return ScaledNutrition(
        id=entry_id or food.id,
        food_id=food.id,
        name=food.name,
        unit=food.unit,
        serving_size=food.serving_size,
        quantity=quantity,
        multiplier=multiplier,
        calories=food.calories * multiplier,
        carbs=food.carbs * multiplier,
        fat=food.fat * multiplier,
        protein=food.protein * multiplier,
    )


def scale_entries(
    entries: Iterable[FoodEntry], foods: Mapping[str, Food]
) -> list[ScaledNutrition]:
    """Scale each entry whose food resolves; entries with unknown foods are dropped."""
    scaled = []
    for entry in entries:
        food = foods.get(entry.food_id)
        if food is None:
            continue
        scaled.append(scale_nutrition(food, entry.quantity, entry_id=entry.id))
    return scaled


def compute_targets(settings: MacroGoalSettings) -> MacroTargets:
    """Derive daily calorie and macro gram targets from goal settings."""
    goal = settings.daily_calorie_goal
    return MacroTargets(
        calories=goal,
        carbs=(settings.carb_percentage / 100) * goal / CALORIES_PER_GRAM_CARBS,
        fat=(settings.fat_percentage / 100) * goal / CALORIES_PER_GRAM_FAT,
        protein=(settings.protein_percentage / 100) * goal / CALORIES_PER_GRAM_PROTEIN,
    )


def summarize_scaled(
    scaled: Iterable[ScaledNutrition], settings: MacroGoalSettings
) -> DailySummary:
    """Sum scaled entries and compute remaining values against targets."""
    total_calories = 0.0
    total_carbs = 0.0
    total_fat = 0.0
    total_protein = 0.0
    for item in scaled:
        total_calories += item.calories
        total_carbs += item.carbs
        total_fat += item.fat
        total_protein += item.protein

    targets = compute_targets(settings)
    return DailySummary(
        total_calories=total_calories,
        total_carbs=total_carbs,
        total_fat=total_fat,
        total_protein=total_protein,
        remaining_calories=max(0.0, targets.calories - total_calories),
        remaining_carbs=max(0.0, targets.carbs - total_carbs),
        remaining_fat=max(0.0, targets.fat - total_fat),
        remaining_protein=max(0.0, targets.protein - total_protein),
    )


def summarize_day(
    entries: Iterable[FoodEntry],
    foods: Mapping[str, Food],
    settings: MacroGoalSettings,
) -> DailySummary:
    """Fold a day's entries into totals and remaining-to-target values."""
    return summarize_scaled(scale_entries(entries, foods), settings)


def macro_percentages(carbs: float, fat: float, protein: float) -> MacroPercentages:
    """Return each macro's share of the combined grams, in whole percent."""
    total = carbs + fat + protein
    if total == 0:
        return MacroPercentages(carbs=0, fat=0, protein=0)
    return MacroPercentages(
        carbs=round(carbs / total * 100),
        fat=round(fat / total * 100),
        protein=round(protein / total * 100),
    )
