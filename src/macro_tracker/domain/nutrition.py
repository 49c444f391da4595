"""Nutrition domain models derived from foods and log entries."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ScaledNutrition:
    """Nutrition contributed by a logged quantity of a food.

    ``id`` is the log entry id when the value was computed for an entry,
    otherwise the food id.
    """

    id: str
    food_id: str
    name: str
    unit: str
    serving_size: float
    quantity: float
    multiplier: float
    calories: float
    carbs: float
    fat: float
    protein: float


@dataclass(frozen=True)
class MacroTargets:
    """Daily targets derived from macro goal settings."""

    calories: float
    carbs: float
    fat: float
    protein: float


@dataclass(frozen=True)
class DailySummary:
    """Consumed and remaining nutrition for one day."""

    total_calories: float
    total_carbs: float
    total_fat: float
    total_protein: float
    remaining_calories: float
    remaining_carbs: float
    remaining_fat: float
    remaining_protein: float


@dataclass(frozen=True)
class MacroPercentages:
    """Share of each macro in a gram total, in whole percent."""

    carbs: int
    fat: int
    protein: int


@dataclass(frozen=True)
class DayView:
    """Everything needed to render a day: entries, totals and targets."""

    date: date
    entries: list[ScaledNutrition]
    summary: DailySummary
    targets: MacroTargets
    percentages: MacroPercentages
    skipped_entry_ids: list[str]
