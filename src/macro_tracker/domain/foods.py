"""Domain models for the food catalog and daily logs."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Food:
    """Reference nutrition profile for one serving of a food."""

    id: str
    name: str
    calories: float
    carbs: float
    fat: float
    protein: float
    unit: str
    serving_size: float


@dataclass(frozen=True)
class FoodEntry:
    """A quantity of a food logged on a calendar date."""

    id: str
    food_id: str
    quantity: float
    date: date


@dataclass(frozen=True)
class DailyLog:
    """All food entries recorded for one calendar date."""

    id: str
    date: date
    entries: list[FoodEntry] = field(default_factory=list)
