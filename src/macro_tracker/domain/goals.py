"""Macro goal settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroGoalSettings:
    """Daily calorie goal split across carbs, fat and protein."""

    daily_calorie_goal: int
    carb_percentage: float
    fat_percentage: float
    protein_percentage: float

    @property
    def percentage_total(self) -> float:
        return self.carb_percentage + self.fat_percentage + self.protein_percentage


DEFAULT_MACRO_GOALS = MacroGoalSettings(
    daily_calorie_goal=2400,
    carb_percentage=40,
    fat_percentage=15,
    protein_percentage=45,
)
