"""Pydantic models for the HTTP API.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from macro_tracker.domain.foods import DailyLog, Food, FoodEntry
from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.domain.maintenance import LogCheckReport
from macro_tracker.domain.nutrition import DayView, ScaledNutrition


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FoodCreate(CamelModel):
    """Payload for creating a food."""

    name: str = Field(min_length=1)
    calories: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    carbs: float = Field(ge=0, allow_inf_nan=False)
    fat: float = Field(ge=0, allow_inf_nan=False)
    protein: float = Field(ge=0, allow_inf_nan=False)
    unit: str = Field(min_length=1)
    serving_size: float = Field(gt=0, allow_inf_nan=False)


class FoodUpdate(CamelModel):
    """Partial update for a food."""

    name: str | None = Field(default=None, min_length=1)
    calories: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    carbs: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    fat: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    protein: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    unit: str | None = Field(default=None, min_length=1)
    serving_size: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class FoodOut(CamelModel):
    id: str
    name: str
    calories: float
    carbs: float
    fat: float
    protein: float
    unit: str
    serving_size: float

    @classmethod
    def from_domain(cls, food: Food) -> "FoodOut":
        return cls(
            id=food.id,
            name=food.name,
            calories=food.calories,
            carbs=food.carbs,
            fat=food.fat,
            protein=food.protein,
            unit=food.unit,
            serving_size=food.serving_size,
        )


class EntryCreate(CamelModel):
    """Payload for logging a quantity of a food."""

    food_id: str = Field(min_length=1)
    quantity: float = Field(gt=0, allow_inf_nan=False)


class EntryUpdate(CamelModel):
    quantity: float = Field(gt=0, allow_inf_nan=False)


class EntryOut(CamelModel):
    id: str
    food_id: str
    quantity: float
    date: date

    @classmethod
    def from_domain(cls, entry: FoodEntry) -> "EntryOut":
        return cls(
            id=entry.id,
            food_id=entry.food_id,
            quantity=entry.quantity,
            date=entry.date,
        )


class DailyLogOut(CamelModel):
    id: str
    date: date
    entries: list[EntryOut]

    @classmethod
    def from_domain(cls, log: DailyLog) -> "DailyLogOut":
        return cls(
            id=log.id,
            date=log.date,
            entries=[EntryOut.from_domain(entry) for entry in log.entries],
        )


class SettingsUpdate(CamelModel):
    """Partial update for macro goal settings."""

    daily_calorie_goal: int | None = Field(default=None, gt=0)
    carb_percentage: float | None = Field(default=None, ge=0, le=100)
    fat_percentage: float | None = Field(default=None, ge=0, le=100)
    protein_percentage: float | None = Field(default=None, ge=0, le=100)


class SettingsOut(CamelModel):
    daily_calorie_goal: int
    carb_percentage: float
    fat_percentage: float
    protein_percentage: float

    @classmethod
    def from_domain(cls, settings: MacroGoalSettings) -> "SettingsOut":
        return cls(
            daily_calorie_goal=settings.daily_calorie_goal,
            carb_percentage=settings.carb_percentage,
            fat_percentage=settings.fat_percentage,
            protein_percentage=settings.protein_percentage,
        )


class ScaledNutritionOut(CamelModel):
    """A log entry joined with its food and scaled nutrition."""

    id: str
    food_id: str
    name: str
    unit: str
    serving_size: float
    quantity: float
    multiplier: float
    calculated_calories: float
    calculated_carbs: float
    calculated_fat: float
    calculated_protein: float

    @classmethod
    def from_domain(cls, scaled: ScaledNutrition) -> "ScaledNutritionOut":
        return cls(
            id=scaled.id,
            food_id=scaled.food_id,
            name=scaled.name,
            unit=scaled.unit,
            serving_size=scaled.serving_size,
            quantity=scaled.quantity,
            multiplier=scaled.multiplier,
            calculated_calories=scaled.calories,
            calculated_carbs=scaled.carbs,
            calculated_fat=scaled.fat,
            calculated_protein=scaled.protein,
        )


class DailySummaryOut(CamelModel):
    total_calories: float
    total_carbs: float
    total_fat: float
    total_protein: float
    remaining_calories: float
    remaining_carbs: float
    remaining_fat: float
    remaining_protein: float


class TargetsOut(CamelModel):
    calories: float
    carbs: float
    fat: float
    protein: float


class PercentagesOut(CamelModel):
    carbs_percentage: int
    fat_percentage: int
    protein_percentage: int


class DayViewOut(CamelModel):
    """Computed view of one day's log."""

    date: date
    entries: list[ScaledNutritionOut]
    summary: DailySummaryOut
    targets: TargetsOut
    macro_percentages: PercentagesOut
    skipped_entry_ids: list[str]

    @classmethod
    def from_domain(cls, view: DayView) -> "DayViewOut":
        summary = view.summary
        return cls(
            date=view.date,
            entries=[ScaledNutritionOut.from_domain(item) for item in view.entries],
            summary=DailySummaryOut(
                total_calories=summary.total_calories,
                total_carbs=summary.total_carbs,
                total_fat=summary.total_fat,
                total_protein=summary.total_protein,
                remaining_calories=summary.remaining_calories,
                remaining_carbs=summary.remaining_carbs,
                remaining_fat=summary.remaining_fat,
                remaining_protein=summary.remaining_protein,
            ),
            targets=TargetsOut(
                calories=view.targets.calories,
                carbs=view.targets.carbs,
                fat=view.targets.fat,
                protein=view.targets.protein,
            ),
            macro_percentages=PercentagesOut(
                carbs_percentage=view.percentages.carbs,
                fat_percentage=view.percentages.fat,
                protein_percentage=view.percentages.protein,
            ),
            skipped_entry_ids=view.skipped_entry_ids,
        )


class LogCheckOut(CamelModel):
    """Result of a log check or repair."""

    is_valid: bool
    logs_scanned: int
    entries_scanned: int
    problems: list[str]
    backup_ref: str | None = None

    @classmethod
    def from_domain(cls, report: LogCheckReport) -> "LogCheckOut":
        return cls(
            is_valid=report.is_valid,
            logs_scanned=report.logs_scanned,
            entries_scanned=report.entries_scanned,
            problems=[problem.message for problem in report.problems],
            backup_ref=report.backup_ref,
        )
