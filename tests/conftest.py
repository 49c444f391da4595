"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date

import pytest

from macro_tracker.config import Settings
from macro_tracker.containers import AppContainer, wire_services
from macro_tracker.domain.foods import DailyLog, Food
from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.domain.maintenance import LogProblem
from macro_tracker.services.daily_logs import DailyLogRepository
from macro_tracker.services.foods import FoodRepository
from macro_tracker.services.macro_settings import MacroSettingsRepository


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food repository for tests."""

    foods: dict[str, Food] = field(default_factory=dict)

    def list_foods(self) -> list[Food]:
        return list(self.foods.values())

    def get_food(self, food_id: str) -> Food | None:
        return self.foods.get(food_id)

    def create_food(self, food: Food) -> Food:
        self.foods[food.id] = food
        return food

    def update_food(self, food: Food) -> Food:
        self.foods[food.id] = food
        return food

    def delete_food(self, food_id: str) -> bool:
        return self.foods.pop(food_id, None) is not None


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[date, DailyLog] = field(default_factory=dict)
    backups: list[list[DailyLog]] = field(default_factory=list)

    def list_logs(self) -> list[DailyLog]:
        return list(self.logs.values())

    def load_logs(self) -> tuple[list[DailyLog], list[LogProblem]]:
        return self.list_logs(), []

    def get_log(self, log_date: date) -> DailyLog | None:
        return self.logs.get(log_date)

    def save_log(self, log: DailyLog) -> DailyLog:
        self.logs[log.date] = replace(log, entries=list(log.entries))
        return log

    def replace_logs(self, logs: list[DailyLog]) -> None:
        self.logs = {log.date: log for log in logs}

    def backup(self) -> str | None:
        self.backups.append(list(self.logs.values()))
        return f"backup-{len(self.backups)}"


@dataclass
class InMemoryMacroSettingsRepository(MacroSettingsRepository):
    """In-memory settings repository for tests."""

    settings: MacroGoalSettings | None = None

    def get_settings(self) -> MacroGoalSettings | None:
        return self.settings

    def save_settings(self, settings: MacroGoalSettings) -> None:
        self.settings = settings


def make_food(**overrides: object) -> Food:
    """Return a 100 g reference food with overridable fields."""
    values: dict[str, object] = {
        "id": "food-1",
        "name": "Greek Yogurt",
        "calories": 200,
        "carbs": 20,
        "fat": 5,
        "protein": 10,
        "unit": "g",
        "serving_size": 100,
    }
    values.update(overrides)
    return Food(**values)  # type: ignore[arg-type]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        admin_token="admin-token",
        data_dir=tmp_path / "data",
        storage_backend="json",
    )


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def log_repository() -> InMemoryDailyLogRepository:
    return InMemoryDailyLogRepository()


@pytest.fixture
def settings_repository() -> InMemoryMacroSettingsRepository:
    return InMemoryMacroSettingsRepository(
        settings=MacroGoalSettings(
            daily_calorie_goal=2000,
            carb_percentage=50,
            fat_percentage=20,
            protein_percentage=30,
        )
    )


@pytest.fixture
def container(
    settings: Settings,
    food_repository: InMemoryFoodRepository,
    log_repository: InMemoryDailyLogRepository,
    settings_repository: InMemoryMacroSettingsRepository,
) -> AppContainer:
    return wire_services(
        settings, food_repository, log_repository, settings_repository
    )
