"""File-backed repository for macro goal settings."""

from dataclasses import dataclass

from macro_tracker.adapters.json_store import JsonFileStore
from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.services.macro_settings import MacroSettingsRepository


@dataclass
class JsonMacroSettingsRepository(MacroSettingsRepository):
    """Stores settings as a JSON object in ``settings.json``."""

    store: JsonFileStore

    def get_settings(self) -> MacroGoalSettings | None:
        """Return stored settings, if the file holds an object."""
        data = self.store.read()
        if not isinstance(data, dict) or not data:
            return None
        return parse_settings(data)

    def save_settings(self, settings: MacroGoalSettings) -> None:
        """Overwrite the settings file."""
        self.store.write(serialize_settings(settings))


def serialize_settings(settings: MacroGoalSettings) -> dict[str, object]:
    """Return the camelCase representation used on disk and over HTTP."""
    return {
        "dailyCalorieGoal": settings.daily_calorie_goal,
        "carbPercentage": settings.carb_percentage,
        "fatPercentage": settings.fat_percentage,
        "proteinPercentage": settings.protein_percentage,
    }


def parse_settings(data: dict[str, object]) -> MacroGoalSettings:
    """Parse a camelCase settings object."""
    return MacroGoalSettings(
        daily_calorie_goal=int(data["dailyCalorieGoal"]),
        carb_percentage=float(data["carbPercentage"]),
        fat_percentage=float(data["fatPercentage"]),
        protein_percentage=float(data["proteinPercentage"]),
    )
