"""Supabase repository for macro goal settings."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from macro_tracker.domain.goals import MacroGoalSettings
from macro_tracker.services.macro_settings import MacroSettingsRepository

_SETTINGS_ROW_ID = 1


@dataclass
class SupabaseMacroSettingsRepository(MacroSettingsRepository):
    """Supabase implementation storing a single settings row."""

    client: Client

    def get_settings(self) -> MacroGoalSettings | None:
        """Return the stored settings row, if any."""
        response = (
            self.client.table("macro_settings")
            .select(
                "daily_calorie_goal, carb_percentage, fat_percentage, "
                "protein_percentage"
            )
            .eq("id", _SETTINGS_ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return MacroGoalSettings(
            daily_calorie_goal=int(row["daily_calorie_goal"]),
            carb_percentage=float(row["carb_percentage"]),
            fat_percentage=float(row["fat_percentage"]),
            protein_percentage=float(row["protein_percentage"]),
        )

    def save_settings(self, settings: MacroGoalSettings) -> None:
        """Upsert the settings row."""
        self.client.table("macro_settings").upsert(
            {
                "id": _SETTINGS_ROW_ID,
                "daily_calorie_goal": settings.daily_calorie_goal,
                "carb_percentage": settings.carb_percentage,
                "fat_percentage": settings.fat_percentage,
                "protein_percentage": settings.protein_percentage,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
