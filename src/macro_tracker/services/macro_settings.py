"""Macro goal settings service."""

import math
from dataclasses import dataclass, replace
from typing import Protocol

from macro_tracker.domain.errors import InvalidMacroSplitError, InvalidSettingsError
from macro_tracker.domain.goals import DEFAULT_MACRO_GOALS, MacroGoalSettings

_SETTINGS_FIELDS = (
    "daily_calorie_goal",
    "carb_percentage",
    "fat_percentage",
    "protein_percentage",
)


class MacroSettingsRepository(Protocol):
    """Persistence interface for macro goal settings."""

    def get_settings(self) -> MacroGoalSettings | None:
        """Return stored settings, if any."""

    def save_settings(self, settings: MacroGoalSettings) -> None:
        """Persist settings."""


@dataclass
class MacroSettingsService:
    """Service for reading and updating macro goal settings."""

    repository: MacroSettingsRepository

    def get_settings(self) -> MacroGoalSettings:
        """Return stored settings or the defaults when unset."""
        return self.repository.get_settings() or DEFAULT_MACRO_GOALS

    def update_settings(self, changes: dict[str, object]) -> MacroGoalSettings:
        """Merge changes into current settings and persist them.

        The merged percentages must add up to 100.
        """
        current = self.get_settings()
        updates = {
            key: value
            for key, value in changes.items()
            if key in _SETTINGS_FIELDS and value is not None
        }
        updated = replace(current, **updates)
        if updated.daily_calorie_goal <= 0:
            raise InvalidSettingsError("Daily calorie goal must be positive")
        total = updated.percentage_total
        if not math.isclose(total, 100, abs_tol=1e-9):
            raise InvalidMacroSplitError(total)
        self.repository.save_settings(updated)
        return updated

    def reset_settings(self) -> MacroGoalSettings:
        """Persist and return the default settings."""
        self.repository.save_settings(DEFAULT_MACRO_GOALS)
        return DEFAULT_MACRO_GOALS
