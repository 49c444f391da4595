"""Domain errors raised by services and translated by the API layer."""


class NutritionValidationError(ValueError):
    """Raised when a food or quantity cannot be scaled."""


class FoodNotFoundError(LookupError):
    """Raised when a food id is not in the catalog."""

    def __init__(self, food_id: str) -> None:
        super().__init__(f"Food not found: {food_id}")
        self.food_id = food_id


class DailyLogNotFoundError(LookupError):
    """Raised when no daily log exists for a date."""

    def __init__(self, log_date: object) -> None:
        super().__init__(f"Daily log not found: {log_date}")
        self.log_date = log_date


class FoodEntryNotFoundError(LookupError):
    """Raised when an entry id is not in a daily log."""

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"Food entry not found: {entry_id}")
        self.entry_id = entry_id


class InvalidMacroSplitError(ValueError):
    """Raised when macro percentages do not add up to 100."""

    def __init__(self, total: float) -> None:
        super().__init__("Macro percentages must add up to 100%")
        self.total = total


class InvalidSettingsError(ValueError):
    """Raised when a settings value is out of range."""


class StorageError(RuntimeError):
    """Raised when a persisted store cannot be read."""
