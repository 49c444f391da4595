"""Daily log service: entries per date and the computed day view."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import uuid4

from macro_tracker.domain.errors import DailyLogNotFoundError, FoodEntryNotFoundError
from macro_tracker.domain.foods import DailyLog, FoodEntry
from macro_tracker.domain.maintenance import LogProblem
from macro_tracker.domain.nutrition import DayView
from macro_tracker.services.foods import FoodCatalogService
from macro_tracker.services.macro_settings import MacroSettingsService
from macro_tracker.services.nutrition import (
    compute_targets,
    has_valid_serving_size,
    macro_percentages,
    scale_entries,
    summarize_scaled,
)

_logger = logging.getLogger(__name__)


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def list_logs(self) -> list[DailyLog]:
        """Return all daily logs."""

    def load_logs(self) -> tuple[list[DailyLog], list[LogProblem]]:
        """Return parseable logs and the structural problems found in the rest."""

    def get_log(self, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""

    def save_log(self, log: DailyLog) -> DailyLog:
        """Create or replace the log for its date."""

    def replace_logs(self, logs: list[DailyLog]) -> None:
        """Replace every stored log."""

    def backup(self) -> str | None:
        """Snapshot the stored logs and return a reference to the snapshot."""


@dataclass
class DailyLogService:
    """Application service for daily log operations."""

    repository: DailyLogRepository
    food_catalog: FoodCatalogService
    settings_service: MacroSettingsService

    def list_logs(self) -> list[DailyLog]:
        """Return all logs."""
        return self.repository.list_logs()

    def get_log(self, log_date: date) -> DailyLog:
        """Return the log for a date, or an unsaved empty log."""
        existing = self.repository.get_log(log_date)
        if existing is not None:
            return existing
        return DailyLog(id=str(uuid4()), date=log_date, entries=[])

    def add_entry(self, log_date: date, food_id: str, quantity: float) -> FoodEntry:
        """Append an entry, creating the day's log when needed."""
        log = self.get_log(log_date)
        entry = FoodEntry(
            id=str(uuid4()), food_id=food_id, quantity=quantity, date=log_date
        )
        self.repository.save_log(replace(log, entries=[*log.entries, entry]))
        _logger.info("Added entry %s on %s", entry.id, log_date.isoformat())
        return entry

    def update_entry(
        self, log_date: date, entry_id: str, quantity: float
    ) -> FoodEntry:
        """Change the quantity of an existing entry."""
        log = self._require_log(log_date)
        updated: FoodEntry | None = None
        entries = []
        for entry in log.entries:
            if entry.id == entry_id:
                updated = replace(entry, quantity=quantity)
                entries.append(updated)
            else:
                entries.append(entry)
        if updated is None:
            raise FoodEntryNotFoundError(entry_id)
        self.repository.save_log(replace(log, entries=entries))
        return updated

    def delete_entry(self, log_date: date, entry_id: str) -> None:
        """Remove an entry from a day's log."""
        log = self._require_log(log_date)
        entries = [entry for entry in log.entries if entry.id != entry_id]
        if len(entries) == len(log.entries):
            raise FoodEntryNotFoundError(entry_id)
        self.repository.save_log(replace(log, entries=entries))
        _logger.info("Deleted entry %s on %s", entry_id, log_date.isoformat())

    def get_day(self, log_date: date) -> DayView:
        """Compute scaled entries, totals and targets for a date."""
        log = self.get_log(log_date)
        foods = {
            food_id: food
            for food_id, food in self.food_catalog.foods_by_id().items()
            if has_valid_serving_size(food)
        }
        settings = self.settings_service.get_settings()

        scaled = scale_entries(log.entries, foods)
        skipped = [entry.id for entry in log.entries if entry.food_id not in foods]
        if skipped:
            _logger.warning(
                "Skipped %s entries with unknown or unusable foods on %s: %s",
                len(skipped),
                log_date.isoformat(),
                ", ".join(skipped),
            )
        summary = summarize_scaled(scaled, settings)
        return DayView(
            date=log_date,
            entries=scaled,
            summary=summary,
            targets=compute_targets(settings),
            percentages=macro_percentages(
                summary.total_carbs, summary.total_fat, summary.total_protein
            ),
            skipped_entry_ids=skipped,
        )

    def _require_log(self, log_date: date) -> DailyLog:
        log = self.repository.get_log(log_date)
        if log is None:
            raise DailyLogNotFoundError(log_date)
        return log
