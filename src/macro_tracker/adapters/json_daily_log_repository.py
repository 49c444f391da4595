"""File-backed repository for daily logs."""

import logging
import math
from dataclasses import dataclass
from datetime import date

from macro_tracker.adapters.json_store import JsonFileStore
from macro_tracker.domain.foods import DailyLog, FoodEntry
from macro_tracker.domain.maintenance import LogProblem
from macro_tracker.services.daily_logs import DailyLogRepository

_logger = logging.getLogger(__name__)


@dataclass
class JsonDailyLogRepository(DailyLogRepository):
    """Stores daily logs as a JSON array in ``daily-logs.json``."""

    store: JsonFileStore

    def list_logs(self) -> list[DailyLog]:
        """Return all parseable daily logs, skipping malformed rows."""
        logs, problems = self.load_logs()
        for problem in problems:
            _logger.warning("Skipped stored log data: %s", problem.message)
        return logs

    def load_logs(self) -> tuple[list[DailyLog], list[LogProblem]]:
        """Parse every stored row, collecting the ones that cannot be used."""
        logs: list[DailyLog] = []
        problems: list[LogProblem] = []
        for row in _rows(self.store.read()):
            log, row_problems = _parse_log(row)
            problems.extend(row_problems)
            if log is not None:
                logs.append(log)
        return logs, problems

    def get_log(self, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""
        for log in self.list_logs():
            if log.date == log_date:
                return log
        return None

    def save_log(self, log: DailyLog) -> DailyLog:
        """Replace the log for the same date, or append it."""
        key = log.date.isoformat()

        def mutate(data: object) -> list[object]:
            rows = _rows(data)
            for index, row in enumerate(rows):
                if isinstance(row, dict) and row.get("date") == key:
                    rows[index] = _serialize_log(log)
                    return rows
            return [*rows, _serialize_log(log)]

        self.store.update(mutate)
        return log

    def replace_logs(self, logs: list[DailyLog]) -> None:
        """Overwrite the file with the given logs."""
        self.store.write([_serialize_log(log) for log in logs])

    def backup(self) -> str | None:
        """Copy the log file alongside the original."""
        return self.store.backup()


def _rows(data: object) -> list[object]:
    return list(data) if isinstance(data, list) else []


def _serialize_log(log: DailyLog) -> dict[str, object]:
    return {
        "id": log.id,
        "date": log.date.isoformat(),
        "entries": [
            {
                "id": entry.id,
                "foodId": entry.food_id,
                "quantity": entry.quantity,
                "date": entry.date.isoformat(),
            }
            for entry in log.entries
        ],
    }


def _parse_log(row: object) -> tuple[DailyLog | None, list[LogProblem]]:
    """Parse a stored log row, reporting malformed parts instead of raising."""
    if not isinstance(row, dict):
        return None, [LogProblem(kind="invalid_log")]
    raw_date = row.get("date")
    log_date = _parse_date(raw_date)
    raw_entries = row.get("entries")
    if not row.get("id") or log_date is None or not isinstance(raw_entries, list):
        label = str(raw_date) if raw_date else None
        return None, [LogProblem(kind="invalid_log", log_date=label)]

    entries = []
    problems = []
    for raw in raw_entries:
        entry = _parse_entry(raw, log_date)
        if entry is not None:
            entries.append(entry)
            continue
        entry_id = raw.get("id") if isinstance(raw, dict) else None
        problems.append(
            LogProblem(
                kind="invalid_entry",
                log_date=log_date.isoformat(),
                entry_id=str(entry_id) if entry_id else None,
            )
        )
    return DailyLog(id=str(row["id"]), date=log_date, entries=entries), problems


def _parse_entry(raw: object, log_date: date) -> FoodEntry | None:
    if not isinstance(raw, dict) or not raw.get("id") or not raw.get("foodId"):
        return None
    quantity = _parse_quantity(raw.get("quantity"))
    if quantity is None:
        return None
    return FoodEntry(
        id=str(raw["id"]),
        food_id=str(raw["foodId"]),
        quantity=quantity,
        date=_parse_date(raw.get("date")) or log_date,
    )


def _parse_date(value: object) -> date | None:
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _parse_quantity(value: object) -> float | None:
    # Numeric strings are accepted, booleans are not.
    if isinstance(value, bool) or not isinstance(value, int | float | str):
        return None
    try:
        quantity = float(value)
    except ValueError:
        return None
    if not math.isfinite(quantity) or quantity < 0:
        return None
    return quantity
