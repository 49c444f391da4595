"""Domain models for daily log maintenance."""

from dataclasses import dataclass, field
from typing import Literal

ProblemKind = Literal["missing_food", "invalid_log", "invalid_entry", "invalid_food"]

# Kinds that repair fixes by dropping the stored log or entry.
REMOVABLE_KINDS: frozenset[ProblemKind] = frozenset(
    {"missing_food", "invalid_log", "invalid_entry"}
)


@dataclass(frozen=True)
class LogProblem:
    """A stored log, entry or food that cannot be used as-is.

    ``log_date`` is the date as stored, which may itself be malformed.
    """

    kind: ProblemKind
    log_date: str | None = None
    entry_id: str | None = None
    food_id: str | None = None

    @property
    def removable(self) -> bool:
        return self.kind in REMOVABLE_KINDS

    @property
    def message(self) -> str:
        log_date = self.log_date or "UNKNOWN"
        if self.kind == "invalid_log":
            return f"Log with date {log_date} has invalid structure"
        if self.kind == "invalid_entry":
            return (
                f"Entry {self.entry_id or 'UNKNOWN'} in log {log_date} "
                "has invalid structure"
            )
        if self.kind == "invalid_food":
            return f"Food {self.food_id} has an invalid serving size"
        return (
            f"Entry {self.entry_id} in log {log_date} "
            f"references non-existent food {self.food_id}"
        )


@dataclass(frozen=True)
class LogCheckReport:
    """Result of validating stored logs against the food catalog."""

    logs_scanned: int
    entries_scanned: int
    problems: list[LogProblem] = field(default_factory=list)
    backup_ref: str | None = None

    @property
    def is_valid(self) -> bool:
        return not self.problems
