"""Maintenance for stored daily logs."""

import logging
from dataclasses import dataclass, replace

from macro_tracker.domain.foods import DailyLog
from macro_tracker.domain.maintenance import LogCheckReport, LogProblem
from macro_tracker.services.daily_logs import DailyLogRepository
from macro_tracker.services.foods import FoodRepository
from macro_tracker.services.nutrition import has_valid_serving_size

_logger = logging.getLogger(__name__)


@dataclass
class LogMaintenanceService:
    """Finds and removes malformed log data and entries for missing foods."""

    log_repository: DailyLogRepository
    food_repository: FoodRepository

    def check(self) -> LogCheckReport:
        """Report malformed logs, orphaned entries and unusable foods."""
        report, _ = self._scan()
        return report

    def repair(self) -> LogCheckReport:
        """Back up the logs, drop what cannot be used and save the result."""
        report, cleaned = self._scan()
        removable = [problem for problem in report.problems if problem.removable]
        for problem in report.problems:
            if not problem.removable:
                _logger.warning("Needs manual correction: %s", problem.message)
        if not removable:
            return report

        backup_ref = self.log_repository.backup()
        self.log_repository.replace_logs(cleaned)
        for problem in removable:
            _logger.warning("Removed: %s", problem.message)
        return replace(report, backup_ref=backup_ref)

    def _scan(self) -> tuple[LogCheckReport, list[DailyLog]]:
        logs, problems = self.log_repository.load_logs()
        foods = self.food_repository.list_foods()
        known_ids = {food.id for food in foods}
        problems = [
            *problems,
            *(
                LogProblem(kind="invalid_food", food_id=food.id)
                for food in foods
                if not has_valid_serving_size(food)
            ),
        ]

        cleaned = []
        entries_scanned = sum(
            1 for problem in problems if problem.kind == "invalid_entry"
        )
        for log in logs:
            kept = []
            for entry in log.entries:
                entries_scanned += 1
                if entry.food_id in known_ids:
                    kept.append(entry)
                else:
                    problems.append(
                        LogProblem(
                            kind="missing_food",
                            log_date=log.date.isoformat(),
                            entry_id=entry.id,
                            food_id=entry.food_id,
                        )
                    )
            cleaned.append(replace(log, entries=kept))

        logs_scanned = len(logs) + sum(
            1 for problem in problems if problem.kind == "invalid_log"
        )
        report = LogCheckReport(
            logs_scanned=logs_scanned,
            entries_scanned=entries_scanned,
            problems=problems,
        )
        return report, cleaned
