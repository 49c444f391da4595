"""Supabase repository for daily logs and their entries."""

from collections import defaultdict
from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from macro_tracker.domain.foods import DailyLog, FoodEntry
from macro_tracker.domain.maintenance import LogProblem
from macro_tracker.services.daily_logs import DailyLogRepository


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation for daily logs.

    Logs live in ``daily_logs`` (one row per date) and entries in
    ``food_entries`` ordered by ``position``.
    """

    client: Client

    def list_logs(self) -> list[DailyLog]:
        """Return all logs with their entries."""
        logs_response = (
            self.client.table("daily_logs")
            .select("id, log_date")
            .order("log_date")
            .execute()
        )
        entries_response = (
            self.client.table("food_entries")
            .select("id, daily_log_id, food_id, quantity, log_date, position")
            .order("position")
            .execute()
        )
        entries_by_log: dict[str, list[FoodEntry]] = defaultdict(list)
        for row in entries_response.data or []:
            entries_by_log[str(row["daily_log_id"])].append(_parse_entry(row))
        return [
            DailyLog(
                id=str(row["id"]),
                date=date.fromisoformat(str(row["log_date"])),
                entries=entries_by_log.get(str(row["id"]), []),
            )
            for row in logs_response.data or []
        ]

    def load_logs(self) -> tuple[list[DailyLog], list[LogProblem]]:
        """Return all logs. Table constraints keep stored rows well formed."""
        return self.list_logs(), []

    def get_log(self, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""
        response = (
            self.client.table("daily_logs")
            .select("id, log_date")
            .eq("log_date", log_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        log_id = str(response.data[0]["id"])
        entries_response = (
            self.client.table("food_entries")
            .select("id, daily_log_id, food_id, quantity, log_date, position")
            .eq("daily_log_id", log_id)
            .order("position")
            .execute()
        )
        return DailyLog(
            id=log_id,
            date=log_date,
            entries=[_parse_entry(row) for row in entries_response.data or []],
        )

    def save_log(self, log: DailyLog) -> DailyLog:
        """Upsert the log row and its entries, then prune removed entries.

        Entries are written before anything is deleted so a failed write
        leaves the previous entries in place.
        """
        response = (
            self.client.table("daily_logs")
            .upsert({"id": log.id, "log_date": log.date.isoformat()})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save daily log")

        payload = [
            {
                "id": entry.id,
                "daily_log_id": log.id,
                "food_id": entry.food_id,
                "quantity": entry.quantity,
                "log_date": entry.date.isoformat(),
                "position": position,
            }
            for position, entry in enumerate(log.entries)
        ]
        if payload:
            response = self.client.table("food_entries").upsert(payload).execute()
            if not response.data:
                raise RuntimeError("Failed to save food entries")

        stale = self.client.table("food_entries").delete().eq("daily_log_id", log.id)
        if payload:
            stale = stale.not_.in_("id", [row["id"] for row in payload])
        stale.execute()
        return log

    def replace_logs(self, logs: list[DailyLog]) -> None:
        """Save the given logs and delete any others."""
        keep_ids = {log.id for log in logs}
        for existing in self.list_logs():
            if existing.id not in keep_ids:
                self.client.table("food_entries").delete().eq(
                    "daily_log_id", existing.id
                ).execute()
                self.client.table("daily_logs").delete().eq(
                    "id", existing.id
                ).execute()
        for log in logs:
            self.save_log(log)

    def backup(self) -> str | None:
        """Store a snapshot of every log in ``daily_log_backups``."""
        snapshot = [
            {
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
            for log in self.list_logs()
        ]
        response = (
            self.client.table("daily_log_backups")
            .insert(
                {
                    "created_at": datetime.now(tz=UTC).isoformat(),
                    "payload": snapshot,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to back up daily logs")
        return str(response.data[0]["id"])


def _parse_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=str(row["id"]),
        food_id=str(row["food_id"]),
        quantity=float(row.get("quantity", 0.0)),
        date=date.fromisoformat(str(row["log_date"])),
    )
