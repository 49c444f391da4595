"""Daily log endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from macro_tracker.api.models import (
    DailyLogOut,
    DayViewOut,
    EntryCreate,
    EntryOut,
    EntryUpdate,
)

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.get("")
async def list_logs(request: Request) -> list[DailyLogOut]:
    """Return every stored daily log."""
    container: AppContainer = request.app.state.container
    logs = container.daily_log_service.list_logs()
    return [DailyLogOut.from_domain(log) for log in logs]


@router.get("/{log_date}")
async def get_log(log_date: date, request: Request) -> DailyLogOut:
    """Return the log for a date, or an empty one when nothing is logged."""
    container: AppContainer = request.app.state.container
    return DailyLogOut.from_domain(container.daily_log_service.get_log(log_date))


@router.get("/{log_date}/summary")
async def get_day_summary(log_date: date, request: Request) -> DayViewOut:
    """Return scaled entries, totals, targets and remaining values for a date."""
    container: AppContainer = request.app.state.container
    return DayViewOut.from_domain(container.daily_log_service.get_day(log_date))


@router.post("/{log_date}/entries", status_code=status.HTTP_201_CREATED)
async def add_entry(
    log_date: date, payload: EntryCreate, request: Request
) -> EntryOut:
    """Log a quantity of a food on a date."""
    container: AppContainer = request.app.state.container
    entry = container.daily_log_service.add_entry(
        log_date, payload.food_id, payload.quantity
    )
    return EntryOut.from_domain(entry)


@router.put("/{log_date}/entries/{entry_id}")
async def update_entry(
    log_date: date, entry_id: str, payload: EntryUpdate, request: Request
) -> EntryOut:
    """Change the quantity of a logged entry."""
    container: AppContainer = request.app.state.container
    entry = container.daily_log_service.update_entry(
        log_date, entry_id, payload.quantity
    )
    return EntryOut.from_domain(entry)


@router.delete("/{log_date}/entries/{entry_id}")
async def delete_entry(
    log_date: date, entry_id: str, request: Request
) -> dict[str, str]:
    """Remove a logged entry."""
    container: AppContainer = request.app.state.container
    container.daily_log_service.delete_entry(log_date, entry_id)
    return {"message": "Food entry deleted successfully"}
