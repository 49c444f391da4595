"""Tests for the daily log service."""

import logging
from datetime import date

import pytest

from macro_tracker.domain.errors import DailyLogNotFoundError, FoodEntryNotFoundError
from tests.conftest import make_food

DAY = date(2025, 3, 24)


def test_get_log_returns_unsaved_empty_log(container, log_repository) -> None:
    log = container.daily_log_service.get_log(DAY)

    assert log.date == DAY
    assert log.entries == []
    assert log_repository.logs == {}


def test_add_entry_creates_log(container, log_repository) -> None:
    service = container.daily_log_service

    first = service.add_entry(DAY, "food-1", 150)
    second = service.add_entry(DAY, "food-1", 50)

    stored = log_repository.logs[DAY]
    assert [entry.id for entry in stored.entries] == [first.id, second.id]
    assert first.date == DAY
    assert first.quantity == 150


def test_update_entry_changes_quantity(container, log_repository) -> None:
    service = container.daily_log_service
    entry = service.add_entry(DAY, "food-1", 150)

    updated = service.update_entry(DAY, entry.id, 75)

    assert updated.id == entry.id
    assert updated.quantity == 75
    assert log_repository.logs[DAY].entries[0].quantity == 75


def test_update_and_delete_missing(container) -> None:
    service = container.daily_log_service

    with pytest.raises(DailyLogNotFoundError):
        service.update_entry(DAY, "missing", 1)
    with pytest.raises(DailyLogNotFoundError):
        service.delete_entry(DAY, "missing")

    service.add_entry(DAY, "food-1", 10)
    with pytest.raises(FoodEntryNotFoundError):
        service.update_entry(DAY, "missing", 1)
    with pytest.raises(FoodEntryNotFoundError):
        service.delete_entry(DAY, "missing")


def test_delete_entry(container, log_repository) -> None:
    service = container.daily_log_service
    keep = service.add_entry(DAY, "food-1", 10)
    drop = service.add_entry(DAY, "food-1", 20)

    service.delete_entry(DAY, drop.id)

    assert [entry.id for entry in log_repository.logs[DAY].entries] == [keep.id]


def test_get_day_computes_summary(container, food_repository) -> None:
    food = make_food()
    food_repository.create_food(food)
    service = container.daily_log_service
    service.add_entry(DAY, food.id, 150)
    service.add_entry(DAY, food.id, 150)

    view = service.get_day(DAY)

    assert view.summary.total_calories == 600
    assert view.summary.total_carbs == 60
    assert view.summary.remaining_carbs == 190
    assert view.targets.carbs == 250
    assert [item.calories for item in view.entries] == [300, 300]
    assert view.percentages.carbs == round(60 / 105 * 100)
    assert view.skipped_entry_ids == []


def test_get_day_skips_unknown_foods_with_warning(
    container, food_repository, caplog, monkeypatch
) -> None:
    monkeypatch.setattr(logging.getLogger("macro_tracker"), "propagate", True)
    food = make_food()
    food_repository.create_food(food)
    service = container.daily_log_service
    service.add_entry(DAY, food.id, 100)
    orphan = service.add_entry(DAY, "deleted-food", 100)

    with caplog.at_level(logging.WARNING, logger="macro_tracker"):
        view = service.get_day(DAY)

    assert view.summary.total_calories == 200
    assert view.skipped_entry_ids == [orphan.id]
    assert orphan.id in caplog.text


def test_get_day_with_no_entries(container) -> None:
    view = container.daily_log_service.get_day(DAY)

    assert view.entries == []
    assert view.summary.total_calories == 0
    assert view.summary.remaining_calories == 2000
    assert view.summary.remaining_protein == view.targets.protein
