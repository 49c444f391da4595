"""Macro goal settings endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from macro_tracker.api.models import SettingsOut, SettingsUpdate

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
async def get_settings(request: Request) -> SettingsOut:
    """Return the current macro goal settings."""
    container: AppContainer = request.app.state.container
    return SettingsOut.from_domain(container.macro_settings_service.get_settings())


@router.put("")
async def update_settings(payload: SettingsUpdate, request: Request) -> SettingsOut:
    """Update settings; the resulting macro split must total 100%."""
    container: AppContainer = request.app.state.container
    updated = container.macro_settings_service.update_settings(
        payload.model_dump(exclude_unset=True)
    )
    return SettingsOut.from_domain(updated)


@router.post("/reset")
async def reset_settings(request: Request) -> SettingsOut:
    """Restore the default settings."""
    container: AppContainer = request.app.state.container
    return SettingsOut.from_domain(container.macro_settings_service.reset_settings())
