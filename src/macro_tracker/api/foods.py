"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, status

from macro_tracker.api.models import FoodCreate, FoodOut, FoodUpdate

if TYPE_CHECKING:
    from macro_tracker.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.get("")
async def list_foods(request: Request) -> list[FoodOut]:
    """Return every food in the catalog."""
    container: AppContainer = request.app.state.container
    return [FoodOut.from_domain(food) for food in container.food_catalog.list_foods()]


@router.get("/{food_id}")
async def get_food(food_id: str, request: Request) -> FoodOut:
    """Return a single food."""
    container: AppContainer = request.app.state.container
    return FoodOut.from_domain(container.food_catalog.get_food(food_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(payload: FoodCreate, request: Request) -> FoodOut:
    """Create a food; calories default to the value implied by its macros."""
    container: AppContainer = request.app.state.container
    food = container.food_catalog.create_food(payload.model_dump())
    return FoodOut.from_domain(food)


@router.put("/{food_id}")
async def update_food(food_id: str, payload: FoodUpdate, request: Request) -> FoodOut:
    """Update the supplied fields of a food."""
    container: AppContainer = request.app.state.container
    food = container.food_catalog.update_food(
        food_id, payload.model_dump(exclude_unset=True)
    )
    return FoodOut.from_domain(food)


@router.delete("/{food_id}")
async def delete_food(food_id: str, request: Request) -> dict[str, str]:
    """Delete a food."""
    container: AppContainer = request.app.state.container
    container.food_catalog.delete_food(food_id)
    return {"message": "Food deleted successfully"}
