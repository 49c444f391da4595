"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from macro_tracker.api.admin import router as admin_router
from macro_tracker.api.foods import router as foods_router
from macro_tracker.api.logs import router as logs_router
from macro_tracker.api.settings import router as settings_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.config import parse_cors_origins
from macro_tracker.containers import AppContainer
from macro_tracker.domain.errors import (
    DailyLogNotFoundError,
    FoodEntryNotFoundError,
    FoodNotFoundError,
    InvalidMacroSplitError,
    InvalidSettingsError,
    NutritionValidationError,
    StorageError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Tracker")
    app.state.container = container

    origins = parse_cors_origins(container.settings.cors_allow_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(foods_router)
    app.include_router(logs_router)
    app.include_router(settings_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "healthy"}

    @app.exception_handler(FoodNotFoundError)
    async def food_not_found(request: Request, exc: FoodNotFoundError) -> JSONResponse:
        return _message(status.HTTP_404_NOT_FOUND, "Food not found")

    @app.exception_handler(DailyLogNotFoundError)
    async def log_not_found(
        request: Request, exc: DailyLogNotFoundError
    ) -> JSONResponse:
        return _message(status.HTTP_404_NOT_FOUND, "Daily log not found")

    @app.exception_handler(FoodEntryNotFoundError)
    async def entry_not_found(
        request: Request, exc: FoodEntryNotFoundError
    ) -> JSONResponse:
        return _message(status.HTTP_404_NOT_FOUND, "Food entry not found")

    @app.exception_handler(InvalidMacroSplitError)
    async def invalid_split(
        request: Request, exc: InvalidMacroSplitError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": str(exc), "currentTotal": exc.total},
        )

    @app.exception_handler(InvalidSettingsError)
    async def invalid_settings(
        request: Request, exc: InvalidSettingsError
    ) -> JSONResponse:
        return _message(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(NutritionValidationError)
    async def invalid_nutrition(
        request: Request, exc: NutritionValidationError
    ) -> JSONResponse:
        return _message(422, str(exc))

    @app.exception_handler(StorageError)
    async def storage_failure(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s", request.url.path, exc_info=exc)
        return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage unavailable")

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return _message(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
        )

    return app


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})
