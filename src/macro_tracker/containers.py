"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from macro_tracker.adapters.json_daily_log_repository import JsonDailyLogRepository
from macro_tracker.adapters.json_food_repository import JsonFoodRepository
from macro_tracker.adapters.json_settings_repository import (
    JsonMacroSettingsRepository,
    serialize_settings,
)
from macro_tracker.adapters.json_store import JsonFileStore
from macro_tracker.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from macro_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from macro_tracker.adapters.supabase_settings_repository import (
    SupabaseMacroSettingsRepository,
)
from macro_tracker.config import Settings
from macro_tracker.domain.goals import DEFAULT_MACRO_GOALS
from macro_tracker.services.daily_logs import DailyLogRepository, DailyLogService
from macro_tracker.services.foods import FoodCatalogService, FoodRepository
from macro_tracker.services.macro_settings import (
    MacroSettingsRepository,
    MacroSettingsService,
)
from macro_tracker.services.maintenance import LogMaintenanceService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog: FoodCatalogService
    daily_log_service: DailyLogService
    macro_settings_service: MacroSettingsService
    maintenance_service: LogMaintenanceService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.storage_backend == "supabase":
        food_repository, log_repository, settings_repository = _supabase_repositories(
            resolved_settings
        )
    else:
        food_repository, log_repository, settings_repository = _json_repositories(
            resolved_settings
        )
    return wire_services(
        resolved_settings, food_repository, log_repository, settings_repository
    )


def wire_services(
    settings: Settings,
    food_repository: FoodRepository,
    log_repository: DailyLogRepository,
    settings_repository: MacroSettingsRepository,
) -> AppContainer:
    """Build services on top of the given repositories."""
    food_catalog = FoodCatalogService(food_repository)
    macro_settings_service = MacroSettingsService(settings_repository)
    daily_log_service = DailyLogService(
        repository=log_repository,
        food_catalog=food_catalog,
        settings_service=macro_settings_service,
    )
    maintenance_service = LogMaintenanceService(
        log_repository=log_repository,
        food_repository=food_repository,
    )
    return AppContainer(
        settings=settings,
        food_catalog=food_catalog,
        daily_log_service=daily_log_service,
        macro_settings_service=macro_settings_service,
        maintenance_service=maintenance_service,
    )


def _json_repositories(
    settings: Settings,
) -> tuple[FoodRepository, DailyLogRepository, MacroSettingsRepository]:
    data_dir = settings.data_dir
    return (
        JsonFoodRepository(JsonFileStore(data_dir / "foods.json", default=list)),
        JsonDailyLogRepository(
            JsonFileStore(data_dir / "daily-logs.json", default=list)
        ),
        JsonMacroSettingsRepository(
            JsonFileStore(
                data_dir / "settings.json",
                default=lambda: serialize_settings(DEFAULT_MACRO_GOALS),
            )
        ),
    )


def _supabase_repositories(
    settings: Settings,
) -> tuple[FoodRepository, DailyLogRepository, MacroSettingsRepository]:
    if not settings.supabase_url or not settings.supabase_service_key:
        raise ValueError(
            "SUPABASE_URL and SUPABASE_SERVICE_KEY are required for the "
            "supabase storage backend"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return (
        SupabaseFoodRepository(client),
        SupabaseDailyLogRepository(client),
        SupabaseMacroSettingsRepository(client),
    )
