"""
Dependency container injection module - Main Layer

This module implements the dependency injection container. It is the
only place that knows which concrete repository backs each use case.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.device_use_cases import (
    DeleteDeviceUseCase,
    GetDeviceByMacIdUseCase,
    GetDevicesUseCase,
    RegisterDeviceUseCase,
    UpdateDeviceUseCase,
    VerifyDeviceUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.device_repository import DeviceRepository
from src.infrastructure.repositories.verification_event_repository import (
    VerificationEventRepository,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        server_selection_timeout_ms=config.database.server_selection_timeout_ms,
    )

    device_repository = providers.Singleton(
        DeviceRepository,
        mongo_database=mongo_database,
    )

    verification_event_repository = providers.Singleton(
        VerificationEventRepository,
        mongo_database=mongo_database,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
        audit_enabled=config.verification.audit_enabled,
    )

    # Application (use cases)
    verify_device_use_case = providers.Factory(
        VerifyDeviceUseCase,
        device_repository=device_repository,
        event_repository=verification_event_repository,
        audit_enabled=config.verification.audit_enabled,
    )

    register_device_use_case = providers.Factory(
        RegisterDeviceUseCase,
        device_repository=device_repository,
    )

    get_devices_use_case = providers.Factory(
        GetDevicesUseCase,
        device_repository=device_repository,
    )

    get_device_by_mac_id_use_case = providers.Factory(
        GetDeviceByMacIdUseCase,
        device_repository=device_repository,
    )

    update_device_use_case = providers.Factory(
        UpdateDeviceUseCase,
        device_repository=device_repository,
    )

    delete_device_use_case = providers.Factory(
        DeleteDeviceUseCase,
        device_repository=device_repository,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.api.title,
        version=config.api.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.api.git_commit,
        build_time=config.api.build_time,
        database_uri=config.database.mongo_uri,
        database_name=config.database.database_name,
        verification_audit_enabled=config.verification.audit_enabled,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Own the lifecycle of external resources.

    Indexes are ensured on startup and the MongoDB client is closed on
    shutdown, whatever happened in between.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()

        logger.info("container.resources.initialized")
        yield container

    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
