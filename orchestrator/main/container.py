"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
that turns the frozen application settings into gateways,
services and use cases.
"""

from dependency_injector import containers, providers

from orchestrator.application.models import SystemInfo
from orchestrator.application.use_cases.health_use_cases import (
    GetHealthUseCase,
    GetServiceDescriptorUseCase,
    GetServicesStatusUseCase,
)
from orchestrator.application.use_cases.run_pipeline_use_case import RunPipelineUseCase
from orchestrator.infrastructure.gateways.acquire_gateway import AcquireGateway
from orchestrator.infrastructure.gateways.predict_gateway import PredictGateway
from orchestrator.infrastructure.services.health_check_service import HealthCheckService
from orchestrator.shared import get_logger
from orchestrator.shared.consts import (
    ACQUIRE_TIMEOUT_SECONDS,
    HEALTH_CHECK_TIMEOUT_SECONDS,
    PREDICT_TIMEOUT_SECONDS,
)

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    acquire_gateway = providers.Singleton(
        AcquireGateway,
        base_url=config.upstreams.acquire_url,
        timeout=ACQUIRE_TIMEOUT_SECONDS,
        health_timeout=HEALTH_CHECK_TIMEOUT_SECONDS,
    )

    predict_gateway = providers.Singleton(
        PredictGateway,
        base_url=config.upstreams.predict_url,
        timeout=PREDICT_TIMEOUT_SECONDS,
        health_timeout=HEALTH_CHECK_TIMEOUT_SECONDS,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        acquire_gateway=acquire_gateway,
        predict_gateway=predict_gateway,
    )

    system_info = providers.Singleton(
        SystemInfo,
        service=config.server.service,
        version=config.server.version,
        description=config.server.description,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        acquire_url=config.upstreams.acquire_url,
        predict_url=config.upstreams.predict_url,
    )

    # Application (use cases)
    run_pipeline_use_case = providers.Factory(
        RunPipelineUseCase,
        acquire_gateway=acquire_gateway,
        predict_gateway=predict_gateway,
    )

    get_health_use_case = providers.Factory(GetHealthUseCase, system_info=system_info)

    get_services_status_use_case = providers.Factory(
        GetServicesStatusUseCase,
        health_check_service=health_check_service,
    )

    get_service_descriptor_use_case = providers.Factory(
        GetServiceDescriptorUseCase,
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
    logger.debug(
        "container.initialized",
        acquire_url=settings.upstreams.acquire_url,
        predict_url=settings.upstreams.predict_url,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
