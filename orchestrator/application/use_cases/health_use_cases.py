"""Use cases for the health, status and descriptor endpoints."""

from datetime import datetime
from typing import Optional

from orchestrator.application.dtos.health_dto import (
    OrchestratorHealthDTO,
    ServiceDescriptorDTO,
    ServicesStatusDTO,
)
from orchestrator.application.models import SystemInfo
from orchestrator.domain.ports.health_check import IHealthCheckService
from orchestrator.shared import utc_now, utc_now_iso

ENDPOINTS = {
    "/health": "Orchestrator health check",
    "/status": "Status of every upstream service",
    "/run": "POST - Run the full acquisition and prediction flow",
}


class GetHealthUseCase:
    """Liveness of the orchestrator itself; never touches an upstream."""

    def __init__(self, system_info: SystemInfo) -> None:
        self._info = system_info

    def execute(self) -> OrchestratorHealthDTO:
        return OrchestratorHealthDTO(
            status="ok", service=self._info.service, timestamp=utc_now_iso()
        )


class GetServicesStatusUseCase:
    """Use case responsible for returning the aggregated upstream status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self, started_at: Optional[datetime]) -> ServicesStatusDTO:
        services_status = await self._health_check_service.evaluate()

        now = utc_now()
        started = started_at or now
        uptime_seconds = max(0.0, (now - started).total_seconds())

        return ServicesStatusDTO.from_domain(
            services_status, uptime=uptime_seconds, timestamp=utc_now_iso()
        )


class GetServiceDescriptorUseCase:
    """Use case returning the static service descriptor."""

    def __init__(self, system_info: SystemInfo) -> None:
        self._info = system_info

    def execute(self) -> ServiceDescriptorDTO:
        return ServiceDescriptorDTO(
            service=self._info.service,
            version=self._info.version,
            description=self._info.description,
            endpoints=dict(ENDPOINTS),
            configuration={
                "acquireUrl": self._info.acquire_url,
                "predictUrl": self._info.predict_url,
                "environment": self._info.environment,
            },
        )
