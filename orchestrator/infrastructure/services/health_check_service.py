"""Infrastructure implementation for upstream health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Dict, Iterable, Union

from orchestrator.domain.entities.health import (
    OverallStatus,
    ServicesStatus,
    UpstreamHealth,
    UpstreamState,
)
from orchestrator.domain.gateways.acquire_gateway import IAcquireGateway
from orchestrator.domain.gateways.predict_gateway import IPredictGateway
from orchestrator.domain.ports.health_check import IHealthCheckService
from orchestrator.shared import get_logger

logger = get_logger(__name__)

HealthCheckable = Union[IAcquireGateway, IPredictGateway]


class HealthCheckService(IHealthCheckService):
    """Check the acquisition and prediction services independently."""

    def __init__(
        self,
        acquire_gateway: IAcquireGateway,
        predict_gateway: IPredictGateway,
    ) -> None:
        self._upstreams: Dict[str, HealthCheckable] = {
            "acquire": acquire_gateway,
            "predict": predict_gateway,
        }

    async def evaluate(self) -> ServicesStatus:
        """Run both health checks concurrently and aggregate their status."""

        checks = {
            name: asyncio.create_task(self._check(name, gateway))
            for name, gateway in self._upstreams.items()
        }

        services: Dict[str, UpstreamHealth] = {}
        for name, task in checks.items():
            services[name] = await task

        overall = self._aggregate_status(services.values())
        logger.info(
            "status.evaluated",
            overall=overall.value,
            services={name: s.status.value for name, s in services.items()},
            latency_ms={
                name: round(s.latency_ms or 0.0, 1) for name, s in services.items()
            },
        )
        return ServicesStatus(overall=overall, services=services)

    def _aggregate_status(self, statuses: Iterable[UpstreamHealth]) -> OverallStatus:
        if all(status.status == UpstreamState.OK for status in statuses):
            return OverallStatus.HEALTHY
        return OverallStatus.DEGRADED

    async def _check(self, name: str, gateway: HealthCheckable) -> UpstreamHealth:
        start = perf_counter()
        try:
            response = await gateway.health()
        except Exception as exc:
            latency_ms = (perf_counter() - start) * 1000
            logger.warning(
                "status.check_failed", service=name, url=gateway.base_url, error=str(exc)
            )
            return UpstreamHealth(
                name=name,
                url=gateway.base_url,
                status=UpstreamState.ERROR,
                error=str(exc),
                latency_ms=latency_ms,
            )

        latency_ms = (perf_counter() - start) * 1000
        return UpstreamHealth(
            name=name,
            url=gateway.base_url,
            status=UpstreamState.OK,
            response=response,
            latency_ms=latency_ms,
        )
