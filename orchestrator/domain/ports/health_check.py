"""Domain service abstraction for upstream health checks."""

from __future__ import annotations

from typing import Protocol

from orchestrator.domain.entities.health import ServicesStatus


class IHealthCheckService(Protocol):
    """Interface for probing the upstream services."""

    async def evaluate(self) -> ServicesStatus:
        """Check every upstream and aggregate their status."""
        ...
