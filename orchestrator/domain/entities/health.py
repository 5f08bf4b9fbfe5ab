"""
Health domain entities.

Value objects describing the reachability of the upstream services and the
aggregated status reported by the orchestrator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class UpstreamState(str, Enum):
    """Outcome of a single upstream health check."""

    OK = "ok"
    ERROR = "error"


class OverallStatus(str, Enum):
    """Aggregated availability of all checked upstreams."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"


@dataclass(slots=True)
class UpstreamHealth:
    """Health of one upstream service."""

    name: str
    url: str
    status: UpstreamState
    response: Any = None
    error: Optional[str] = None
    latency_ms: Optional[float] = None


@dataclass(slots=True)
class ServicesStatus:
    """Aggregated health of every checked upstream."""

    overall: OverallStatus
    services: Dict[str, UpstreamHealth] = field(default_factory=dict)
