"""DTOs for the health, status and descriptor responses."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from orchestrator.domain.entities.health import (
    OverallStatus,
    ServicesStatus,
    UpstreamHealth,
    UpstreamState,
)


class OrchestratorHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: str = Field(default="ok", description="Always ok while serving")
    service: str = Field(description="Service identifier")
    timestamp: str = Field(description="Current time")


class UpstreamStatusDTO(BaseModel):
    """Serializable representation of one upstream health check."""

    status: UpstreamState = Field(description="Health check outcome")
    url: str = Field(description="Upstream base URL")
    response: Optional[Any] = Field(
        default=None, description="Raw health response when the check succeeded"
    )
    error: Optional[str] = Field(
        default=None, description="Error message when the check failed"
    )

    @classmethod
    def from_domain(cls, health: UpstreamHealth) -> "UpstreamStatusDTO":
        return cls(
            status=health.status,
            url=health.url,
            response=health.response,
            error=health.error,
        )


class OrchestratorStateDTO(BaseModel):
    status: str = "ok"
    uptime: float = Field(description="Seconds since the application started")
    timestamp: str


class ServicesStatusDTO(BaseModel):
    """DTO representing the /status response payload."""

    orchestrator: OrchestratorStateDTO
    services: Dict[str, UpstreamStatusDTO] = Field(default_factory=dict)
    overall: OverallStatus

    @classmethod
    def from_domain(
        cls, status: ServicesStatus, uptime: float, timestamp: str
    ) -> "ServicesStatusDTO":
        return cls(
            orchestrator=OrchestratorStateDTO(uptime=uptime, timestamp=timestamp),
            services={
                name: UpstreamStatusDTO.from_domain(health)
                for name, health in status.services.items()
            },
            overall=status.overall,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "orchestrator": {
                    "status": "ok",
                    "uptime": 42.5,
                    "timestamp": "2024-01-01T00:00:00.000Z",
                },
                "services": {
                    "acquire": {
                        "status": "error",
                        "url": "http://acquire:3001",
                        "error": "Could not connect to acquire",
                    },
                    "predict": {
                        "status": "ok",
                        "url": "http://predict2:3002",
                        "response": {"status": "ok"},
                    },
                },
                "overall": "degraded",
            }
        }
    }


class ServiceDescriptorDTO(BaseModel):
    """DTO representing the static descriptor returned by GET /."""

    service: str
    version: str
    description: str
    endpoints: Dict[str, str]
    configuration: Dict[str, str]
