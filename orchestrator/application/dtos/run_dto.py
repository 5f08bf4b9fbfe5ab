"""
Application DTOs - Orchestration Run

Data Transfer Objects for the success and failure contracts of POST /run.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from orchestrator.domain.entities.errors import (
    AcquireValidationError,
    OrchestrationError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from orchestrator.domain.entities.pipeline import OrchestrationResult


class RunResultDTO(BaseModel):
    """Unified outcome returned when both stages succeed."""

    data_id: Any = Field(default=None, alias="dataId")
    prediction_id: Any = Field(default=None, alias="predictionId")
    prediction: Any = Field(default=None, description="Opaque prediction value")
    timestamp: str = Field(description="Prediction or assembly timestamp")

    @classmethod
    def from_domain(cls, result: OrchestrationResult) -> "RunResultDTO":
        return cls(
            dataId=result.data_id,
            predictionId=result.prediction_id,
            prediction=result.prediction,
            timestamp=result.timestamp,
        )

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "dataId": "d1",
                "predictionId": "p1",
                "prediction": 0.87,
                "timestamp": "2024-01-01T00:00:05.123Z",
            }
        },
    }


class RunErrorDTO(BaseModel):
    """Body of every classified failure of POST /run."""

    success: bool = False
    error: str
    detail: Any = None
    service: Optional[str] = None
    endpoint: Optional[str] = None
    status_code: Optional[int] = Field(default=None, alias="statusCode")
    time: str

    @classmethod
    def from_error(cls, exc: OrchestrationError) -> "RunErrorDTO":
        detail: Any = exc.message
        endpoint = None
        status_code = None
        if isinstance(exc, UpstreamUnavailableError):
            endpoint = exc.endpoint
        if isinstance(exc, UpstreamResponseError):
            detail = exc.body
            status_code = exc.upstream_status

        return cls(
            error=exc.title,
            detail=detail,
            service=exc.stage.value if exc.stage else None,
            endpoint=endpoint,
            statusCode=status_code,
            time=f"{exc.elapsed_ms or 0}ms",
        )

    @classmethod
    def invalid_request(cls, message: str) -> "RunErrorDTO":
        return cls(error=AcquireValidationError.title, detail=message, time="0ms")

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "success": False,
                "error": "Service unavailable",
                "detail": "Could not connect to predict2",
                "service": "predict2",
                "endpoint": "predict2:3002",
                "time": "12ms",
            }
        },
    }
