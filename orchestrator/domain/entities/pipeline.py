"""
Pipeline domain entities.

Value objects exchanged between the acquisition and prediction stages of a
single orchestration run. All of them live only for the duration of one
request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from orchestrator.shared.consts import PREDICTION_SOURCE


@dataclass(frozen=True, slots=True)
class AcquireResult:
    """Feature vector and metadata returned by the acquisition service."""

    features: List[Any]
    data_id: Optional[str] = None
    feature_count: Optional[int] = None
    scaler_version: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "AcquireResult":
        """Build from an already validated acquisition response body."""
        return cls(
            features=list(payload["features"]),
            data_id=payload.get("dataId"),
            feature_count=payload.get("featureCount"),
            scaler_version=payload.get("scalerVersion"),
            created_at=payload.get("createdAt"),
        )


@dataclass(frozen=True, slots=True)
class PredictionRequest:
    """Body sent to the prediction service, derived from an AcquireResult."""

    features: List[Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_acquire_result(cls, result: AcquireResult) -> "PredictionRequest":
        return cls(
            features=list(result.features),
            meta={
                "dataId": result.data_id,
                "source": PREDICTION_SOURCE,
                "featureCount": result.feature_count,
                "scalerVersion": result.scaler_version,
                "acquireTimestamp": result.created_at,
            },
        )

    def to_payload(self) -> Dict[str, Any]:
        return {"features": list(self.features), "meta": dict(self.meta)}


@dataclass(frozen=True, slots=True)
class PredictResult:
    """Prediction returned by the prediction service."""

    prediction_id: Optional[str]
    prediction: Any
    timestamp: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "PredictResult":
        body = payload if isinstance(payload, Mapping) else {}
        timestamp = body.get("timestamp")
        return cls(
            prediction_id=body.get("predictionId"),
            prediction=body.get("prediction"),
            timestamp=str(timestamp) if timestamp else None,
        )


@dataclass(frozen=True, slots=True)
class OrchestrationResult:
    """Unified outcome of a successful run."""

    data_id: Optional[str]
    prediction_id: Optional[str]
    prediction: Any
    timestamp: str


@dataclass(slots=True)
class StageTimings:
    """Per-stage durations of a run in milliseconds, for logging only."""

    acquire_ms: Optional[int] = None
    predict_ms: Optional[int] = None
    total_ms: Optional[int] = None

    def as_log_fields(self) -> Dict[str, Optional[int]]:
        return {
            "acquire_ms": self.acquire_ms,
            "predict_ms": self.predict_ms,
            "total_ms": self.total_ms,
        }
