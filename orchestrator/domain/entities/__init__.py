"""
Domain Entities Package

This package contains the value objects and errors of an orchestration run.
"""

from .errors import (
    AcquireValidationError,
    DomainError,
    ErrorKind,
    OrchestrationError,
    Stage,
    UnclassifiedOrchestrationError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from .health import OverallStatus, ServicesStatus, UpstreamHealth, UpstreamState
from .pipeline import (
    AcquireResult,
    OrchestrationResult,
    PredictionRequest,
    PredictResult,
    StageTimings,
)

__all__ = [
    "AcquireResult",
    "AcquireValidationError",
    "DomainError",
    "ErrorKind",
    "OrchestrationError",
    "OrchestrationResult",
    "OverallStatus",
    "PredictResult",
    "PredictionRequest",
    "ServicesStatus",
    "Stage",
    "StageTimings",
    "UnclassifiedOrchestrationError",
    "UpstreamHealth",
    "UpstreamResponseError",
    "UpstreamState",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]
