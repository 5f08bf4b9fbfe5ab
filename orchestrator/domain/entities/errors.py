"""
Domain Errors

This module defines the closed set of failures the orchestrator can surface.
Every upstream failure is raised by the gateway that made the call, tagged
with that gateway's stage, so classification never depends on message text.
"""

from enum import Enum
from typing import Any, Dict, Optional


class Stage(str, Enum):
    """Upstream stage of an orchestration run, valued by service identifier."""

    ACQUIRE = "acquire"
    PREDICT = "predict2"


class ErrorKind(str, Enum):
    SERVICE_UNAVAILABLE = "service_unavailable"
    UPSTREAM_TIMEOUT = "upstream_timeout"
    UPSTREAM_ERROR = "upstream_error"
    VALIDATION_ERROR = "validation_error"
    UNCLASSIFIED = "unclassified"


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class OrchestrationError(DomainError):
    """A classified failure of an orchestration run."""

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    title: str = "Internal orchestrator error"

    def __init__(
        self,
        message: str,
        *,
        stage: Optional[Stage] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.stage = stage
        # Filled in by the use case once the failure reaches the chain boundary.
        self.elapsed_ms: Optional[int] = None

    @property
    def status_code(self) -> int:
        return 500


class UpstreamUnavailableError(OrchestrationError):
    """The upstream endpoint refused the connection or was unreachable."""

    kind = ErrorKind.SERVICE_UNAVAILABLE
    title = "Service unavailable"

    def __init__(self, stage: Stage, endpoint: str):
        super().__init__(
            f"Could not connect to {stage.value}",
            stage=stage,
            details={"endpoint": endpoint},
        )
        self.endpoint = endpoint

    @property
    def status_code(self) -> int:
        return 503


class UpstreamTimeoutError(OrchestrationError):
    """The upstream call exceeded its bound."""

    kind = ErrorKind.UPSTREAM_TIMEOUT
    title = "Timeout"

    def __init__(self, stage: Stage, timeout: float):
        super().__init__(
            f"Service {stage.value} did not respond in time",
            stage=stage,
            details={"timeout_seconds": timeout},
        )
        self.timeout = timeout

    @property
    def status_code(self) -> int:
        return 504


class UpstreamResponseError(OrchestrationError):
    """The upstream answered with a non-success HTTP status."""

    kind = ErrorKind.UPSTREAM_ERROR

    def __init__(self, stage: Stage, upstream_status: int, body: Any):
        super().__init__(
            f"{stage.value} responded with HTTP {upstream_status}",
            stage=stage,
            details={"status_code": upstream_status},
        )
        self.upstream_status = upstream_status
        self.body = body

    @property
    def title(self) -> str:  # type: ignore[override]
        return f"Error in {self.stage.value if self.stage else 'upstream'}"

    @property
    def status_code(self) -> int:
        return self.upstream_status


class AcquireValidationError(OrchestrationError):
    """The acquisition result failed its shape or arity check."""

    kind = ErrorKind.VALIDATION_ERROR
    title = "Validation error"

    def __init__(self, reason: str, message: str):
        super().__init__(f"{reason}: {message}", details={"reason": reason})
        self.reason = reason

    @property
    def status_code(self) -> int:
        return 400


class UnclassifiedOrchestrationError(OrchestrationError):
    """Any failure that fits none of the other kinds."""
