"""In-memory upstream gateways used across the test suite."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from orchestrator.domain.entities.pipeline import PredictionRequest


class FakeAcquireGateway:
    """In-memory acquisition gateway returning a canned body or raising."""

    def __init__(
        self,
        body: Any = None,
        error: Optional[Exception] = None,
        health_body: Any = None,
        health_error: Optional[Exception] = None,
        base_url: str = "http://acquire:3001",
    ) -> None:
        self.body = body
        self.error = error
        self.health_body = health_body if health_body is not None else {"status": "ok"}
        self.health_error = health_error
        self.base_url = base_url
        self.calls: List[Mapping[str, Any]] = []

    async def acquire(self, payload: Mapping[str, Any]) -> Any:
        self.calls.append(payload)
        if self.error is not None:
            raise self.error
        return self.body

    async def health(self) -> Any:
        if self.health_error is not None:
            raise self.health_error
        return self.health_body


class FakePredictGateway:
    """In-memory prediction gateway returning a canned body or raising."""

    def __init__(
        self,
        body: Any = None,
        error: Optional[Exception] = None,
        health_body: Any = None,
        health_error: Optional[Exception] = None,
        base_url: str = "http://predict2:3002",
    ) -> None:
        self.body = body
        self.error = error
        self.health_body = health_body if health_body is not None else {"status": "ok"}
        self.health_error = health_error
        self.base_url = base_url
        self.calls: List[PredictionRequest] = []

    async def predict(self, request: PredictionRequest) -> Any:
        self.calls.append(request)
        if self.error is not None:
            raise self.error
        return self.body

    async def health(self) -> Any:
        if self.health_error is not None:
            raise self.health_error
        return self.health_body

