"""Prediction service gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any

from orchestrator.domain.entities.errors import Stage
from orchestrator.domain.entities.pipeline import PredictionRequest
from orchestrator.domain.gateways.predict_gateway import IPredictGateway
from orchestrator.infrastructure.gateways.upstream_gateway import UpstreamGateway
from orchestrator.shared import get_logger
from orchestrator.shared.consts import HEALTH_CHECK_TIMEOUT_SECONDS, PREDICT_TIMEOUT_SECONDS

logger = get_logger(__name__)


class PredictGateway(UpstreamGateway, IPredictGateway):
    """HTTP client for the prediction service."""

    stage = Stage.PREDICT

    def __init__(
        self,
        base_url: str,
        timeout: float = PREDICT_TIMEOUT_SECONDS,
        health_timeout: float = HEALTH_CHECK_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(base_url, timeout, health_timeout)

    async def predict(self, request: PredictionRequest) -> Any:
        """POST features and metadata to /predict and return the decoded body."""
        logger.info(
            "predict.request",
            url=f"{self.base_url}/predict",
            data_id=request.meta.get("dataId"),
            feature_count=len(request.features),
        )
        response = await self._request("POST", "/predict", json=request.to_payload())
        return response.json()
