"""Acquisition service gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Mapping

from orchestrator.domain.entities.errors import Stage
from orchestrator.domain.gateways.acquire_gateway import IAcquireGateway
from orchestrator.infrastructure.gateways.upstream_gateway import UpstreamGateway
from orchestrator.shared import get_logger
from orchestrator.shared.consts import ACQUIRE_TIMEOUT_SECONDS, HEALTH_CHECK_TIMEOUT_SECONDS

logger = get_logger(__name__)


class AcquireGateway(UpstreamGateway, IAcquireGateway):
    """HTTP client for the acquisition service."""

    stage = Stage.ACQUIRE

    def __init__(
        self,
        base_url: str,
        timeout: float = ACQUIRE_TIMEOUT_SECONDS,
        health_timeout: float = HEALTH_CHECK_TIMEOUT_SECONDS,
    ) -> None:
        super().__init__(base_url, timeout, health_timeout)

    async def acquire(self, payload: Mapping[str, Any]) -> Any:
        """POST the caller's payload to /data and return the decoded body.

        A success body that is not JSON comes back as its raw text so the
        acquisition validator rejects it instead of the decoder.
        """
        logger.info("acquire.request", url=f"{self.base_url}/data")
        response = await self._request("POST", "/data", json=dict(payload))
        try:
            body = response.json()
        except ValueError:
            logger.warning(
                "acquire.undecodable_body",
                status_code=response.status_code,
                content_type=response.headers.get("content-type"),
            )
            return response.text
        if isinstance(body, Mapping):
            logger.info(
                "acquire.response",
                data_id=body.get("dataId"),
                feature_count=body.get("featureCount"),
            )
        return body
