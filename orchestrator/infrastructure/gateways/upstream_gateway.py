"""Shared HTTP plumbing for the upstream service gateways."""

from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional

import httpx

from orchestrator.domain.entities.errors import (
    Stage,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from orchestrator.shared import get_logger
from orchestrator.shared.consts import HEALTH_CHECK_TIMEOUT_SECONDS

logger = get_logger(__name__)


class UpstreamGateway:
    """Issues bounded JSON calls to one upstream and tags failures with its stage."""

    stage: Stage

    def __init__(
        self,
        base_url: str,
        timeout: float,
        health_timeout: float = HEALTH_CHECK_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._health_timeout = health_timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    async def health(self) -> Any:
        """GET the upstream /health endpoint within the health-check bound.

        Any 2xx counts as healthy; the body is returned as JSON when it decodes
        and as plain text otherwise.
        """
        response = await self._request("GET", "/health", timeout=self._health_timeout)
        return self._decode_body(response)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: Optional[Any] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{path}"
        bound = self._timeout if timeout is None else timeout
        headers: Dict[str, str] = {"Content-Type": "application/json"}

        logger.debug(
            "upstream.request", stage=self.stage.value, method=method, url=url
        )

        try:
            response = await asyncio.wait_for(
                self._send(method, url, json=json, headers=headers, timeout=bound),
                timeout=bound,
            )
            response.raise_for_status()
        except httpx.ConnectError as exc:
            logger.error(
                "upstream.connection_refused",
                stage=self.stage.value,
                url=url,
                error=str(exc),
            )
            raise UpstreamUnavailableError(self.stage, self._endpoint(url)) from exc
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.error(
                "upstream.timeout", stage=self.stage.value, url=url, timeout=bound
            )
            raise UpstreamTimeoutError(self.stage, bound) from exc
        except httpx.HTTPStatusError as exc:
            body = self._decode_body(exc.response)
            logger.error(
                "upstream.http_error",
                stage=self.stage.value,
                url=url,
                status_code=exc.response.status_code,
                response_body=body,
            )
            raise UpstreamResponseError(
                self.stage, exc.response.status_code, body
            ) from exc

        return response

    async def _send(
        self,
        method: str,
        url: str,
        *,
        json: Optional[Any],
        headers: Dict[str, str],
        timeout: float,
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=timeout) as client:
            if method == "GET":
                return await client.get(url, headers=headers)
            return await client.post(url, headers=headers, json=json)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _endpoint(url: str) -> str:
        parsed = httpx.URL(url)
        port = parsed.port or (443 if parsed.scheme == "https" else 80)
        return f"{parsed.host}:{port}"
