"""
Application Use Case - Run Pipeline

Coordinates one orchestration run:
  * Forward the caller's payload to the acquisition service
  * Validate the acquired feature vector before anything else happens
  * Request a prediction built from the acquired features and metadata
  * Assemble the unified result, or surface exactly one classified failure

The two upstream calls are awaited strictly in order; a failure at either
stage short-circuits the run and discards whatever was already acquired.
"""

from __future__ import annotations

from time import perf_counter
from typing import Any, Mapping, Optional

from orchestrator.application.dtos.run_dto import RunResultDTO
from orchestrator.domain.entities.errors import (
    OrchestrationError,
    UnclassifiedOrchestrationError,
)
from orchestrator.domain.entities.pipeline import (
    AcquireResult,
    OrchestrationResult,
    PredictionRequest,
    PredictResult,
    StageTimings,
)
from orchestrator.domain.gateways.acquire_gateway import IAcquireGateway
from orchestrator.domain.gateways.predict_gateway import IPredictGateway
from orchestrator.domain.services.acquire_validator import ensure_valid_acquire_payload
from orchestrator.shared import elapsed_ms, get_logger, utc_now_iso

logger = get_logger(__name__)


class RunPipelineUseCase:
    """Runs acquisition then prediction for a single inbound request."""

    def __init__(
        self,
        acquire_gateway: IAcquireGateway,
        predict_gateway: IPredictGateway,
    ) -> None:
        self._acquire_gateway = acquire_gateway
        self._predict_gateway = predict_gateway

    async def execute(self, payload: Optional[Mapping[str, Any]] = None) -> RunResultDTO:
        """
        Execute the acquisition and prediction chain.

        Args:
            payload: Opaque caller parameters, forwarded to the acquisition call

        Returns:
            RunResultDTO: Unified result of the run

        Raises:
            OrchestrationError: Exactly one classified failure, with the time
                elapsed until it occurred
        """
        started = perf_counter()
        timings = StageTimings()
        logger.info("pipeline.started")

        try:
            result = await self._run(payload or {}, timings)
        except OrchestrationError as exc:
            exc.elapsed_ms = elapsed_ms(started)
            logger.error(
                "pipeline.failed",
                kind=exc.kind.value,
                service=exc.stage.value if exc.stage else None,
                error=exc.message,
                details=exc.details,
                elapsed_ms=exc.elapsed_ms,
                **timings.as_log_fields(),
            )
            raise
        except Exception as exc:
            error = UnclassifiedOrchestrationError(str(exc))
            error.elapsed_ms = elapsed_ms(started)
            logger.error(
                "pipeline.unexpected_error",
                error=str(exc),
                elapsed_ms=error.elapsed_ms,
                exc_info=exc,
            )
            raise error from exc

        timings.total_ms = elapsed_ms(started)
        logger.info(
            "pipeline.completed",
            data_id=result.data_id,
            prediction_id=result.prediction_id,
            **timings.as_log_fields(),
        )
        return RunResultDTO.from_domain(result)

    async def _run(
        self, payload: Mapping[str, Any], timings: StageTimings
    ) -> OrchestrationResult:
        stage_started = perf_counter()
        body = await self._acquire_gateway.acquire(payload)
        timings.acquire_ms = elapsed_ms(stage_started)

        acquired = AcquireResult.from_payload(ensure_valid_acquire_payload(body))
        logger.info(
            "pipeline.acquire.completed",
            data_id=acquired.data_id,
            feature_count=len(acquired.features),
            acquire_ms=timings.acquire_ms,
        )

        stage_started = perf_counter()
        predicted = PredictResult.from_payload(
            await self._predict_gateway.predict(
                PredictionRequest.from_acquire_result(acquired)
            )
        )
        timings.predict_ms = elapsed_ms(stage_started)
        logger.info(
            "pipeline.predict.completed",
            prediction_id=predicted.prediction_id,
            predict_ms=timings.predict_ms,
        )

        return OrchestrationResult(
            data_id=acquired.data_id,
            prediction_id=predicted.prediction_id,
            prediction=predicted.prediction,
            timestamp=predicted.timestamp or utc_now_iso(),
        )
