from __future__ import annotations

from datetime import datetime

import pytest

from orchestrator.application.use_cases.run_pipeline_use_case import (
    RunPipelineUseCase,
)
from orchestrator.domain.entities.errors import (
    AcquireValidationError,
    Stage,
    UnclassifiedOrchestrationError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from tests.fakes import FakeAcquireGateway, FakePredictGateway


@pytest.mark.asyncio
async def test_execute_returns_unified_result(acquire_gateway, predict_gateway) -> None:
    use_case = RunPipelineUseCase(acquire_gateway, predict_gateway)

    result = await use_case.execute({"sensor": "s1"})

    assert result.data_id == "d1"
    assert result.prediction_id == "p1"
    assert result.prediction == 0.87
    assert acquire_gateway.calls == [{"sensor": "s1"}]
    sent = predict_gateway.calls[0]
    assert sent.features == [1, 2, 3, 4, 5, 6, 7]
    assert sent.meta["acquireTimestamp"] == "2024-01-01T00:00:00Z"


@pytest.mark.asyncio
async def test_missing_prediction_timestamp_is_generated_at_assembly(
    acquire_gateway, predict_gateway
) -> None:
    use_case = RunPipelineUseCase(acquire_gateway, predict_gateway)
    before = datetime.now().astimezone()

    result = await use_case.execute({})

    generated = datetime.fromisoformat(result.timestamp.replace("Z", "+00:00"))
    assert generated.tzinfo is not None
    assert generated >= before.replace(microsecond=0)


@pytest.mark.asyncio
async def test_prediction_timestamp_is_kept_when_present(acquire_gateway) -> None:
    predict = FakePredictGateway(
        body={"predictionId": "p1", "prediction": 1, "timestamp": "2024-02-02T00:00:00Z"}
    )
    use_case = RunPipelineUseCase(acquire_gateway, predict)

    result = await use_case.execute({})

    assert result.timestamp == "2024-02-02T00:00:00Z"


@pytest.mark.asyncio
async def test_acquire_failure_never_reaches_prediction(predict_gateway) -> None:
    acquire = FakeAcquireGateway(
        error=UpstreamUnavailableError(Stage.ACQUIRE, "acquire:3001")
    )
    use_case = RunPipelineUseCase(acquire, predict_gateway)

    with pytest.raises(UpstreamUnavailableError) as exc:
        await use_case.execute({})

    assert exc.value.stage is Stage.ACQUIRE
    assert exc.value.elapsed_ms is not None
    assert predict_gateway.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, 6, 8])
async def test_wrong_feature_count_fails_validation(
    acquire_body, predict_gateway, count: int
) -> None:
    acquire_body["features"] = [0.5] * count
    use_case = RunPipelineUseCase(FakeAcquireGateway(body=acquire_body), predict_gateway)

    with pytest.raises(AcquireValidationError) as exc:
        await use_case.execute({})

    assert exc.value.status_code == 400
    assert predict_gateway.calls == []


@pytest.mark.asyncio
async def test_missing_features_fails_validation(predict_gateway) -> None:
    use_case = RunPipelineUseCase(
        FakeAcquireGateway(body={"dataId": "d1"}), predict_gateway
    )

    with pytest.raises(AcquireValidationError) as exc:
        await use_case.execute({})

    assert exc.value.reason == "ACQUIRE_NO_FEATURES"
    assert predict_gateway.calls == []


@pytest.mark.asyncio
async def test_prediction_failure_discards_acquired_data(acquire_gateway) -> None:
    predict = FakePredictGateway(error=UpstreamTimeoutError(Stage.PREDICT, 15.0))
    use_case = RunPipelineUseCase(acquire_gateway, predict)

    with pytest.raises(UpstreamTimeoutError) as exc:
        await use_case.execute({})

    assert exc.value.stage is Stage.PREDICT
    assert len(acquire_gateway.calls) == 1


@pytest.mark.asyncio
async def test_upstream_response_error_propagates(acquire_gateway) -> None:
    predict = FakePredictGateway(
        error=UpstreamResponseError(Stage.PREDICT, 422, {"error": "bad input"})
    )
    use_case = RunPipelineUseCase(acquire_gateway, predict)

    with pytest.raises(UpstreamResponseError) as exc:
        await use_case.execute({})

    assert exc.value.status_code == 422


@pytest.mark.asyncio
async def test_unexpected_exception_is_wrapped_as_unclassified(
    acquire_gateway,
) -> None:
    predict = FakePredictGateway(error=ValueError("Expecting value"))
    use_case = RunPipelineUseCase(acquire_gateway, predict)

    with pytest.raises(UnclassifiedOrchestrationError) as exc:
        await use_case.execute({})

    assert exc.value.status_code == 500
    assert exc.value.message == "Expecting value"
    assert isinstance(exc.value.__cause__, ValueError)
    assert exc.value.elapsed_ms is not None


@pytest.mark.asyncio
async def test_none_payload_is_forwarded_as_empty_object(
    acquire_gateway, predict_gateway
) -> None:
    use_case = RunPipelineUseCase(acquire_gateway, predict_gateway)

    await use_case.execute(None)

    assert acquire_gateway.calls == [{}]
