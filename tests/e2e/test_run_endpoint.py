from __future__ import annotations

import asyncio
from datetime import datetime

import httpx
import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from orchestrator.domain.entities.errors import (
    Stage,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from orchestrator.infrastructure.gateways.acquire_gateway import AcquireGateway
from orchestrator.infrastructure.gateways.predict_gateway import PredictGateway
from orchestrator.main.app import create_app
from orchestrator.main.container import get_container
from tests.fakes import FakeAcquireGateway, FakePredictGateway


@pytest.fixture()
def make_client():
    clients = []

    def _make(acquire, predict) -> TestClient:
        app = create_app()
        container = get_container()
        container.acquire_gateway.override(providers.Object(acquire))
        container.predict_gateway.override(providers.Object(predict))
        client = TestClient(app)
        clients.append((client, container))
        return client

    yield _make

    for client, container in clients:
        client.close()
        container.unwire()


def test_run_returns_unified_result(make_client, acquire_gateway, predict_gateway):
    client = make_client(acquire_gateway, predict_gateway)

    response = client.post("/run", json={"sensor": "s1"})

    assert response.status_code == 200
    body = response.json()
    assert body["dataId"] == "d1"
    assert body["predictionId"] == "p1"
    assert body["prediction"] == 0.87
    datetime.fromisoformat(body["timestamp"].replace("Z", "+00:00"))
    assert set(body) == {"dataId", "predictionId", "prediction", "timestamp"}
    assert acquire_gateway.calls == [{"sensor": "s1"}]


def test_run_without_body_forwards_empty_object(
    make_client, acquire_gateway, predict_gateway
):
    client = make_client(acquire_gateway, predict_gateway)

    response = client.post("/run")

    assert response.status_code == 200
    assert acquire_gateway.calls == [{}]


@pytest.mark.parametrize("count", [0, 6, 8])
def test_run_rejects_wrong_feature_count(
    make_client, acquire_body, predict_gateway, count
):
    acquire_body["features"] = list(range(count))
    client = make_client(FakeAcquireGateway(body=acquire_body), predict_gateway)

    response = client.post("/run", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
    assert "ACQUIRE_WRONG_FEATURES" in body["detail"]
    assert body["time"].endswith("ms")
    assert predict_gateway.calls == []


def test_acquire_failure_never_calls_prediction(make_client, predict_gateway):
    acquire = FakeAcquireGateway(
        error=UpstreamResponseError(Stage.ACQUIRE, 500, {"error": "Kunna down"})
    )
    client = make_client(acquire, predict_gateway)

    response = client.post("/run", json={})

    assert response.status_code == 500
    body = response.json()
    assert body["service"] == "acquire"
    assert body["statusCode"] == 500
    assert body["detail"] == {"error": "Kunna down"}
    assert predict_gateway.calls == []


def test_prediction_connection_refused_is_attributed_to_prediction(
    make_client, acquire_gateway
):
    predict = FakePredictGateway(
        error=UpstreamUnavailableError(Stage.PREDICT, "predict2:3002")
    )
    client = make_client(acquire_gateway, predict)

    response = client.post("/run", json={})

    assert response.status_code == 503
    body = response.json()
    assert body["service"] == "predict2"
    assert body["endpoint"] == "predict2:3002"


def test_real_gateways_attribute_refused_connections(make_client):
    # Port 1 on the loopback interface is closed, so the connection is refused.
    acquire = AcquireGateway("http://127.0.0.1:1")
    predict = PredictGateway("http://127.0.0.1:1")
    client = make_client(acquire, predict)

    response = client.post("/run", json={})

    assert response.status_code == 503
    body = response.json()
    assert body["service"] == "acquire"
    assert body["endpoint"] == "127.0.0.1:1"


class _SlowAsyncClient:
    def __init__(self, delays, bodies):
        self._delays = delays
        self._bodies = bodies

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def post(self, url, headers, json=None):
        stage = "acquire" if url.endswith("/data") else "predict"
        await asyncio.sleep(self._delays[stage])
        return httpx.Response(
            200, json=self._bodies[stage], request=httpx.Request("POST", url)
        )


def _bounded_gateways():
    # Bounds scaled down from 20 s / 15 s, keeping acquisition the longer one.
    return (
        AcquireGateway("http://acquire:3001", timeout=0.2),
        PredictGateway("http://predict2:3002", timeout=0.15),
    )


def test_slow_acquisition_times_out_as_acquire(
    make_client, monkeypatch, acquire_body, predict_body
):
    bodies = {"acquire": acquire_body, "predict": predict_body}
    monkeypatch.setattr(
        "httpx.AsyncClient",
        lambda timeout: _SlowAsyncClient({"acquire": 0.5, "predict": 0}, bodies),
    )
    client = make_client(*_bounded_gateways())

    response = client.post("/run", json={})

    assert response.status_code == 504
    assert response.json()["service"] == "acquire"
    assert response.json()["error"] == "Timeout"


def test_slow_prediction_times_out_as_prediction(
    make_client, monkeypatch, acquire_body, predict_body
):
    bodies = {"acquire": acquire_body, "predict": predict_body}
    monkeypatch.setattr(
        "httpx.AsyncClient",
        lambda timeout: _SlowAsyncClient({"acquire": 0, "predict": 0.4}, bodies),
    )
    client = make_client(*_bounded_gateways())

    response = client.post("/run", json={})

    assert response.status_code == 504
    assert response.json()["service"] == "predict2"


def test_missing_prediction_timestamp_is_generated(make_client, acquire_gateway):
    predict = FakePredictGateway(body={"predictionId": "p1", "prediction": 0.87})
    client = make_client(acquire_gateway, predict)

    response = client.post("/run", json={})

    timestamp = response.json()["timestamp"]
    assert timestamp
    assert datetime.fromisoformat(timestamp.replace("Z", "+00:00")).year >= 2024


def test_unexpected_failure_maps_to_500(make_client, acquire_gateway):
    predict = FakePredictGateway(error=KeyError("prediction"))
    client = make_client(acquire_gateway, predict)

    response = client.post("/run", json={})

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == "Internal orchestrator error"
    assert "service" not in body


class _TextAsyncClient:
    def __init__(self, text):
        self._text = text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return None

    async def post(self, url, headers, json=None):
        return httpx.Response(200, text=self._text, request=httpx.Request("POST", url))


def test_non_json_acquisition_body_is_a_validation_error(
    make_client, monkeypatch, predict_gateway
):
    monkeypatch.setattr(
        "httpx.AsyncClient", lambda timeout: _TextAsyncClient("<html>oops</html>")
    )
    client = make_client(AcquireGateway("http://acquire:3001"), predict_gateway)

    response = client.post("/run", json={})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
    assert "ACQUIRE_NOT_AN_OBJECT" in body["detail"]
    assert predict_gateway.calls == []


def test_malformed_json_body_uses_run_error_contract(
    make_client, acquire_gateway, predict_gateway
):
    client = make_client(acquire_gateway, predict_gateway)

    response = client.post(
        "/run", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
    assert body["detail"].startswith("Request body must be a JSON object")
    assert body["time"] == "0ms"
    assert acquire_gateway.calls == []


def test_non_object_json_body_uses_run_error_contract(
    make_client, acquire_gateway, predict_gateway
):
    client = make_client(acquire_gateway, predict_gateway)

    response = client.post("/run", json=[1, 2, 3])

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert acquire_gateway.calls == []
