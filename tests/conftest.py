from __future__ import annotations

from typing import Any, Dict

import pytest

from tests.fakes import FakeAcquireGateway, FakePredictGateway


@pytest.fixture()
def acquire_body() -> Dict[str, Any]:
    return {
        "dataId": "d1",
        "features": [1, 2, 3, 4, 5, 6, 7],
        "featureCount": 7,
        "scalerVersion": "v1",
        "createdAt": "2024-01-01T00:00:00Z",
    }


@pytest.fixture()
def predict_body() -> Dict[str, Any]:
    return {"predictionId": "p1", "prediction": 0.87}


@pytest.fixture()
def acquire_gateway(acquire_body) -> FakeAcquireGateway:
    return FakeAcquireGateway(body=acquire_body)


@pytest.fixture()
def predict_gateway(predict_body) -> FakePredictGateway:
    return FakePredictGateway(body=predict_body)
