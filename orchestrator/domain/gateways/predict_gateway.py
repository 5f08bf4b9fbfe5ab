"""
Prediction Gateway Interface - Domain Layer

This module defines the interface for communicating with the
prediction service.
"""

from abc import ABC, abstractmethod
from typing import Any

from orchestrator.domain.entities.pipeline import PredictionRequest


class IPredictGateway(ABC):
    """Interface for the prediction service gateway."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Base URL of the prediction service."""
        pass

    @abstractmethod
    async def predict(self, request: PredictionRequest) -> Any:
        """
        Request a prediction for a feature vector.

        Raises:
            OrchestrationError: Tagged with the prediction stage when the
                call is refused, times out or returns a failure status
        """
        pass

    @abstractmethod
    async def health(self) -> Any:
        """Check the prediction service health endpoint."""
        pass
