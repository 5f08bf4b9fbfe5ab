"""
Acquisition Gateway Interface - Domain Layer

This module defines the interface for communicating with the
acquisition service that produces feature vectors.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping


class IAcquireGateway(ABC):
    """Interface for the acquisition service gateway."""

    @property
    @abstractmethod
    def base_url(self) -> str:
        """Base URL of the acquisition service."""
        pass

    @abstractmethod
    async def acquire(self, payload: Mapping[str, Any]) -> Any:
        """
        Request a feature vector from the acquisition service.

        Args:
            payload: Caller-supplied body, forwarded without interpretation

        Returns:
            The decoded response body, not yet validated

        Raises:
            OrchestrationError: Tagged with the acquisition stage when the
                call is refused, times out or returns a failure status
        """
        pass

    @abstractmethod
    async def health(self) -> Any:
        """Check the acquisition service health endpoint."""
        pass
