"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. Each gateway talks to one
upstream service and tags every failure with that service's stage.
"""

from .acquire_gateway import AcquireGateway
from .predict_gateway import PredictGateway

__all__ = ["AcquireGateway", "PredictGateway"]
