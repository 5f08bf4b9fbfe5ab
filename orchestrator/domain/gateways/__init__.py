"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for the upstream services. Specific implementations
are provided by the infrastructure layer.
"""

from .acquire_gateway import IAcquireGateway
from .predict_gateway import IPredictGateway

__all__ = ["IAcquireGateway", "IPredictGateway"]
