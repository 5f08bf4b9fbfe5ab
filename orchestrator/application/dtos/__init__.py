"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import (
    OrchestratorHealthDTO,
    OrchestratorStateDTO,
    ServiceDescriptorDTO,
    ServicesStatusDTO,
    UpstreamStatusDTO,
)
from .run_dto import RunErrorDTO, RunResultDTO

__all__ = [
    "OrchestratorHealthDTO",
    "OrchestratorStateDTO",
    "RunErrorDTO",
    "RunResultDTO",
    "ServiceDescriptorDTO",
    "ServicesStatusDTO",
    "UpstreamStatusDTO",
]
