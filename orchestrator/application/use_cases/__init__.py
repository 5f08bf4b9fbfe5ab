"""
Use Cases Package - Application Layer

This package contains use cases that implement the orchestrator's
application logic: the acquisition and prediction run, and the
health, status and descriptor reports.
"""

from .health_use_cases import (
    GetHealthUseCase,
    GetServiceDescriptorUseCase,
    GetServicesStatusUseCase,
)
from .run_pipeline_use_case import RunPipelineUseCase

__all__ = [
    "GetHealthUseCase",
    "GetServiceDescriptorUseCase",
    "GetServicesStatusUseCase",
    "RunPipelineUseCase",
]
