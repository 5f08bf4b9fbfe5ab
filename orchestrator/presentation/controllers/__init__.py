"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error rendering, and mapping between API DTOs
and application layer use cases.
"""

from .pipeline_controller import router as pipeline_router
from .pipeline_controller import run_request_validation_handler
from .system_controller import router as system_router

__all__ = ["pipeline_router", "run_request_validation_handler", "system_router"]
