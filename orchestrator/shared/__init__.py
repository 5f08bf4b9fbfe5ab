"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the orchestrator.

Its primary responsibilities include:
- Defining cross-layer constants (environment names, log levels, call bounds)
- Centralizing logging configuration
- Time helpers used for timestamps and stage timings

It must not depend on Infrastructure or Frameworks.
"""

from .clock import elapsed_ms, utc_now, utc_now_iso
from .consts import EnumEnvironment, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "elapsed_ms",
    "get_logger",
    "update_logging_from_settings",
    "utc_now",
    "utc_now_iso",
]
