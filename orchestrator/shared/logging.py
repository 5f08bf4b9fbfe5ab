"""
Logging Configuration - Shared Layer

Wires structlog on top of the standard logging module so that every
layer of the orchestrator emits dotted, key-value events through the
same handlers.
"""

import logging
import os
import sys
from typing import Any, List, Optional

import structlog
from structlog.types import Processor

from orchestrator.shared.consts import EnumEnvironment


def _level_from_env() -> str:
    return os.environ.get("LOG_LEVEL", "INFO")


def _file_from_env() -> Optional[str]:
    return os.environ.get("LOG_FILE_PATH") or None


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure structlog and the root logger.

    Called once at import time of the application module, before settings
    are loaded, and again through update_logging_from_settings().

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO.
        file_path: Optional log file; falls back to LOG_FILE_PATH.
        environment: Deployment environment, selects the renderer.
    """
    log_level = level or _level_from_env()
    log_file = file_path or _file_from_env()
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_select_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.format_exc_info,
        ],
    )

    handlers = _build_handlers(log_file)
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    logging.getLogger(__name__).debug("Logging configured with level %s", log_level)


def update_logging_from_settings(settings: Any) -> None:
    """Reconfigure logging from the loaded application settings."""
    try:
        level = settings.logging.level
        environment = settings.environment
        configure_logging(
            level=getattr(level, "value", level),
            file_path=settings.logging.file_path,
            environment=getattr(environment, "value", environment),
        )
    except (AttributeError, OSError) as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
