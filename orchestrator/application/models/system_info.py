"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by the descriptor and status use cases."""

    service: str
    version: str
    description: str
    environment: str
    acquire_url: str
    predict_url: str
