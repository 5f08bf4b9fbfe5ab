"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the upstream
HTTP services.
"""

from orchestrator.infrastructure import gateways, services

__all__ = ["gateways", "services"]
