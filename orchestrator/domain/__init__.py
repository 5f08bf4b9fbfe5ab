"""
Domain Layer Package

This package contains the core rules of the orchestrator: the entities
exchanged between stages, the error taxonomy, the gateway contracts and
the acquisition result validator. It has no dependency on frameworks or
infrastructure concerns.
"""

# Re-export submodules
from orchestrator.domain import entities, gateways, ports, services

__all__ = ["entities", "gateways", "ports", "services"]
