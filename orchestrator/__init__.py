"""
Prediction Orchestrator Root Module

Sequences a data-acquisition call and a prediction call behind a single
HTTP contract.

Layer Structure:
- Domain: Pipeline entities, error taxonomy, gateway contracts, validation
- Application: Use cases and DTOs
- Infrastructure: HTTP gateways to the upstream services and health checks
- Presentation: FastAPI controllers
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
