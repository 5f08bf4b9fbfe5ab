"""System endpoints exposing health, upstream status and the service descriptor."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, status

from orchestrator.application.dtos.health_dto import (
    OrchestratorHealthDTO,
    ServiceDescriptorDTO,
    ServicesStatusDTO,
)
from orchestrator.application.use_cases.health_use_cases import (
    GetHealthUseCase,
    GetServiceDescriptorUseCase,
    GetServicesStatusUseCase,
)
from orchestrator.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/", response_model=ServiceDescriptorDTO)
@inject
async def descriptor(
    get_service_descriptor_use_case: GetServiceDescriptorUseCase = Depends(
        Provide["get_service_descriptor_use_case"]
    ),
) -> ServiceDescriptorDTO:
    """Return the service name, version, endpoints and active configuration."""
    return get_service_descriptor_use_case.execute()


@router.get("/health", response_model=OrchestratorHealthDTO)
@inject
async def health(
    get_health_use_case: GetHealthUseCase = Depends(Provide["get_health_use_case"]),
) -> OrchestratorHealthDTO:
    """Return the orchestrator's own liveness, without probing upstreams."""
    return get_health_use_case.execute()


@router.get(
    "/status",
    response_model=ServicesStatusDTO,
    response_model_exclude_none=True,
)
@inject
async def services_status(
    request: Request,
    get_services_status_use_case: GetServicesStatusUseCase = Depends(
        Provide["get_services_status_use_case"]
    ),
) -> ServicesStatusDTO:
    """Check both upstream services and report their combined status."""
    started_at = getattr(request.app.state, "started_at", None)
    try:
        status_response = await get_services_status_use_case.execute(started_at)
        logger.debug("status.retrieved", overall=status_response.overall.value)
        return status_response
    except Exception as exc:  # pragma: no cover - defensive logging path
        logger.error("status.fetch.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unable to retrieve services status",
        ) from exc
