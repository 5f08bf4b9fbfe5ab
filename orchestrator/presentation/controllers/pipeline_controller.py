"""
Presentation Layer - Pipeline Controller

Exposes the endpoint that runs the acquisition and prediction flow.
"""

from typing import Any, Dict, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Body, Depends, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from orchestrator.application.dtos.run_dto import RunErrorDTO, RunResultDTO
from orchestrator.application.use_cases.run_pipeline_use_case import RunPipelineUseCase
from orchestrator.domain.entities.errors import OrchestrationError
from orchestrator.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Pipeline"])


@router.post(
    "/run",
    response_model=RunResultDTO,
    summary="Run the acquisition and prediction flow",
    description="""
    Forward the request body to the acquisition service, validate the returned
    feature vector, request a prediction for it and return the unified result.
    Failures are classified and returned with a status matching their kind.
    """,
    responses={
        400: {"model": RunErrorDTO},
        500: {"model": RunErrorDTO},
        503: {"model": RunErrorDTO},
        504: {"model": RunErrorDTO},
    },
)
@inject
async def run_pipeline(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    run_pipeline_use_case: RunPipelineUseCase = Depends(
        Provide["run_pipeline_use_case"]
    ),
) -> Any:
    try:
        return await run_pipeline_use_case.execute(payload or {})
    except OrchestrationError as exc:
        error = RunErrorDTO.from_error(exc)
        logger.warning(
            "run.failed",
            status_code=exc.status_code,
            error=error.error,
            service=error.service,
        )
        return JSONResponse(status_code=exc.status_code, content=error.to_body())


async def run_request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render an unreadable POST /run body with the failure contract of /run."""
    if request.url.path != "/run":
        return await request_validation_exception_handler(request, exc)

    errors = exc.errors()
    message = "Request body must be a JSON object"
    if errors:
        message = f"{message}: {errors[0].get('msg')}"
    error = RunErrorDTO.invalid_request(message)
    logger.warning("run.invalid_request", error=message)
    return JSONResponse(status_code=400, content=error.to_body())
