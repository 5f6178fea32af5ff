"""
System Router - Presentation Layer

Operational endpoints. ``/health`` mirrors the device store status in its
HTTP code so that load balancers can take an instance out of rotation while
verification cannot be answered.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get(
    "/health",
    response_model=SystemHealthDTO,
    response_model_exclude_none=True,
    responses={503: {"model": SystemHealthDTO, "description": "Device store down"}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Device store status and registry counts; 503 while it is down."""
    try:
        report = await get_health_status_use_case.execute()
    except Exception as exc:
        logger.error("system.health.failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Device store health could not be evaluated",
        ) from exc

    if not report.can_verify:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    logger.debug("system.health.reported", status=report.status.value)
    return report


@router.get("/info", response_model=ApplicationInfoDTO, response_model_exclude_none=True)
@inject
async def info(
    request: Request,
    get_application_info_use_case: GetApplicationInfoUseCase = Depends(
        Provide["get_application_info_use_case"]
    ),
) -> ApplicationInfoDTO:
    started_at = getattr(request.app.state, "started_at", None)
    try:
        return await get_application_info_use_case.execute(started_at)
    except Exception as exc:
        logger.error("system.info.failed", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Application info could not be assembled",
        ) from exc
