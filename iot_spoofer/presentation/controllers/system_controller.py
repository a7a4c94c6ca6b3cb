"""System endpoints exposing health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from iot_spoofer.application.dtos.health_dto import SystemHealthDTO
from iot_spoofer.application.use_cases.health_use_cases import GetHealthStatusUseCase
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=SystemHealthDTO)
@inject
async def health(
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> SystemHealthDTO:
    """Return the status of the MQTT connection and the device store."""
    try:
        health_status = await get_health_status_use_case.execute()
        logger.debug("health.check.success", status=health_status.status.value)
        return health_status
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to retrieve system health status",
        ) from exc
