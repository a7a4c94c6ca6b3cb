"""
Devices Router - Presentation Layer

This module defines the FastAPI router for device endpoints.
"""

from typing import List

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from iot_spoofer.application.dtos.device_dto import (
    DeleteDeviceResponseDTO,
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    EntityStateDTO,
)
from iot_spoofer.application.use_cases.device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDevicesUseCase,
    PublishEntityStateUseCase,
    UpdateDeviceUseCase,
)
from iot_spoofer.domain.entities.errors import (
    BrokerNotConnectedError,
    BrokerPublishError,
    DeviceNotFoundError,
    DeviceStoreError,
    DeviceValidationError,
    EntityNotFoundError,
    UnknownEntityTypeError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/devices", tags=["Devices"])


def _validation_detail(error: DeviceValidationError):
    return {"message": error.message, **error.details} if error.details else str(error)


@router.get("", response_model=List[DeviceResponseDTO])
@inject
async def get_devices(
    get_devices_use_case: GetDevicesUseCase = Depends(Provide["get_devices_use_case"]),
) -> List[DeviceResponseDTO]:
    """Return every stored device with its entities."""
    try:
        return await get_devices_use_case.execute()
    except DeviceStoreError as e:
        logger.error("devices.list_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except Exception as e:
        logger.error("devices.list_failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "",
    response_model=DeviceResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_device(
    device_dto: DeviceCreateDTO,
    create_device_use_case: CreateDeviceUseCase = Depends(
        Provide["create_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """
    Create a device and announce its entities to Home Assistant.

    The device is stored even when the MQTT broker is unreachable;
    discovery is retried on the next broker connection.
    """
    try:
        return await create_device_use_case.execute(device_dto=device_dto)
    except DeviceValidationError as e:
        logger.warning("devices.create_rejected", error=str(e), details=e.details)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_validation_detail(e),
        )
    except UnknownEntityTypeError as e:
        logger.warning("devices.create_rejected", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except DeviceStoreError as e:
        logger.error("devices.create_failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except Exception as e:
        logger.error("devices.create_failed", error=str(e), exc_info=e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.put("/{device_id}", response_model=DeviceResponseDTO)
@inject
async def update_device(
    device_id: str,
    device_dto: DeviceUpdateDTO,
    update_device_use_case: UpdateDeviceUseCase = Depends(
        Provide["update_device_use_case"]
    ),
) -> DeviceResponseDTO:
    """
    Rename a device and/or replace its entities.
    """
    try:
        return await update_device_use_case.execute(
            device_id=device_id, device_dto=device_dto
        )
    except DeviceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except DeviceValidationError as e:
        logger.warning(
            "devices.update_rejected",
            device_id=device_id,
            error=str(e),
            details=e.details,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=_validation_detail(e),
        )
    except UnknownEntityTypeError as e:
        logger.warning("devices.update_rejected", device_id=device_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except DeviceStoreError as e:
        logger.error("devices.update_failed", device_id=device_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "devices.update_failed", device_id=device_id, error=str(e), exc_info=e
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.delete("/{device_id}", response_model=DeleteDeviceResponseDTO)
@inject
async def delete_device(
    device_id: str,
    delete_device_use_case: DeleteDeviceUseCase = Depends(
        Provide["delete_device_use_case"]
    ),
) -> DeleteDeviceResponseDTO:
    """
    Delete a device and clear its discovery configs.
    """
    try:
        return await delete_device_use_case.execute(device_id=device_id)
    except DeviceNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except DeviceStoreError as e:
        logger.error("devices.delete_failed", device_id=device_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "devices.delete_failed", device_id=device_id, error=str(e), exc_info=e
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post(
    "/{device_id}/entities/{entity_id}/state",
    response_model=EntityStateDTO,
)
@inject
async def publish_entity_state(
    device_id: str,
    entity_id: str,
    state_dto: EntityStateDTO,
    publish_entity_state_use_case: PublishEntityStateUseCase = Depends(
        Provide["publish_entity_state_use_case"]
    ),
) -> EntityStateDTO:
    """Publish a retained state value for one entity."""
    try:
        return await publish_entity_state_use_case.execute(
            device_id=device_id, entity_id=entity_id, state_dto=state_dto
        )
    except (DeviceNotFoundError, EntityNotFoundError) as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except BrokerNotConnectedError as e:
        logger.warning(
            "devices.state_publish_unavailable",
            device_id=device_id,
            entity_id=entity_id,
        )
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except BrokerPublishError as e:
        logger.error(
            "devices.state_publish_failed",
            device_id=device_id,
            entity_id=entity_id,
            error=str(e),
        )
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    except Exception as e:
        logger.error(
            "devices.state_publish_failed",
            device_id=device_id,
            entity_id=entity_id,
            error=str(e),
            exc_info=e,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
