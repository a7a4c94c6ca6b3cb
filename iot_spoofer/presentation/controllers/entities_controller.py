"""
Entities Router - Presentation Layer

Exposes the entity types the dashboard may offer when building a device.
"""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from iot_spoofer.application.use_cases.entity_use_cases import GetEntityTypesUseCase

router = APIRouter(prefix="/api/entities", tags=["Entities"])


@router.get("/types", response_model=List[str])
@inject
async def get_entity_types(
    get_entity_types_use_case: GetEntityTypesUseCase = Depends(
        Provide["get_entity_types_use_case"]
    ),
) -> List[str]:
    """Return the supported entity types."""
    return await get_entity_types_use_case.execute()
