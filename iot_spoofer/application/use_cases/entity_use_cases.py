"""Use cases for entity metadata."""

from typing import List

from iot_spoofer.domain.services.entity_factory import get_available_entity_types


class GetEntityTypesUseCase:
    """Use case for listing the entity types a device may expose."""

    async def execute(self) -> List[str]:
        return get_available_entity_types()
