from __future__ import annotations

import pytest

from iot_spoofer.application.use_cases.entity_use_cases import GetEntityTypesUseCase
from iot_spoofer.presentation.controllers.entities_controller import get_entity_types


@pytest.mark.asyncio
async def test_get_entity_types() -> None:
    types = await get_entity_types(get_entity_types_use_case=GetEntityTypesUseCase())
    assert "switch" in types
    assert len(types) == 6
