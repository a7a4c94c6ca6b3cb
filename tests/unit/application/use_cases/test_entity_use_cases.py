from __future__ import annotations

import pytest

from iot_spoofer.application.use_cases.entity_use_cases import GetEntityTypesUseCase


@pytest.mark.asyncio
async def test_get_entity_types() -> None:
    types = await GetEntityTypesUseCase().execute()
    assert types == ["binary_sensor", "sensor", "lock", "light", "number", "switch"]
