from __future__ import annotations

import pytest

from iot_spoofer.application.use_cases.health_use_cases import GetHealthStatusUseCase
from iot_spoofer.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)


class _HealthService:
    async def evaluate(self) -> SystemHealth:
        return SystemHealth(
            status=ServiceStatus.DEGRADED,
            dependencies=[DependencyStatus(name="mqtt", status=ServiceStatus.DEGRADED)],
        )


@pytest.mark.asyncio
async def test_get_health_status_use_case() -> None:
    dto = await GetHealthStatusUseCase(_HealthService()).execute()
    assert dto.status is ServiceStatus.DEGRADED
    assert dto.dependencies[0].name == "mqtt"
