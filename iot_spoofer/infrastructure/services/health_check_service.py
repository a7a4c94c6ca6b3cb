"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from typing import Iterable, List

from iot_spoofer.domain.entities.health import (
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)
from iot_spoofer.domain.ports.health_check import IHealthCheckService
from iot_spoofer.infrastructure.mqtt.mqtt_client import MqttConnection
from iot_spoofer.infrastructure.repositories.json_device_repository import (
    JsonDeviceRepository,
)


class HealthCheckService(IHealthCheckService):
    """Report the broker connection and device store availability."""

    def __init__(
        self,
        mqtt_connection: MqttConnection,
        device_repository: JsonDeviceRepository,
    ) -> None:
        self._mqtt_connection = mqtt_connection
        self._device_repository = device_repository

    async def evaluate(self) -> SystemHealth:
        dependency_statuses: List[DependencyStatus] = [
            self._check_mqtt(),
            await self._check_device_store(),
        ]
        return SystemHealth(
            status=self._aggregate_status(dependency_statuses),
            dependencies=dependency_statuses,
        )

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    def _check_mqtt(self) -> DependencyStatus:
        details = {
            "host": self._mqtt_connection.host,
            "port": self._mqtt_connection.port,
        }
        if self._mqtt_connection.is_connected:
            return DependencyStatus(
                name="mqtt",
                status=ServiceStatus.UP,
                message="Connected to MQTT broker",
                details=details,
            )
        # The HTTP API keeps working while paho reconnects
        return DependencyStatus(
            name="mqtt",
            status=ServiceStatus.DEGRADED,
            message="MQTT broker not connected; reconnecting in background",
            details=details,
        )

    async def _check_device_store(self) -> DependencyStatus:
        details = {"path": str(self._device_repository.file_path)}
        try:
            devices = await self._device_repository.list_devices()
        except Exception as exc:
            return DependencyStatus(
                name="device_store",
                status=ServiceStatus.DOWN,
                message=str(exc),
                details=details,
            )
        details["device_count"] = len(devices)
        return DependencyStatus(
            name="device_store",
            status=ServiceStatus.UP,
            message="Device store readable",
            details=details,
        )
