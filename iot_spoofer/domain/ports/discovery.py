"""Domain port for announcing devices to Home Assistant."""

from __future__ import annotations

from typing import Protocol

from iot_spoofer.domain.entities.device import Device


class IDiscoveryPublisher(Protocol):
    """Announces and retracts devices through MQTT Discovery."""

    async def publish_discovery(self, device: Device) -> bool:
        """Publish one discovery config per entity and mark the device online.

        Returns False when the broker is not connected and nothing was sent.
        """
        ...

    async def remove_discovery(self, device: Device) -> bool:
        """Clear every entity config of the device and mark it offline.

        Returns False when the broker is not connected and nothing was sent.
        """
        ...
