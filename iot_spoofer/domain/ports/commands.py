"""Domain port for the per-entity command and state channel."""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol

from iot_spoofer.domain.entities.device import Device

# (device_id, entity_id, raw_payload)
CommandCallback = Callable[[str, str, str], Awaitable[None]]


class ICommandChannel(Protocol):
    """Keeps command subscriptions in sync and publishes entity state."""

    async def subscribe_device(self, device: Device) -> None:
        """Subscribe to the command topic of every entity of the device."""
        ...

    async def unsubscribe_device(self, device: Device) -> None:
        """Drop the command subscriptions of every entity of the device."""
        ...

    async def publish_state(self, device_id: str, entity_id: str, state: str) -> None:
        """Publish a retained state value for one entity.

        Raises:
            BrokerNotConnectedError: If the broker connection is down
            BrokerPublishError: If the broker rejected the message
        """
        ...
