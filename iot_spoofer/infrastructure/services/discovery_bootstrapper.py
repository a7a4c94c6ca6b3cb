"""
Discovery Bootstrapper - Infrastructure Layer

The broker is often not reachable yet when the add-on starts. This
service keeps retrying discovery for all stored devices on a fixed
interval until one round goes through for every device.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from iot_spoofer.domain.ports.discovery import IDiscoveryPublisher
from iot_spoofer.domain.repositories.device_repository import IDeviceRepository
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)


class DiscoveryBootstrapper:
    """Retries startup discovery until it succeeds once."""

    def __init__(
        self,
        device_repository: IDeviceRepository,
        discovery_publisher: IDiscoveryPublisher,
        retry_interval: float = 5.0,
    ) -> None:
        self._device_repository = device_repository
        self._discovery_publisher = discovery_publisher
        self._retry_interval = retry_interval
        self._task: Optional[asyncio.Task[None]] = None
        self.completed = False

    async def attempt(self) -> bool:
        """Run one discovery round; True when every device was announced."""
        try:
            devices = await self._device_repository.list_devices()
        except Exception as e:
            logger.error("discovery_bootstrap.load_failed", error=str(e))
            return False

        if not devices:
            logger.info("discovery_bootstrap.no_devices")
            return True

        logger.info("discovery_bootstrap.attempt", device_count=len(devices))
        published_all = True
        for device in devices:
            if not await self._discovery_publisher.publish_discovery(device):
                published_all = False
        return published_all

    async def run(self) -> None:
        while True:
            if await self.attempt():
                self.completed = True
                logger.info("discovery_bootstrap.completed")
                return
            await asyncio.sleep(self._retry_interval)

    def start(self) -> None:
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run())

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
