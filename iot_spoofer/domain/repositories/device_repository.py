"""
Device Repository Interface

This module defines the interface for device repositories following
the repository pattern. It abstracts the persistence of the device
collection from the storage format.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.entities.entity import BaseEntity


class IDeviceRepository(ABC):
    """Interface for Device repository implementations."""

    @abstractmethod
    async def list_devices(self) -> List[Device]:
        """
        Return every stored device in stored order.

        Returns:
            List of devices, empty when nothing has been stored yet
        """
        pass

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """
        Find a device by its ID.

        Args:
            device_id: The unique identifier of the device

        Returns:
            The device if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, device: Device) -> Device:
        """
        Store a new device.

        Assigns a fresh id to the device and to every entity lacking one.

        Args:
            device: The device to create

        Returns:
            The created device with generated ids populated

        Raises:
            DeviceValidationError: If the device has no name
        """
        pass

    @abstractmethod
    async def update(
        self,
        device_id: str,
        name: Optional[str] = None,
        entities: Optional[List[BaseEntity]] = None,
    ) -> Optional[Device]:
        """
        Apply a partial update to a stored device.

        Args:
            device_id: The unique identifier of the device
            name: New name, if it changes
            entities: Replacement entity list, if it changes

        Returns:
            The updated device, or None if the device does not exist
        """
        pass

    @abstractmethod
    async def delete(self, device_id: str) -> bool:
        """
        Delete a device by its ID.

        Args:
            device_id: The unique identifier of the device

        Returns:
            True if a device was removed
        """
        pass
