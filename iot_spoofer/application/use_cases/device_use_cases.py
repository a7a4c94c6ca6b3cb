"""
Device Use Cases - Application Layer

This module defines use cases for device operations.
It orchestrates the device store, the discovery publisher and the
command channel so that every change made through the API is persisted
first and then reflected on the MQTT broker.
"""

from typing import List, Optional

from dependency_injector.wiring import Provide, inject

from iot_spoofer.application.dtos.device_dto import (
    DeleteDeviceResponseDTO,
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    EntityDTO,
    EntityStateDTO,
)
from iot_spoofer.domain.entities.device import DEFAULT_MANUFACTURER, Device
from iot_spoofer.domain.entities.entity import BaseEntity
from iot_spoofer.domain.entities.errors import (
    DeviceNotFoundError,
    EntityNotFoundError,
)
from iot_spoofer.domain.ports.commands import ICommandChannel
from iot_spoofer.domain.ports.discovery import IDiscoveryPublisher
from iot_spoofer.domain.repositories.device_repository import IDeviceRepository
from iot_spoofer.domain.services.entity_factory import create_entity
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)


def _to_entities(entity_dtos: List[EntityDTO]) -> List[BaseEntity]:
    return [create_entity(dto.model_dump(exclude_none=True)) for dto in entity_dtos]


class GetDevicesUseCase:
    """Use case for listing stored devices."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
    ):
        self.device_repository = device_repository

    async def execute(self) -> List[DeviceResponseDTO]:
        devices = await self.device_repository.list_devices()
        logger.debug("devices.listed", device_count=len(devices))
        return [DeviceResponseDTO.from_domain(device) for device in devices]


class CreateDeviceUseCase:
    """Use case for creating a device and announcing it."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        discovery_publisher: IDiscoveryPublisher = Provide["discovery_publisher"],
        command_channel: ICommandChannel = Provide["command_handler"],
    ):
        self.device_repository = device_repository
        self.discovery_publisher = discovery_publisher
        self.command_channel = command_channel

    async def execute(self, device_dto: DeviceCreateDTO) -> DeviceResponseDTO:
        """
        Persist a new device, then publish its discovery configs.

        Args:
            device_dto: The device create DTO

        Returns:
            The created device as a response DTO

        Raises:
            DeviceValidationError: If the name is missing or blank
            UnknownEntityTypeError: If an entity declares an unsupported type
        """
        device = Device(
            name=device_dto.name or "",
            manufacturer=device_dto.manufacturer or DEFAULT_MANUFACTURER,
            entities=_to_entities(device_dto.entities),
        )

        created = await self.device_repository.create(device)

        # The device is stored even when the broker is unreachable
        await self.discovery_publisher.publish_discovery(created)
        await self.command_channel.subscribe_device(created)

        logger.info(
            "devices.created",
            device_id=created.id,
            entity_count=len(created.entities),
        )
        return DeviceResponseDTO.from_domain(created)


class UpdateDeviceUseCase:
    """Use case for renaming a device or replacing its entities."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        discovery_publisher: IDiscoveryPublisher = Provide["discovery_publisher"],
        command_channel: ICommandChannel = Provide["command_handler"],
    ):
        self.device_repository = device_repository
        self.discovery_publisher = discovery_publisher
        self.command_channel = command_channel

    async def execute(
        self, device_id: str, device_dto: DeviceUpdateDTO
    ) -> DeviceResponseDTO:
        """
        Apply a partial update and republish discovery.

        Entities removed by the update have their discovery configs
        cleared so Home Assistant drops them.

        Raises:
            DeviceNotFoundError: If the device does not exist
            DeviceValidationError: If the new name is blank
            UnknownEntityTypeError: If an entity declares an unsupported type
        """
        previous = await self.device_repository.find_by_id(device_id)
        if previous is None:
            raise DeviceNotFoundError(device_id)

        entities: Optional[List[BaseEntity]] = None
        if device_dto.entities is not None:
            entities = _to_entities(device_dto.entities)

        updated = await self.device_repository.update(
            device_id, name=device_dto.name, entities=entities
        )
        if updated is None:
            raise DeviceNotFoundError(device_id)

        if entities is not None:
            await self._retract_stale_entities(previous, updated)
            await self.command_channel.unsubscribe_device(previous)
            await self.command_channel.subscribe_device(updated)

        await self.discovery_publisher.publish_discovery(updated)

        logger.info(
            "devices.updated",
            device_id=device_id,
            entity_count=len(updated.entities),
        )
        return DeviceResponseDTO.from_domain(updated)

    async def _retract_stale_entities(self, previous: Device, updated: Device) -> None:
        # A type change moves the config topic, so the old one is stale too
        kept = {(entity.id, entity.type) for entity in updated.entities}
        stale = [
            entity
            for entity in previous.entities
            if (entity.id, entity.type) not in kept
        ]
        if not stale:
            return

        await self.discovery_publisher.remove_discovery(
            Device(
                id=previous.id,
                name=previous.name,
                manufacturer=previous.manufacturer,
                entities=stale,
            )
        )
        logger.info(
            "devices.entities_retracted",
            device_id=previous.id,
            entity_ids=[entity.id for entity in stale],
        )


class DeleteDeviceUseCase:
    """Use case for deleting a device and retracting it from Home Assistant."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        discovery_publisher: IDiscoveryPublisher = Provide["discovery_publisher"],
        command_channel: ICommandChannel = Provide["command_handler"],
    ):
        self.device_repository = device_repository
        self.discovery_publisher = discovery_publisher
        self.command_channel = command_channel

    async def execute(self, device_id: str) -> DeleteDeviceResponseDTO:
        """
        Delete a device by its ID.

        Raises:
            DeviceNotFoundError: If the device does not exist
        """
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)

        if not await self.device_repository.delete(device_id):
            raise DeviceNotFoundError(device_id)

        await self.command_channel.unsubscribe_device(device)
        await self.discovery_publisher.remove_discovery(device)

        logger.info("devices.deleted", device_id=device_id)
        return DeleteDeviceResponseDTO(success=True)


class PublishEntityStateUseCase:
    """Use case for pushing a state value for one entity of a device."""

    @inject
    def __init__(
        self,
        device_repository: IDeviceRepository = Provide["device_repository"],
        command_channel: ICommandChannel = Provide["command_handler"],
    ):
        self.device_repository = device_repository
        self.command_channel = command_channel

    async def execute(
        self, device_id: str, entity_id: str, state_dto: EntityStateDTO
    ) -> EntityStateDTO:
        """
        Publish a retained state value to the entity's state topic.

        Raises:
            DeviceNotFoundError: If the device does not exist
            EntityNotFoundError: If the device has no such entity
            BrokerNotConnectedError: If the broker connection is down
            BrokerPublishError: If the broker rejected the message
        """
        device = await self.device_repository.find_by_id(device_id)
        if device is None:
            raise DeviceNotFoundError(device_id)
        if device.find_entity(entity_id) is None:
            raise EntityNotFoundError(device_id, entity_id)

        await self.command_channel.publish_state(device_id, entity_id, state_dto.state)
        return EntityStateDTO(state=state_dto.state)
