"""
Command Handler - Infrastructure Layer

Listens on every entity's ``.../set`` topic and reflects the received
command back as the entity's retained state.
"""

from typing import Optional

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.ports.commands import CommandCallback, ICommandChannel
from iot_spoofer.domain.repositories.device_repository import IDeviceRepository
from iot_spoofer.domain.services import topics
from iot_spoofer.domain.services.commands import normalize_state_payload
from iot_spoofer.infrastructure.mqtt.mqtt_client import MqttConnection
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)

COMMAND_QOS = 1
STATE_QOS = 1


class MqttCommandHandler(ICommandChannel):
    """Subscribes to command topics and republishes normalized state."""

    def __init__(
        self,
        connection: MqttConnection,
        device_repository: IDeviceRepository,
        command_callback: Optional[CommandCallback] = None,
    ) -> None:
        self._connection = connection
        self._device_repository = device_repository
        self._command_callback = command_callback

    def register(self) -> None:
        """Hook into the connection: resubscribe on connect, receive messages."""
        self._connection.add_connect_listener(self.subscribe_all)
        self._connection.set_message_handler(self.handle_message)

    def set_command_callback(self, callback: Optional[CommandCallback]) -> None:
        self._command_callback = callback

    async def subscribe_all(self) -> None:
        """Subscribe to the command topic of every entity of every stored device."""
        try:
            devices = await self._device_repository.list_devices()
        except Exception as e:
            logger.error("commands.subscribe_all_failed", error=str(e))
            return

        for device in devices:
            await self.subscribe_device(device)

    async def subscribe_device(self, device: Device) -> None:
        for entity in device.entities:
            topic = topics.command_topic(device.id, entity.id)
            try:
                await self._connection.subscribe(topic, qos=COMMAND_QOS)
                logger.info("commands.subscribed", topic=topic)
            except Exception as e:
                logger.error("commands.subscribe_failed", topic=topic, error=str(e))

    async def unsubscribe_device(self, device: Device) -> None:
        for entity in device.entities:
            topic = topics.command_topic(device.id, entity.id)
            try:
                await self._connection.unsubscribe(topic)
                logger.info("commands.unsubscribed", topic=topic)
            except Exception as e:
                logger.error("commands.unsubscribe_failed", topic=topic, error=str(e))

    async def publish_state(self, device_id: str, entity_id: str, state: str) -> None:
        topic = topics.state_topic(device_id, entity_id)
        await self._connection.publish(topic, state, qos=STATE_QOS, retain=True)
        logger.info("commands.state_published", topic=topic, state=state)

    async def handle_message(self, topic: str, payload: str) -> None:
        """
        Process one inbound message.

        Failures are logged and dropped so the subscription keeps running.
        """
        logger.debug("commands.message_received", topic=topic, payload=payload)

        ids = topics.parse_command_topic(topic)
        if ids is None:
            logger.info("commands.topic_ignored", topic=topic)
            return

        device_id, entity_id = ids
        try:
            if self._command_callback is not None:
                await self._command_callback(device_id, entity_id, payload)

            state = normalize_state_payload(payload)
            await self.publish_state(device_id, entity_id, state)
        except Exception as e:
            logger.error(
                "commands.handling_failed",
                topic=topic,
                device_id=device_id,
                entity_id=entity_id,
                error=str(e),
            )
