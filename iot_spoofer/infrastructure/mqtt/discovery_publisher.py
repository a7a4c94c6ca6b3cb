"""
Discovery Publisher - Infrastructure Layer

Announces devices to Home Assistant over MQTT Discovery and retracts them.
"""

import json

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.entities.entity import BaseEntity
from iot_spoofer.domain.ports.discovery import IDiscoveryPublisher
from iot_spoofer.domain.services import topics
from iot_spoofer.domain.services.discovery import build_discovery_payload
from iot_spoofer.infrastructure.mqtt.mqtt_client import MqttConnection
from iot_spoofer.shared import get_logger

logger = get_logger(__name__)

DISCOVERY_QOS = 1


class MqttDiscoveryPublisher(IDiscoveryPublisher):
    """Publishes one retained discovery config per entity."""

    def __init__(
        self,
        connection: MqttConnection,
        discovery_prefix: str = topics.DEFAULT_DISCOVERY_PREFIX,
    ) -> None:
        self._connection = connection
        self._discovery_prefix = discovery_prefix

    def _config_topic(self, device: Device, entity: BaseEntity) -> str:
        return topics.config_topic(
            device.id, entity.id, entity.type, self._discovery_prefix
        )

    async def _publish_availability(self, device: Device, payload: str) -> None:
        topic = topics.availability_topic(device.id)
        try:
            await self._connection.publish(
                topic, payload, qos=DISCOVERY_QOS, retain=True
            )
        except Exception as e:
            logger.error(
                "discovery.availability_failed",
                device_id=device.id,
                availability=payload,
                error=str(e),
            )

    async def publish_discovery(self, device: Device) -> bool:
        if not self._connection.is_connected:
            logger.warning(
                "discovery.publish_skipped",
                device_id=device.id,
                reason="mqtt not connected",
            )
            return False

        logger.info(
            "discovery.publishing",
            device_id=device.id,
            device_name=device.name,
            entity_count=len(device.entities),
        )

        # Each publish is acknowledged before the next entity is sent
        for entity in device.entities:
            topic = self._config_topic(device, entity)
            payload = build_discovery_payload(device, entity)
            try:
                await self._connection.publish(
                    topic, json.dumps(payload), qos=DISCOVERY_QOS, retain=True
                )
                logger.debug(
                    "discovery.entity_published",
                    device_id=device.id,
                    entity_id=entity.id,
                    topic=topic,
                )
            except Exception as e:
                logger.error(
                    "discovery.entity_failed",
                    device_id=device.id,
                    entity_id=entity.id,
                    topic=topic,
                    error=str(e),
                )

        await self._publish_availability(device, topics.AVAILABILITY_ONLINE)
        return True

    async def remove_discovery(self, device: Device) -> bool:
        if not self._connection.is_connected:
            logger.warning(
                "discovery.remove_skipped",
                device_id=device.id,
                reason="mqtt not connected",
            )
            return False

        logger.info("discovery.removing", device_id=device.id, device_name=device.name)

        for entity in device.entities:
            topic = self._config_topic(device, entity)
            try:
                # An empty retained config is how Home Assistant forgets an entity
                await self._connection.publish(
                    topic, "", qos=DISCOVERY_QOS, retain=True
                )
                logger.debug(
                    "discovery.entity_removed",
                    device_id=device.id,
                    entity_id=entity.id,
                    topic=topic,
                )
            except Exception as e:
                logger.error(
                    "discovery.entity_remove_failed",
                    device_id=device.id,
                    entity_id=entity.id,
                    topic=topic,
                    error=str(e),
                )

        await self._publish_availability(device, topics.AVAILABILITY_OFFLINE)
        return True
