"""
MQTT topic naming for spoofed devices.

All topics the add-on owns live under ``iot_spoofer/``; discovery configs
follow Home Assistant's ``<prefix>/<component>/<object_id>/config`` layout.
"""

from typing import Optional, Tuple

from iot_spoofer.domain.entities.entity import EntityType

BASE_TOPIC = "iot_spoofer"
DEFAULT_DISCOVERY_PREFIX = "homeassistant"

AVAILABILITY_ONLINE = "online"
AVAILABILITY_OFFLINE = "offline"

_COMPONENTS = {
    EntityType.BINARY_SENSOR.value: "binary_sensor",
    EntityType.SENSOR.value: "sensor",
    EntityType.LIGHT.value: "light",
    EntityType.SWITCH.value: "switch",
    EntityType.LOCK.value: "lock",
    EntityType.NUMBER.value: "number",
}


def component_for(entity_type: str) -> str:
    """Home Assistant component for an entity type; unknown types are sensors."""
    key = entity_type.value if isinstance(entity_type, EntityType) else entity_type
    return _COMPONENTS.get(key, "sensor")


def object_id(device_id: str, entity_id: str) -> str:
    return f"{device_id}_{entity_id}"


def unique_id(device_id: str, entity_id: str) -> str:
    return f"{BASE_TOPIC}_{object_id(device_id, entity_id)}"


def config_topic(
    device_id: str,
    entity_id: str,
    entity_type: str,
    discovery_prefix: str = DEFAULT_DISCOVERY_PREFIX,
) -> str:
    component = component_for(entity_type)
    return f"{discovery_prefix}/{component}/{object_id(device_id, entity_id)}/config"


def state_topic(device_id: str, entity_id: str) -> str:
    return f"{BASE_TOPIC}/{device_id}/{entity_id}/state"


def command_topic(device_id: str, entity_id: str) -> str:
    return f"{BASE_TOPIC}/{device_id}/{entity_id}/set"


def availability_topic(device_id: str) -> str:
    return f"{BASE_TOPIC}/{device_id}/availability"


def parse_command_topic(topic: str) -> Optional[Tuple[str, str]]:
    """
    Split ``iot_spoofer/<device_id>/<entity_id>/set`` into its ids.

    Returns None for any topic that does not have exactly that shape.
    """
    parts = topic.split("/")
    if len(parts) != 4 or parts[0] != BASE_TOPIC or parts[3] != "set":
        return None
    device_id, entity_id = parts[1], parts[2]
    if not device_id or not entity_id:
        return None
    return device_id, entity_id
