"""
Discovery Payloads - Domain Service

Shapes the Home Assistant MQTT Discovery config published for each entity.
The base payload is identical for every component; each component then
adds the fields Home Assistant needs to interpret its state and commands.
"""

from typing import Any, Dict

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.entities.entity import (
    BaseEntity,
    BinarySensorEntity,
    NumberEntity,
    SensorEntity,
)

from . import topics

DEVICE_MODEL = "IoT Device Spoofer"
VIA_DEVICE = "iot_device_spoofer"

NUMBER_DEFAULT_MIN = 0
NUMBER_DEFAULT_MAX = 100


def build_base_payload(device: Device, entity: BaseEntity) -> Dict[str, Any]:
    return {
        "name": entity.name,
        "unique_id": topics.unique_id(device.id, entity.id),
        "state_topic": topics.state_topic(device.id, entity.id),
        "command_topic": topics.command_topic(device.id, entity.id),
        "device": {
            "identifiers": [device.id],
            "name": device.name,
            "manufacturer": device.manufacturer,
            "model": DEVICE_MODEL,
            "via_device": VIA_DEVICE,
        },
        "availability": {
            "topic": topics.availability_topic(device.id),
            "payload_available": topics.AVAILABILITY_ONLINE,
            "payload_not_available": topics.AVAILABILITY_OFFLINE,
        },
    }


def _apply_component_fields(
    payload: Dict[str, Any], entity: BaseEntity, component: str
) -> None:
    if component in ("switch", "light"):
        payload["payload_on"] = "On"
        payload["payload_off"] = "Off"
    elif component == "lock":
        payload["payload_lock"] = "Lock"
        payload["payload_unlock"] = "Unlock"
    elif component == "number":
        minimum = NUMBER_DEFAULT_MIN
        maximum = NUMBER_DEFAULT_MAX
        if isinstance(entity, NumberEntity):
            if entity.min is not None:
                minimum = entity.min
            if entity.max is not None:
                maximum = entity.max
            if entity.unit:
                payload["unit_of_measurement"] = entity.unit
        payload["min"] = minimum
        payload["max"] = maximum
    elif component == "binary_sensor":
        payload["payload_on"] = "on"
        payload["payload_off"] = "off"
        if isinstance(entity, BinarySensorEntity) and entity.device_class:
            payload["device_class"] = entity.device_class
    else:
        # sensor: any string state is accepted
        if isinstance(entity, SensorEntity):
            if entity.unit:
                payload["unit_of_measurement"] = entity.unit
            if entity.device_class:
                payload["device_class"] = entity.device_class


def build_discovery_payload(device: Device, entity: BaseEntity) -> Dict[str, Any]:
    """
    Build the discovery config for one entity of a device.

    Args:
        device: The owning device
        entity: The entity being announced

    Returns:
        JSON-serializable discovery payload
    """
    payload = build_base_payload(device, entity)
    _apply_component_fields(payload, entity, topics.component_for(entity.type))
    return payload
