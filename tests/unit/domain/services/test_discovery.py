from __future__ import annotations

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.entities.entity import (
    BinarySensorEntity,
    LightEntity,
    LockEntity,
    NumberEntity,
    SensorEntity,
    SwitchEntity,
)
from iot_spoofer.domain.services.discovery import build_discovery_payload


def _device(*entities) -> Device:
    return Device(id="d1", name="Hall", manufacturer="Acme", entities=list(entities))


def test_base_payload_shape() -> None:
    entity = LightEntity(id="e1", name="Lamp")
    payload = build_discovery_payload(_device(entity), entity)

    assert payload["name"] == "Lamp"
    assert payload["unique_id"] == "iot_spoofer_d1_e1"
    assert payload["state_topic"] == "iot_spoofer/d1/e1/state"
    assert payload["command_topic"] == "iot_spoofer/d1/e1/set"
    assert payload["device"] == {
        "identifiers": ["d1"],
        "name": "Hall",
        "manufacturer": "Acme",
        "model": "IoT Device Spoofer",
        "via_device": "iot_device_spoofer",
    }
    assert payload["availability"] == {
        "topic": "iot_spoofer/d1/availability",
        "payload_available": "online",
        "payload_not_available": "offline",
    }


def test_switch_and_light_payloads() -> None:
    for entity in (SwitchEntity(id="e1"), LightEntity(id="e2")):
        payload = build_discovery_payload(_device(entity), entity)
        assert payload["payload_on"] == "On"
        assert payload["payload_off"] == "Off"


def test_lock_payload() -> None:
    entity = LockEntity(id="e1")
    payload = build_discovery_payload(_device(entity), entity)
    assert payload["payload_lock"] == "Lock"
    assert payload["payload_unlock"] == "Unlock"


def test_number_payload_uses_entity_range() -> None:
    entity = NumberEntity(id="e1", min=10, max=30, unit="°C")
    payload = build_discovery_payload(_device(entity), entity)
    assert payload["min"] == 10
    assert payload["max"] == 30
    assert payload["unit_of_measurement"] == "°C"


def test_number_payload_defaults_range() -> None:
    entity = NumberEntity(id="e1")
    payload = build_discovery_payload(_device(entity), entity)
    assert payload["min"] == 0
    assert payload["max"] == 100
    assert "unit_of_measurement" not in payload


def test_binary_sensor_payload() -> None:
    entity = BinarySensorEntity(id="e1", device_class="motion")
    payload = build_discovery_payload(_device(entity), entity)
    assert payload["payload_on"] == "on"
    assert payload["payload_off"] == "off"
    assert payload["device_class"] == "motion"


def test_sensor_payload_passes_unit_and_class() -> None:
    entity = SensorEntity(id="e1", unit="W", device_class="power")
    payload = build_discovery_payload(_device(entity), entity)
    assert payload["unit_of_measurement"] == "W"
    assert payload["device_class"] == "power"
    assert "payload_on" not in payload


def test_plain_sensor_adds_nothing() -> None:
    entity = SensorEntity(id="e1")
    payload = build_discovery_payload(_device(entity), entity)
    assert "unit_of_measurement" not in payload
    assert "device_class" not in payload
