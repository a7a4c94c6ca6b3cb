from __future__ import annotations

import pytest

from iot_spoofer.domain.entities.entity import (
    BaseEntity,
    BinarySensorEntity,
    EntityStates,
    EntityType,
    LightEntity,
    LockEntity,
    NumberEntity,
    SensorEntity,
    SwitchEntity,
)

_NOISY_INPUT = {
    "id": "e1",
    "type": "switch",
    "name": "Thing",
    "state_topic": "custom/state",
    "command_topic": "custom/set",
    "unit": "W",
    "device_class": "power",
    "min": 5,
    "max": 10,
    "color": "red",
}


def test_variant_fixes_its_own_type() -> None:
    entity = SensorEntity.from_dict({"id": "e1", "type": "light", "name": "Temp"})
    assert entity.type is EntityType.SENSOR
    assert entity.to_dict()["type"] == "sensor"


def test_base_entity_is_abstract() -> None:
    with pytest.raises(TypeError):
        BaseEntity()  # type: ignore[abstract]


def test_base_entity_from_dict_not_implemented() -> None:
    with pytest.raises(NotImplementedError):
        BaseEntity.from_dict({"type": "sensor"})


def test_sensor_serializes_unit_and_device_class_only() -> None:
    data = SensorEntity.from_dict(_NOISY_INPUT).to_dict()
    assert data == {
        "id": "e1",
        "type": "sensor",
        "name": "Thing",
        "state_topic": "custom/state",
        "unit": "W",
        "device_class": "power",
    }


def test_binary_sensor_serializes_unit_and_device_class_only() -> None:
    data = BinarySensorEntity.from_dict(_NOISY_INPUT).to_dict()
    assert set(data) == {"id", "type", "name", "state_topic", "unit", "device_class"}
    assert data["type"] == "binary_sensor"


@pytest.mark.parametrize("variant", [LightEntity, LockEntity, SwitchEntity])
def test_commandable_variants_keep_command_topic(variant) -> None:
    data = variant.from_dict(_NOISY_INPUT).to_dict()
    assert set(data) == {"id", "type", "name", "state_topic", "command_topic"}
    assert data["command_topic"] == "custom/set"


def test_number_serializes_range_and_unit() -> None:
    data = NumberEntity.from_dict(_NOISY_INPUT).to_dict()
    assert data == {
        "id": "e1",
        "type": "number",
        "name": "Thing",
        "state_topic": "custom/state",
        "command_topic": "custom/set",
        "min": 5,
        "max": 10,
        "unit": "W",
    }


def test_to_dict_omits_unset_fields() -> None:
    data = LightEntity(id="e1", name="Lamp").to_dict()
    assert data == {"id": "e1", "type": "light", "name": "Lamp"}


def test_states_round_trip_through_dict() -> None:
    entity = SwitchEntity.from_dict(
        {
            "type": "switch",
            "name": "Plug",
            "states": {"available_states": ["On", "Off"], "default_state": "Off"},
        }
    )
    assert entity.states == EntityStates(
        available_states=["On", "Off"], default_state="Off"
    )
    assert entity.to_dict()["states"] == {
        "available_states": ["On", "Off"],
        "default_state": "Off",
    }


def test_missing_id_and_name_default_to_empty() -> None:
    entity = LockEntity.from_dict({"type": "lock"})
    assert entity.id == ""
    assert entity.name == ""
