"""
Device DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for virtual devices
and their entities. These DTOs are used to transfer data between
the application layer and the presentation layer (API).
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

from iot_spoofer.domain.entities.device import Device


class EntityStatesDTO(BaseModel):
    """DTO for the states an entity may report."""

    available_states: List[str] = Field(
        default_factory=list, description="States the entity may report"
    )
    default_state: str = Field(default="", description="Initial state")


class EntityDTO(BaseModel):
    """DTO for an entity definition sent by the dashboard."""

    id: Optional[str] = Field(
        default=None,
        pattern=r"^[^/+#\s]*$",
        description="Entity ID, generated when omitted; used as an MQTT topic level",
    )
    type: str = Field(description="Home Assistant component of the entity")
    name: str = Field(default="", description="Display name of the entity")
    state_topic: Optional[str] = Field(default=None, description="State topic hint")
    command_topic: Optional[str] = Field(
        default=None, description="Command topic hint"
    )
    states: Optional[EntityStatesDTO] = Field(
        default=None, description="Available states and the default one"
    )
    unit: Optional[str] = Field(default=None, description="Unit of measurement")
    device_class: Optional[str] = Field(
        default=None, description="Home Assistant device class"
    )
    min: Optional[float] = Field(default=None, description="Minimum for numbers")
    max: Optional[float] = Field(default=None, description="Maximum for numbers")

    @model_validator(mode="after")
    def check_bounds(self) -> "EntityDTO":
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError("min must not be greater than max")
        return self

    model_config = {
        "extra": "ignore",
        "json_schema_extra": {
            "example": {
                "type": "switch",
                "name": "Power",
                "states": {
                    "available_states": ["On", "Off"],
                    "default_state": "Off",
                },
            }
        },
    }


class DeviceCreateDTO(BaseModel):
    """DTO for creating a device."""

    name: Optional[str] = Field(default=None, description="Device name")
    manufacturer: Optional[str] = Field(
        default=None, description="Manufacturer shown in Home Assistant"
    )
    entities: List[EntityDTO] = Field(
        default_factory=list, description="Entities exposed by the device"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "Living Room Lamp",
                "entities": [
                    {"type": "light", "name": "Lamp"},
                    {"type": "sensor", "name": "Power", "unit": "W"},
                ],
            }
        }
    }


class DeviceUpdateDTO(BaseModel):
    """DTO for a partial device update; entities are replaced wholesale."""

    name: Optional[str] = Field(default=None, description="New device name")
    entities: Optional[List[EntityDTO]] = Field(
        default=None, description="Replacement entity list"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Bedroom Lamp"},
        }
    }


class DeviceResponseDTO(BaseModel):
    """DTO for a stored device."""

    id: str = Field(description="Device ID")
    name: str = Field(description="Device name")
    manufacturer: str = Field(description="Manufacturer")
    entities: List[Dict[str, Any]] = Field(
        default_factory=list, description="Serialized entities"
    )

    @classmethod
    def from_domain(cls, device: Device) -> "DeviceResponseDTO":
        return cls(
            id=device.id,
            name=device.name,
            manufacturer=device.manufacturer,
            entities=[entity.to_dict() for entity in device.entities],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "id": "4f0c1b6e8f5d4c7a9b2e3d1f0a6c8e7b",
                "name": "Living Room Lamp",
                "manufacturer": "IoT Device Spoofer",
                "entities": [
                    {
                        "id": "9a1d2c3b4e5f60718293a4b5c6d7e8f9",
                        "type": "light",
                        "name": "Lamp",
                    }
                ],
            }
        }
    }


class DeleteDeviceResponseDTO(BaseModel):
    """DTO returned after deleting a device."""

    success: bool = Field(default=True, description="Whether the device was removed")


class EntityStateDTO(BaseModel):
    """DTO for pushing a state value to an entity."""

    state: str = Field(description="State payload published to the state topic")

    model_config = {"json_schema_extra": {"example": {"state": "On"}}}
