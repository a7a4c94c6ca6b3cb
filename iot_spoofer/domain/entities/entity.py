"""
Domain Entities - Entity

This module defines the virtual capabilities a spoofed device can expose.
Each Home Assistant component maps to one tagged variant; the variant owns
its type tag and decides which fields survive serialization.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Dict, List, Mapping, Optional


class EntityType(str, Enum):
    """Home Assistant components a virtual entity can be announced as."""

    BINARY_SENSOR = "binary_sensor"
    SENSOR = "sensor"
    LIGHT = "light"
    LOCK = "lock"
    NUMBER = "number"
    SWITCH = "switch"


@dataclass
class EntityStates:
    """Enumeration of states an entity may report, plus its initial state."""

    available_states: List[str] = field(default_factory=list)
    default_state: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "available_states": list(self.available_states),
            "default_state": self.default_state,
        }

    @classmethod
    def from_value(cls, value: Any) -> Optional["EntityStates"]:
        if value is None:
            return None
        if isinstance(value, EntityStates):
            return value
        return cls(
            available_states=[str(s) for s in value.get("available_states") or []],
            default_state=str(value.get("default_state") or ""),
        )


def _compact(payload: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in payload.items() if value is not None}


@dataclass
class BaseEntity(ABC):
    """Common fields shared by every entity variant."""

    TYPE: ClassVar[EntityType]

    id: str = ""
    name: str = ""
    state_topic: Optional[str] = None
    command_topic: Optional[str] = None
    states: Optional[EntityStates] = None
    type: EntityType = field(init=False)

    def __post_init__(self) -> None:
        # The variant decides its tag; whatever the caller supplied is ignored
        self.type = self.TYPE

    def _common_fields(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "name": self.name,
            "state_topic": self.state_topic,
            "states": self.states.to_dict() if self.states else None,
        }

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the fields relevant to this variant."""

    @classmethod
    def _common_kwargs(cls, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            "id": str(data.get("id") or ""),
            "name": str(data.get("name") or ""),
            "state_topic": data.get("state_topic"),
            "command_topic": data.get("command_topic"),
            "states": EntityStates.from_value(data.get("states")),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BaseEntity":
        raise NotImplementedError("from_dict must be implemented in subclasses")


@dataclass
class BinarySensorEntity(BaseEntity):
    TYPE: ClassVar[EntityType] = EntityType.BINARY_SENSOR

    unit: Optional[str] = None
    device_class: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                **self._common_fields(),
                "unit": self.unit,
                "device_class": self.device_class,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BinarySensorEntity":
        return cls(
            **cls._common_kwargs(data),
            unit=data.get("unit"),
            device_class=data.get("device_class"),
        )


@dataclass
class SensorEntity(BaseEntity):
    TYPE: ClassVar[EntityType] = EntityType.SENSOR

    unit: Optional[str] = None
    device_class: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                **self._common_fields(),
                "unit": self.unit,
                "device_class": self.device_class,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SensorEntity":
        return cls(
            **cls._common_kwargs(data),
            unit=data.get("unit"),
            device_class=data.get("device_class"),
        )


@dataclass
class _CommandableEntity(BaseEntity):
    """Variants that accept commands and only carry the common fields."""

    def to_dict(self) -> Dict[str, Any]:
        return _compact({**self._common_fields(), "command_topic": self.command_topic})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "_CommandableEntity":
        return cls(**cls._common_kwargs(data))


@dataclass
class LightEntity(_CommandableEntity):
    TYPE: ClassVar[EntityType] = EntityType.LIGHT


@dataclass
class LockEntity(_CommandableEntity):
    TYPE: ClassVar[EntityType] = EntityType.LOCK


@dataclass
class SwitchEntity(_CommandableEntity):
    TYPE: ClassVar[EntityType] = EntityType.SWITCH


@dataclass
class NumberEntity(BaseEntity):
    TYPE: ClassVar[EntityType] = EntityType.NUMBER

    min: Optional[float] = None
    max: Optional[float] = None
    unit: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact(
            {
                **self._common_fields(),
                "command_topic": self.command_topic,
                "min": self.min,
                "max": self.max,
                "unit": self.unit,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "NumberEntity":
        return cls(
            **cls._common_kwargs(data),
            min=data.get("min"),
            max=data.get("max"),
            unit=data.get("unit"),
        )
