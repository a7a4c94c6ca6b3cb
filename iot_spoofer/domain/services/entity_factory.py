"""
Entity Factory - Domain Service

Builds entity variants from raw definitions (API input or stored JSON)
by dispatching on their declared type.
"""

from typing import Any, Dict, List, Mapping, Type

from iot_spoofer.domain.entities.entity import (
    BaseEntity,
    BinarySensorEntity,
    EntityType,
    LightEntity,
    LockEntity,
    NumberEntity,
    SensorEntity,
    SwitchEntity,
)
from iot_spoofer.domain.entities.errors import UnknownEntityTypeError

ENTITY_REGISTRY: Dict[EntityType, Type[BaseEntity]] = {
    EntityType.BINARY_SENSOR: BinarySensorEntity,
    EntityType.SENSOR: SensorEntity,
    EntityType.LOCK: LockEntity,
    EntityType.LIGHT: LightEntity,
    EntityType.NUMBER: NumberEntity,
    EntityType.SWITCH: SwitchEntity,
}


def resolve_entity_type(value: Any) -> EntityType:
    """
    Map a declared type onto the closed set of entity types.

    Raises:
        UnknownEntityTypeError: If the type is not supported
    """
    if isinstance(value, EntityType):
        return value
    try:
        return EntityType(value)
    except ValueError:
        raise UnknownEntityTypeError(value) from None


def create_entity(definition: Mapping[str, Any]) -> BaseEntity:
    """
    Construct the entity variant matching ``definition["type"]``.

    Args:
        definition: Raw entity definition

    Returns:
        The constructed entity

    Raises:
        UnknownEntityTypeError: If the declared type is not registered
    """
    entity_type = resolve_entity_type(definition.get("type"))
    entity_class = ENTITY_REGISTRY.get(entity_type)
    if entity_class is None:
        raise UnknownEntityTypeError(entity_type.value)
    return entity_class.from_dict(definition)


def get_available_entity_types() -> List[str]:
    """Return the entity types the dashboard may offer."""
    return [entity_type.value for entity_type in ENTITY_REGISTRY]
