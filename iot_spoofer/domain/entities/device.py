"""
Domain Entities - Device

A device is a named virtual appliance owning an ordered list of entities.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .entity import BaseEntity

DEFAULT_MANUFACTURER = "IoT Device Spoofer"


@dataclass
class Device:
    """Represents a virtual appliance announced to Home Assistant."""

    id: str = ""
    name: str = ""
    manufacturer: str = DEFAULT_MANUFACTURER
    entities: List[BaseEntity] = field(default_factory=list)

    def find_entity(self, entity_id: str) -> Optional[BaseEntity]:
        """Return the entity with the given id, if this device owns it."""
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None

    def entity_ids(self) -> List[str]:
        return [entity.id for entity in self.entities]
