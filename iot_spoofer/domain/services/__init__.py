"""
Domain Services Package

Pure rules shared by the application and infrastructure layers: entity
construction, MQTT topic naming, discovery payload shaping and command
normalization.
"""

from .commands import normalize_state_payload
from .discovery import build_discovery_payload
from .entity_factory import (
    ENTITY_REGISTRY,
    create_entity,
    get_available_entity_types,
    resolve_entity_type,
)

__all__ = [
    "ENTITY_REGISTRY",
    "build_discovery_payload",
    "create_entity",
    "get_available_entity_types",
    "normalize_state_payload",
    "resolve_entity_type",
]
