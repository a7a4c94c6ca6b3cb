"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .device import DEFAULT_MANUFACTURER, Device
from .entity import (
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
from .errors import (
    BrokerNotConnectedError,
    BrokerPublishError,
    DeviceNotFoundError,
    DeviceStoreError,
    DeviceValidationError,
    DomainError,
    EntityNotFoundError,
    UnknownEntityTypeError,
)
from .health import DependencyStatus, ServiceStatus, SystemHealth

__all__ = [
    "BaseEntity",
    "BinarySensorEntity",
    "DEFAULT_MANUFACTURER",
    "Device",
    "EntityStates",
    "EntityType",
    "LightEntity",
    "LockEntity",
    "NumberEntity",
    "SensorEntity",
    "SwitchEntity",
    "DependencyStatus",
    "ServiceStatus",
    "SystemHealth",
    "DomainError",
    "DeviceNotFoundError",
    "DeviceStoreError",
    "DeviceValidationError",
    "EntityNotFoundError",
    "UnknownEntityTypeError",
    "BrokerNotConnectedError",
    "BrokerPublishError",
]
