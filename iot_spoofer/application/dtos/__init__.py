"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_dto import (
    DeleteDeviceResponseDTO,
    DeviceCreateDTO,
    DeviceResponseDTO,
    DeviceUpdateDTO,
    EntityDTO,
    EntityStateDTO,
    EntityStatesDTO,
)
from .health_dto import DependencyStatusDTO, SystemHealthDTO

__all__ = [
    "DeleteDeviceResponseDTO",
    "DeviceCreateDTO",
    "DeviceResponseDTO",
    "DeviceUpdateDTO",
    "EntityDTO",
    "EntityStateDTO",
    "EntityStatesDTO",
    "DependencyStatusDTO",
    "SystemHealthDTO",
]
