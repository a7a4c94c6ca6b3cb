"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the device store, the
discovery publisher and the command channel.
"""

from .device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDevicesUseCase,
    PublishEntityStateUseCase,
    UpdateDeviceUseCase,
)
from .entity_use_cases import GetEntityTypesUseCase
from .health_use_cases import GetHealthStatusUseCase

__all__ = [
    "CreateDeviceUseCase",
    "DeleteDeviceUseCase",
    "GetDevicesUseCase",
    "PublishEntityStateUseCase",
    "UpdateDeviceUseCase",
    "GetEntityTypesUseCase",
    "GetHealthStatusUseCase",
]
