"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DeviceNotFoundError(DomainError):
    """Raised when a device cannot be found."""

    def __init__(self, device_id: str, details: Optional[Dict[str, Any]] = None):
        self.device_id = device_id
        message = f"Device with ID {device_id} not found"
        super().__init__(message, details)


class EntityNotFoundError(DomainError):
    """Raised when a device does not own the requested entity."""

    def __init__(
        self,
        device_id: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.device_id = device_id
        self.entity_id = entity_id
        message = f"Entity {entity_id} not found on device {device_id}"
        super().__init__(message, details)


class DeviceValidationError(DomainError):
    """Raised when device input is invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnknownEntityTypeError(DomainError):
    """Raised when an entity declares a type outside the supported set."""

    def __init__(self, entity_type: Any, details: Optional[Dict[str, Any]] = None):
        self.entity_type = entity_type
        message = f"Unknown entity type: {entity_type}"
        super().__init__(message, details)


class DeviceStoreError(DomainError):
    """Raised when the device store cannot be read or written."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class BrokerNotConnectedError(DomainError):
    """Raised when an MQTT operation needs a connection that is not up."""

    def __init__(self, message: str = "MQTT client not connected"):
        super().__init__(message)


class BrokerPublishError(DomainError):
    """Raised when the broker did not accept a publish."""

    def __init__(self, topic: str, reason: str):
        self.topic = topic
        message = f"Failed to publish to {topic}: {reason}"
        super().__init__(message, {"topic": topic, "reason": reason})
