"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the device file,
the MQTT broker and background services.
"""

from iot_spoofer.infrastructure import mqtt, repositories, services

__all__ = ["mqtt", "repositories", "services"]
