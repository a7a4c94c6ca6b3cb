"""
Application Layer Package

This package contains the application-specific business rules
and use cases. It orchestrates the flow of data between the API,
the device store and the MQTT broker.
"""

# Re-export submodules
from iot_spoofer.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
