"""
Repositories Package - Infrastructure Layer

Concrete repository implementations.
"""

from .json_device_repository import JsonDeviceRepository

__all__ = ["JsonDeviceRepository"]
