"""
Ports Package

Protocols the application layer depends on and the infrastructure layer
implements.
"""

from .commands import CommandCallback, ICommandChannel
from .discovery import IDiscoveryPublisher
from .health_check import IHealthCheckService

__all__ = [
    "CommandCallback",
    "ICommandChannel",
    "IDiscoveryPublisher",
    "IHealthCheckService",
]
