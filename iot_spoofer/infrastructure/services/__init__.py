"""
Services Package - Infrastructure Layer

Background and diagnostic services built on the infrastructure adapters.
"""

from .discovery_bootstrapper import DiscoveryBootstrapper
from .health_check_service import HealthCheckService

__all__ = ["DiscoveryBootstrapper", "HealthCheckService"]
