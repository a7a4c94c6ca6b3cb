"""
MQTT Package - Infrastructure Layer

Broker connection, discovery publishing and command handling.
"""

from .command_handler import MqttCommandHandler
from .discovery_publisher import MqttDiscoveryPublisher
from .mqtt_client import MqttConnection

__all__ = ["MqttCommandHandler", "MqttConnection", "MqttDiscoveryPublisher"]
