"""
IoT Device Spoofer Root Module

Home Assistant add-on that defines virtual IoT devices, persists them as
JSON and announces them through MQTT Discovery.

Layer Structure:
- Domain: Entity variants, devices, topic and discovery payload rules
- Application: Use cases and DTOs
- Infrastructure: JSON device store, MQTT connection, discovery and commands
- Presentation: FastAPI routers for the dashboard API
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""

__version__ = "1.0.0"
