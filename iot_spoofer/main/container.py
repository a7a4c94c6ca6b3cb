"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from iot_spoofer.application.use_cases.device_use_cases import (
    CreateDeviceUseCase,
    DeleteDeviceUseCase,
    GetDevicesUseCase,
    PublishEntityStateUseCase,
    UpdateDeviceUseCase,
)
from iot_spoofer.application.use_cases.entity_use_cases import GetEntityTypesUseCase
from iot_spoofer.application.use_cases.health_use_cases import GetHealthStatusUseCase
from iot_spoofer.infrastructure.mqtt import (
    MqttCommandHandler,
    MqttConnection,
    MqttDiscoveryPublisher,
)
from iot_spoofer.infrastructure.repositories import JsonDeviceRepository
from iot_spoofer.infrastructure.services import (
    DiscoveryBootstrapper,
    HealthCheckService,
)
from iot_spoofer.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mqtt_connection = providers.Singleton(
        MqttConnection,
        host=config.mqtt.host,
        port=config.mqtt.port,
        username=config.mqtt.username,
        password=config.mqtt.password,
        client_id=config.mqtt.client_id,
        keepalive=config.mqtt.keepalive,
        reconnect_min_delay=config.mqtt.reconnect_min_delay,
        reconnect_max_delay=config.mqtt.reconnect_max_delay,
        publish_timeout=config.mqtt.publish_timeout,
    )

    device_repository = providers.Singleton(
        JsonDeviceRepository,
        file_path=config.storage.file_path,
    )

    discovery_publisher = providers.Singleton(
        MqttDiscoveryPublisher,
        connection=mqtt_connection,
        discovery_prefix=config.mqtt.discovery_prefix,
    )

    command_handler = providers.Singleton(
        MqttCommandHandler,
        connection=mqtt_connection,
        device_repository=device_repository,
    )

    discovery_bootstrapper = providers.Singleton(
        DiscoveryBootstrapper,
        device_repository=device_repository,
        discovery_publisher=discovery_publisher,
        retry_interval=config.server.discovery_retry_interval,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mqtt_connection=mqtt_connection,
        device_repository=device_repository,
    )

    # Application (use cases)
    get_devices_use_case = providers.Factory(
        GetDevicesUseCase,
        device_repository=device_repository,
    )

    create_device_use_case = providers.Factory(
        CreateDeviceUseCase,
        device_repository=device_repository,
        discovery_publisher=discovery_publisher,
        command_channel=command_handler,
    )

    update_device_use_case = providers.Factory(
        UpdateDeviceUseCase,
        device_repository=device_repository,
        discovery_publisher=discovery_publisher,
        command_channel=command_handler,
    )

    delete_device_use_case = providers.Factory(
        DeleteDeviceUseCase,
        device_repository=device_repository,
        discovery_publisher=discovery_publisher,
        command_channel=command_handler,
    )

    publish_entity_state_use_case = providers.Factory(
        PublishEntityStateUseCase,
        device_repository=device_repository,
        command_channel=command_handler,
    )

    get_entity_types_use_case = providers.Factory(GetEntityTypesUseCase)

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Centralized lifecycle management for external resources.

    Starts the MQTT network loop and the startup discovery retry, and
    tears both down on shutdown. An unreachable broker does not prevent
    the HTTP API from starting; paho keeps reconnecting in the background.
    """
    container = get_container()

    mqtt_connection = container.mqtt_connection()
    command_handler = container.command_handler()
    discovery_bootstrapper = container.discovery_bootstrapper()

    command_handler.register()

    try:
        try:
            await mqtt_connection.connect()
        except Exception as e:
            logger.error("container.mqtt.connect_failed", error=str(e))

        discovery_bootstrapper.start()

        logger.info("container.resources.initialized")
        yield container

    finally:
        await discovery_bootstrapper.stop()

        logger.info("container.mqtt.close")
        await mqtt_connection.disconnect()

        logger.info("container.resources.shutdown")
