from __future__ import annotations

import asyncio

import pytest
from dependency_injector import providers

from iot_spoofer.domain.entities.device import Device
from iot_spoofer.domain.entities.entity import LightEntity
from iot_spoofer.infrastructure.mqtt import MqttConnection
from iot_spoofer.main.config import AppSettings
from iot_spoofer.main.container import app_lifespan, get_container, init_container
from tests.conftest import FakeMqttConnection


def _init(device_repository, connection: FakeMqttConnection):
    container = init_container(AppSettings())
    container.mqtt_connection.override(providers.Object(connection))
    container.device_repository.override(providers.Object(device_repository))
    return container


def test_init_and_get_container() -> None:
    container = init_container(AppSettings())
    assert get_container() is container
    assert isinstance(container.mqtt_connection(), MqttConnection)
    assert container.discovery_publisher() is container.discovery_publisher()


@pytest.mark.asyncio
async def test_app_lifespan_manages_resources(device_repository) -> None:
    connection = FakeMqttConnection()
    container = _init(device_repository, connection)

    async with app_lifespan():
        await asyncio.sleep(0)
        assert connection.connect_calls == 1
        assert connection.connect_listeners == [
            container.command_handler().subscribe_all
        ]
        assert connection.message_handler is not None

    assert connection.disconnect_calls == 1


@pytest.mark.asyncio
async def test_app_lifespan_survives_connect_failure(device_repository) -> None:
    class _Unreachable(FakeMqttConnection):
        async def connect(self) -> None:
            raise OSError("connection refused")

    connection = _Unreachable(connected=False)
    _init(device_repository, connection)

    async with app_lifespan():
        pass

    assert connection.disconnect_calls == 1


@pytest.mark.asyncio
async def test_startup_discovery_runs_for_stored_devices(device_repository) -> None:
    device = await device_repository.create(
        Device(name="Hall", entities=[LightEntity(id="e1")])
    )
    connection = FakeMqttConnection()
    container = _init(device_repository, connection)

    async with app_lifespan():
        bootstrapper = container.discovery_bootstrapper()
        for _ in range(100):
            if bootstrapper.completed:
                break
            await asyncio.sleep(0.01)

    assert bootstrapper.completed is True
    assert f"homeassistant/light/{device.id}_e1/config" in connection.topics()


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("iot_spoofer.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
