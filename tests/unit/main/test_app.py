from __future__ import annotations

import pytest
from dependency_injector import providers

from iot_spoofer.main import app as module_app
from iot_spoofer.main.app import create_app
from iot_spoofer.main.container import get_container
from tests.conftest import FakeMqttConnection


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan(device_repository) -> None:
    app = create_app()
    container = get_container()
    container.mqtt_connection.override(providers.Object(FakeMqttConnection()))
    container.device_repository.override(providers.Object(device_repository))

    assert app.title == "IoT Device Spoofer"

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is container

    # Ensure module-level app is instantiated
    assert isinstance(module_app.app, type(app))


def test_routes_are_registered() -> None:
    paths = {route.path for route in create_app().routes}
    assert {
        "/api/devices",
        "/api/devices/{device_id}",
        "/api/devices/{device_id}/entities/{entity_id}/state",
        "/api/entities/types",
        "/health",
    } <= paths


def test_frontend_is_mounted_when_present(tmp_path, monkeypatch) -> None:
    (tmp_path / "index.html").write_text("<html></html>", encoding="utf-8")
    monkeypatch.setenv("SERVER_FRONTEND_DIR", str(tmp_path))

    app = create_app()

    assert any(getattr(route, "name", None) == "frontend" for route in app.routes)
