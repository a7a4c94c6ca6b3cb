from __future__ import annotations

import json

import pytest

from iot_spoofer.main.config import (
    AddonOptionsSettingsSource,
    AppSettings,
    MqttSettings,
    get_settings,
)
from iot_spoofer.shared.consts import EnumEnvironment

_MQTT_ENV = ("MQTT_HOST", "MQTT_PORT", "MQTT_USERNAME", "MQTT_PASSWORD")


@pytest.fixture()
def options_file(tmp_path, monkeypatch):
    path = tmp_path / "options.json"
    monkeypatch.setenv("ADDON_OPTIONS_PATH", str(path))
    for key in _MQTT_ENV:
        monkeypatch.delenv(key, raising=False)
    return path


def test_get_settings_loads_defaults(options_file, monkeypatch) -> None:
    monkeypatch.delenv("STORAGE_FILE_PATH", raising=False)
    settings = get_settings()
    assert settings.mqtt.host == "localhost"
    assert settings.mqtt.port == 1883
    assert settings.mqtt.client_id == "iot_spoofer"
    assert settings.mqtt.discovery_prefix == "homeassistant"
    assert settings.storage.file_path == "/data/devices.json"
    assert settings.server.port == 8080
    assert settings.server.discovery_retry_interval == 5.0
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(options_file, monkeypatch) -> None:
    monkeypatch.setenv("MQTT_HOST", "mosquitto")
    monkeypatch.setenv("STORAGE_FILE_PATH", "/tmp/devices.json")
    monkeypatch.setenv("SERVER_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.mqtt.host == "mosquitto"
    assert settings.storage.file_path == "/tmp/devices.json"
    assert settings.server.title == "Testing"
    assert settings.logging.level.value == "DEBUG"


def test_addon_options_fill_mqtt_settings(options_file) -> None:
    options_file.write_text(
        json.dumps(
            {
                "mqtt_host": "core-mosquitto",
                "mqtt_port": 1884,
                "mqtt_username": "",
                "mqtt_password": "pw",
                "log_level": "debug",
            }
        ),
        encoding="utf-8",
    )

    settings = MqttSettings()

    assert settings.host == "core-mosquitto"
    assert settings.port == 1884
    assert settings.username is None
    assert settings.password == "pw"


def test_environment_overrides_addon_options(options_file, monkeypatch) -> None:
    options_file.write_text(
        json.dumps({"mqtt_host": "core-mosquitto", "mqtt_port": 1884}),
        encoding="utf-8",
    )
    monkeypatch.setenv("MQTT_HOST", "from-env")

    settings = MqttSettings()

    assert settings.host == "from-env"
    assert settings.port == 1884


def test_addon_options_source_skips_unset_values() -> None:
    source = AddonOptionsSettingsSource(
        MqttSettings,
        prefix="mqtt_",
        options={"mqtt_host": "broker", "mqtt_username": "", "host": "ignored"},
    )
    assert source() == {"host": "broker"}
