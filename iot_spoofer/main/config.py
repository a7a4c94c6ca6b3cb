"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, the Home Assistant add-on options file,
.env files and default values.
"""

from typing import Any, Dict, Optional, Tuple, Type

from pydantic import Field
from pydantic.fields import FieldInfo
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from iot_spoofer.shared import EnumEnvironment, EnumLogLevel, load_addon_options
from iot_spoofer.shared.consts import DEFAULT_DEVICES_FILE_PATH


class AddonOptionsSettingsSource(PydanticBaseSettingsSource):
    """
    Settings source backed by the add-on options file.

    Options are flat (``mqtt_host``, ``mqtt_port``...), so each field is
    looked up under ``<prefix><field_name>``. Empty strings are treated as
    unset, which is how the Supervisor writes optional options.
    """

    def __init__(
        self,
        settings_cls: Type[BaseSettings],
        prefix: str = "",
        options: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(settings_cls)
        self.prefix = prefix
        self._options = load_addon_options() if options is None else options

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._options.get(f"{self.prefix}{field_name}"), field_name, False

    def __call__(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for field_name, field in self.settings_cls.model_fields.items():
            value, key, _ = self.get_field_value(field, field_name)
            if value is None or value == "":
                continue
            data[key] = value
        return data


class MqttSettings(BaseSettings):
    """MQTT broker configuration settings."""

    host: str = Field(default="localhost", description="MQTT broker host")
    port: int = Field(default=1883, description="MQTT broker port")
    username: Optional[str] = Field(default=None, description="MQTT username")
    password: Optional[str] = Field(default=None, description="MQTT password")
    client_id: str = Field(default="iot_spoofer", description="MQTT client ID")
    keepalive: int = Field(default=60, description="Keepalive interval in seconds")
    discovery_prefix: str = Field(
        default="homeassistant", description="Home Assistant discovery prefix"
    )
    reconnect_min_delay: int = Field(
        default=1, description="Minimum delay between reconnect attempts (seconds)"
    )
    reconnect_max_delay: int = Field(
        default=5, description="Maximum delay between reconnect attempts (seconds)"
    )
    publish_timeout: float = Field(
        default=10.0, description="Seconds to wait for a publish acknowledgment"
    )

    model_config = SettingsConfigDict(
        env_prefix="MQTT_", case_sensitive=False, extra="ignore"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # Environment wins over the add-on options file
        return (
            init_settings,
            env_settings,
            AddonOptionsSettingsSource(settings_cls, prefix="mqtt_"),
            dotenv_settings,
            file_secret_settings,
        )


class StorageSettings(BaseSettings):
    """Device store configuration settings."""

    file_path: str = Field(
        default=DEFAULT_DEVICES_FILE_PATH,
        description="Path of the JSON file holding the devices",
    )

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_", case_sensitive=False, extra="ignore"
    )


class ServerSettings(BaseSettings):
    """HTTP server configuration settings."""

    title: str = Field(default="IoT Device Spoofer", description="API title")
    description: str = Field(
        default="Create virtual devices and announce them to Home Assistant "
        "through MQTT Discovery",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(default=8080, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )
    frontend_dir: str = Field(
        default="frontend",
        description="Directory holding the dashboard build, served at /",
    )
    discovery_retry_interval: float = Field(
        default=5.0,
        description="Seconds between startup discovery attempts",
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVER_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    mqtt: MqttSettings = Field(default_factory=MqttSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
