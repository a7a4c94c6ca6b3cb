"""
Logging Configuration - Shared Layer

This module wires Python's standard logging to structlog so that the
add-on emits structured events both from our own modules and from
third-party libraries (uvicorn, paho-mqtt).
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from iot_spoofer.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that are chatty at INFO level and only useful when debugging
_NOISY_LOGGERS = ("uvicorn.access", "paho", "asyncio")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """
    Read the bootstrap logging configuration from environment variables.

    Used before the settings object exists, so startup problems while
    loading the add-on options are still logged.
    """
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "file_path": os.environ.get("LOG_FILE_PATH"),
        "environment": os.environ.get("ENVIRONMENT"),
    }


def _select_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION.value:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def _quiet_third_party_loggers(numeric_level: int) -> None:
    floor = max(numeric_level, logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(floor)


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: Optional[str] = None,
) -> None:
    """
    Configure standard logging and structlog for the add-on.

    Args:
        level: Optional override for the log level.
        format_string: Kept for settings compatibility; structlog renders events.
        file_path: Optional log file in addition to stdout.
        environment: Application environment (development, production, ...).
    """
    env_config = _get_log_config_from_env()

    log_level = (level or env_config["level"] or "INFO").upper()
    log_file = file_path or env_config["file_path"]
    env_value = environment or env_config["environment"] or "development"

    numeric_level = getattr(logging, log_level, logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # The Supervisor collects add-on logs from stdout
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)
    shared_processors: List[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        timestamper,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _select_renderer(env_value),
        ],
        foreign_pre_chain=shared_processors,
    )

    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)
    _quiet_third_party_loggers(numeric_level)

    logger = get_logger(__name__)
    logger.debug(
        "logging.configured",
        level=log_level,
        environment=env_value,
        file_path=log_file,
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Reconfigure logging once the application settings are loaded.

    Args:
        settings: The application settings object from pydantic-settings.
    """
    try:
        log_level = (
            settings.logging.level.value
            if hasattr(settings.logging.level, "value")
            else settings.logging.level
        )
        environment = (
            settings.environment.value
            if hasattr(settings.environment, "value")
            else settings.environment
        )

        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
