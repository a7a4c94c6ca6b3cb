"""Helpers for reading the Home Assistant add-on options file."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from iot_spoofer.shared.consts import DEFAULT_ADDON_OPTIONS_PATH

logger = logging.getLogger(__name__)

ADDON_OPTIONS_PATH_ENV = "ADDON_OPTIONS_PATH"


def resolve_addon_options_path(path: Optional[str] = None) -> Path:
    """Return the options file location, honoring ADDON_OPTIONS_PATH."""
    return Path(
        path or os.environ.get(ADDON_OPTIONS_PATH_ENV) or DEFAULT_ADDON_OPTIONS_PATH
    )


def load_addon_options(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Read the add-on options written by the Supervisor.

    A missing file is the normal case outside Home Assistant and yields an
    empty mapping silently. Unreadable or malformed files are logged and
    also yield an empty mapping, so configuration falls back to defaults.
    """
    options_path = resolve_addon_options_path(path)
    if not options_path.exists():
        return {}

    try:
        raw = options_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        logger.warning(
            "addon_options.decode_failed",
            extra={"path": str(options_path), "error": str(exc)},
        )
        return {}
    except OSError as exc:
        logger.warning(
            "addon_options.load_failed",
            extra={"path": str(options_path), "error": str(exc)},
        )
        return {}

    try:
        options = json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.warning(
            "addon_options.invalid_json",
            extra={"path": str(options_path), "error": str(exc)},
        )
        return {}

    if not isinstance(options, dict):
        logger.warning(
            "addon_options.unexpected_shape",
            extra={"path": str(options_path), "type": type(options).__name__},
        )
        return {}

    return options
