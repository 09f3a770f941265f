#!/usr/bin/env python
#
# Messenger - Configuration I/O
# © 2025 Shinichi Morita (shin3tky)
#

"""
Read messenger settings from a server owner's YAML or JSON file.

Example file::

    file_name: chat.yml
    prefix: "&8[MyPlugin] &f"
    defaults:
      greeting: "&aWelcome, %s!"

The prefix is written with ``&`` color codes and translated on load, since it
is sent after message rendering.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Tuple, Type

import yaml

from .colors import format_color_codes
from .exceptions import MessengerConfigError
from .schema import MessengerConfig

logger = logging.getLogger(__name__)

# suffix -> (format name, parser, parser error type)
_PARSERS: Dict[str, Tuple[str, Callable[[str], Any], Type[Exception]]] = {
    ".json": ("JSON", json.loads, json.JSONDecodeError),
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
}

SUPPORTED_CONFIG_EXTENSIONS = frozenset(_PARSERS)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise MessengerConfigError(
            "Configuration file is not valid UTF-8",
            filepath=str(path),
            original_error=exc,
            context={"error_category": "decode_failed"},
        ) from exc
    except OSError as exc:
        raise MessengerConfigError(
            "Failed to read configuration file",
            filepath=str(path),
            original_error=exc,
            context={"error_category": "read_failed"},
        ) from exc


def _parse_settings(path: Path, text: str) -> Dict[str, Any]:
    format_name, parse, parse_error = _PARSERS[path.suffix.lower()]
    try:
        data = parse(text)
    except parse_error as exc:
        raise MessengerConfigError(
            f"Invalid {format_name} configuration file",
            filepath=str(path),
            original_error=exc,
            context={"error_category": "parse_failed"},
        ) from exc

    # An empty YAML document keeps every default
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MessengerConfigError(
            "Configuration file must define an object at the top level",
            filepath=str(path),
            context={
                "error_category": "invalid_format",
                "actual_type": type(data).__name__,
            },
        )
    return data


def load_messenger_config(path: str | Path) -> MessengerConfig:
    """
    Load messenger settings from a ``.yaml``/``.yml``/``.json`` file.

    Raises:
        MessengerConfigError: If the file is missing, unreadable, not valid
            UTF-8, not parseable, or holds invalid settings.
    """
    config_path = Path(path)
    if config_path.suffix.lower() not in _PARSERS:
        raise MessengerConfigError(
            "Unsupported configuration file format",
            filepath=str(config_path),
            context={"supported_extensions": sorted(SUPPORTED_CONFIG_EXTENSIONS)},
        )
    if not config_path.exists():
        raise MessengerConfigError(
            "Configuration file not found", filepath=str(config_path)
        )
    if not config_path.is_file():
        raise MessengerConfigError(
            "Configuration path must be a file", filepath=str(config_path)
        )

    settings = _parse_settings(config_path, _read_text(config_path))

    prefix = settings.get("prefix")
    if isinstance(prefix, str):
        settings["prefix"] = format_color_codes(prefix)

    try:
        config = MessengerConfig.from_dict(settings)
    except KeyError as exc:
        raise MessengerConfigError(
            "Invalid messenger configuration",
            filepath=str(config_path),
            original_error=exc,
            context={"error_category": "unknown_key"},
        ) from exc
    except (TypeError, ValueError) as exc:
        raise MessengerConfigError(
            "Invalid messenger configuration",
            filepath=str(config_path),
            original_error=exc,
            context={"error_category": "invalid_value"},
        ) from exc

    logger.debug("Loaded messenger settings from %s", config_path)
    return config


__all__ = ["SUPPORTED_CONFIG_EXTENSIONS", "load_messenger_config"]
