#!/usr/bin/env python
#
# Messenger - Message file storage
# © 2025 Shinichi Morita (shin3tky)
#

"""
YAML message file access.

The message file is a YAML mapping. Nested sections are exposed as dotted
keys, so ``{"menu": {"title": "Hi"}}`` is read as ``{"menu.title": "Hi"}``
and written back nested. Every failure is raised as
:class:`~messenger.exceptions.MessengerStorageError`; callers decide whether
to log or propagate.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping

import yaml

from .exceptions import MessengerStorageError

# Module-level logger for message file diagnostics
logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "."


def flatten_sections(node: Mapping[Any, Any], prefix: str = "") -> Dict[str, Any]:
    """Flatten nested mappings into dotted keys, keeping leaf values as-is."""
    flat: Dict[str, Any] = {}
    for key, value in node.items():
        full_key = f"{prefix}{SECTION_SEPARATOR}{key}" if prefix else str(key)
        if isinstance(value, Mapping):
            flat.update(flatten_sections(value, prefix=full_key))
        else:
            flat[full_key] = value
    return flat


def nest_sections(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild nested sections from dotted keys.

    A later dotted key replaces an earlier scalar stored at one of its parent
    paths.
    """
    root: Dict[str, Any] = {}
    for key, value in flat.items():
        parts = key.split(SECTION_SEPARATOR)
        node = root
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = value
    return root


class YamlMessageFile:
    """A message file on disk.

    Attributes:
        path: Location of the YAML file.

    Example:
        >>> message_file = YamlMessageFile("plugins/MyPlugin/messages.yml")
        >>> if not message_file.exists():
        ...     message_file.create()
        >>> entries = message_file.read()
        >>> entries["greeting"] = "Hello"
        >>> message_file.write(entries)
    """

    def __init__(self, path: str):
        self.path = path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def ensure_parent(self) -> None:
        """Create the containing folder (and its parents) if missing."""
        parent = os.path.dirname(self.path) or "."
        try:
            os.makedirs(parent, exist_ok=True)
        except OSError as exc:
            raise MessengerStorageError(
                f"Failed to create data folder: {exc}",
                filepath=parent,
                original_error=exc,
                operation="create",
                context={"error_category": "directory_creation_failed"},
            ) from exc

    def create(self) -> None:
        """Create an empty message file."""
        self.ensure_parent()
        try:
            with open(self.path, "x", encoding="utf-8"):
                pass
        except FileExistsError:
            logger.debug("Message file already exists: %s", self.path)
        except OSError as exc:
            raise MessengerStorageError(
                f"Failed to create message file: {exc}",
                filepath=self.path,
                original_error=exc,
                operation="create",
                context={"error_category": "create_failed"},
            ) from exc
        else:
            logger.debug("Created message file %s", self.path)

    def read(self) -> Dict[str, Any]:
        """Read the file into a flat key -> raw value mapping.

        An empty file reads as an empty mapping.
        """
        try:
            with open(self.path, encoding="utf-8") as fp:
                data = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise MessengerStorageError(
                f"Failed to parse message file: {exc}",
                filepath=self.path,
                original_error=exc,
                operation="parse",
                context={"error_category": "parse_failed"},
            ) from exc
        except UnicodeDecodeError as exc:
            raise MessengerStorageError(
                "Message file is not valid UTF-8",
                filepath=self.path,
                original_error=exc,
                operation="parse",
                context={"error_category": "decode_failed"},
            ) from exc
        except OSError as exc:
            raise MessengerStorageError(
                f"Failed to read message file: {exc}",
                filepath=self.path,
                original_error=exc,
                operation="load",
                context={"error_category": "read_failed"},
            ) from exc

        if data is None:
            return {}
        if not isinstance(data, Mapping):
            raise MessengerStorageError(
                "Message file format is invalid (expected a YAML mapping)",
                filepath=self.path,
                operation="load",
                context={
                    "error_category": "invalid_format",
                    "actual_type": type(data).__name__,
                },
            )
        entries = flatten_sections(data)
        logger.debug("Read %d message(s) from %s", len(entries), self.path)
        return entries

    def write(self, entries: Mapping[str, Any]) -> None:
        """Write a flat key -> raw value mapping to the file."""
        self.ensure_parent()
        try:
            with open(self.path, "w", encoding="utf-8") as fp:
                yaml.safe_dump(
                    nest_sections(entries),
                    fp,
                    allow_unicode=True,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except OSError as exc:
            raise MessengerStorageError(
                f"Failed to write message file: {exc}",
                filepath=self.path,
                original_error=exc,
                operation="save",
                context={"error_category": "write_failed"},
            ) from exc
        except yaml.YAMLError as exc:
            raise MessengerStorageError(
                f"Failed to serialize messages: {exc}",
                filepath=self.path,
                original_error=exc,
                operation="serialize",
                context={"error_category": "serialize_failed"},
            ) from exc
        logger.debug("Wrote %d message(s) to %s", len(entries), self.path)


__all__ = [
    "SECTION_SEPARATOR",
    "YamlMessageFile",
    "flatten_sections",
    "nest_sections",
]
