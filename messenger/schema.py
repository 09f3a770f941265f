#!/usr/bin/env python
#
# Messenger - Schema definitions
# © 2025 Shinichi Morita (shin3tky)
#

"""
Data structures, constants, and type definitions for message templates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .colors import ChatColor

# ==========================================
# Version
# ==========================================
VERSION = "1.0.0"

# ==========================================
# Default Settings
# ==========================================
DEFAULT_FILE_NAME = "messages.yml"
DEFAULT_PREFIX = ChatColor.DARK_GRAY + "[PLUGIN] " + ChatColor.WHITE

# Lines of a multi-line template are joined with this token before
# substitution and color translation, then split on it again.
SPLIT_TOKEN = "\n"


# ==========================================
# Template / rendered value variants
# ==========================================
def _plain(value: Any) -> Any:
    # ChatColor and other str subclasses become their plain text form
    if isinstance(value, str) and type(value) is not str:
        return str(value)
    return value


@dataclass(frozen=True)
class Line:
    """A single-line template or rendered message."""

    text: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "text", _plain(self.text))

    def to_raw(self) -> str:
        return self.text


@dataclass(frozen=True)
class Lines:
    """An ordered multi-line template or rendered message."""

    lines: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "lines", tuple(_plain(line) for line in self.lines))

    def __iter__(self):
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def to_raw(self) -> list:
        return list(self.lines)


@dataclass(frozen=True)
class Missing:
    """No template exists for ``key`` in the message file or the defaults."""

    key: str


@dataclass(frozen=True)
class Malformed:
    """The stored value for ``key`` is neither a string nor a list of strings."""

    key: str
    raw: Any = None

    @property
    def value_type(self) -> str:
        return type(self.raw).__name__


Template = Union[Line, Lines]
Rendered = Union[Line, Lines, Missing, Malformed]


def parse_template(key: str, value: Any) -> Union[Line, Lines, Malformed]:
    """Decide the variant of a raw stored value.

    Args:
        key: Message key (reported in :class:`Malformed`).
        value: Raw value read from YAML or passed as a default.

    Returns:
        ``Line`` for strings, ``Lines`` for sequences of strings, otherwise
        ``Malformed``.
    """
    if isinstance(value, (Line, Lines)):
        return value
    if isinstance(value, str):
        return Line(value)
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return Lines(tuple(value))
    return Malformed(key, value)


def parse_defaults(defaults: Mapping[str, Any]) -> Dict[str, Template]:
    """Parse a mapping of raw default values into templates.

    Raises:
        TypeError: If a key is not a string or a value cannot be parsed.
    """
    parsed: Dict[str, Template] = {}
    for key, value in defaults.items():
        if not isinstance(key, str):
            raise TypeError(f"Default message key must be a string, got {key!r}")
        template = parse_template(key, value)
        if isinstance(template, Malformed):
            raise TypeError(
                f"Default for '{key}' must be a string or a list of strings, "
                f"got {template.value_type}"
            )
        parsed[key] = template
    return parsed


# ==========================================
# Configuration
# ==========================================
_UNSET = object()


@dataclass
class MessengerConfig:
    """Settings applied to a :class:`~messenger.store.Messenger` before load.

    Attributes:
        file_name: Message file name inside the data folder.
        prefix: Prefix sent before prefixed messages (``None`` for none).
        defaults: Default templates, or ``None`` to keep the built-in set.
    """

    file_name: str = DEFAULT_FILE_NAME
    prefix: Optional[str] = DEFAULT_PREFIX
    defaults: Optional[Dict[str, Template]] = None

    def __post_init__(self) -> None:
        if not isinstance(self.file_name, str) or not self.file_name.strip():
            raise ValueError("file_name must be a non-empty string")
        if self.prefix is not None and not isinstance(self.prefix, str):
            raise TypeError("prefix must be a string or None")
        if self.defaults is not None:
            if not isinstance(self.defaults, Mapping):
                raise TypeError("defaults must be a mapping of key to template")
            self.defaults = parse_defaults(self.defaults)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"file_name": self.file_name, "prefix": self.prefix}
        if self.defaults is not None:
            data["defaults"] = {
                key: template.to_raw() for key, template in self.defaults.items()
            }
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MessengerConfig":
        """Create configuration from dictionary.

        Missing entries keep their defaults; an explicit ``prefix: null``
        disables the prefix.

        Args:
            data: Dictionary containing configuration values.

        Returns:
            MessengerConfig instance.
        """
        unknown = sorted(set(data) - {"file_name", "prefix", "defaults"})
        if unknown:
            raise KeyError(f"Unknown configuration keys: {', '.join(unknown)}")

        prefix = data.get("prefix", _UNSET)
        return cls(
            file_name=data.get("file_name", DEFAULT_FILE_NAME),
            prefix=DEFAULT_PREFIX if prefix is _UNSET else prefix,
            defaults=data.get("defaults"),
        )


def render_lines(lines: Sequence[str]) -> str:
    """Join lines the way multi-line templates are rendered."""
    return "".join(line + SPLIT_TOKEN for line in lines)


def split_lines(text: str) -> Tuple[str, ...]:
    """Split joined text back into lines.

    Trailing empty segments are dropped. Text without any content yields a
    single empty line.
    """
    if text == "":
        return ("",)
    parts = text.split(SPLIT_TOKEN)
    while parts and parts[-1] == "":
        parts.pop()
    return tuple(parts)


__all__ = [
    "VERSION",
    "DEFAULT_FILE_NAME",
    "DEFAULT_PREFIX",
    "SPLIT_TOKEN",
    "Line",
    "Lines",
    "Missing",
    "Malformed",
    "Template",
    "Rendered",
    "MessengerConfig",
    "parse_template",
    "parse_defaults",
    "render_lines",
    "split_lines",
]
