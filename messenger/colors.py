#!/usr/bin/env python
#
# Messenger - Color Codes
# © 2025 Shinichi Morita (shin3tky)
#

"""
Chat color codes and alternate color-code translation.

Game clients render a section sign (``§``) followed by a single code
character as a color or formatting switch. Message files use an alternate
marker (``&`` by default) that is easier to type; this module translates the
alternate form into the native form.

Example:
    >>> translate_alternate_color_codes("&", "&cRed &lbold")
    '§cRed §lbold'
    >>> str(ChatColor.DARK_GRAY) + "[PLUGIN] "
    '§8[PLUGIN] '
"""

from __future__ import annotations

import re
from enum import Enum

#: Native color escape character understood by the client
COLOR_CHAR = "§"

#: Alternate marker used in message files
ALTERNATE_COLOR_CHAR = "&"

#: Code characters that follow a color marker (both cases accepted)
ALL_CODES = "0123456789AaBbCcDdEeFfKkLlMmNnOoRrXx"

_STRIP_COLOR_PATTERN = re.compile(f"(?i){COLOR_CHAR}[0-9A-FK-ORX]")


class ChatColor(str, Enum):
    """Native chat colors and formats.

    Members compare equal to their single code character; ``str()`` yields the
    full escape sequence so they can be concatenated into templates.
    """

    BLACK = "0"
    DARK_BLUE = "1"
    DARK_GREEN = "2"
    DARK_AQUA = "3"
    DARK_RED = "4"
    DARK_PURPLE = "5"
    GOLD = "6"
    GRAY = "7"
    DARK_GRAY = "8"
    BLUE = "9"
    GREEN = "a"
    AQUA = "b"
    RED = "c"
    LIGHT_PURPLE = "d"
    YELLOW = "e"
    WHITE = "f"
    MAGIC = "k"
    BOLD = "l"
    STRIKETHROUGH = "m"
    UNDERLINE = "n"
    ITALIC = "o"
    RESET = "r"

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return COLOR_CHAR + self.value

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __add__(self, other: object) -> str:
        return str(self) + str(other)

    def __radd__(self, other: object) -> str:
        return str(other) + str(self)


def translate_alternate_color_codes(alt_color_char: str, text: str) -> str:
    """Translate ``alt_color_char`` + code into the native color escape.

    A marker that is not immediately followed by a recognized code character
    is left verbatim. Recognized codes are lowercased.

    Args:
        alt_color_char: Single marker character used in the source text.
        text: Text containing alternate color codes.

    Returns:
        Text with every recognized marker replaced by :data:`COLOR_CHAR`.
    """
    if len(alt_color_char) != 1:
        raise ValueError("alt_color_char must be a single character")

    chars = list(text)
    for index in range(len(chars) - 1):
        if chars[index] == alt_color_char and chars[index + 1] in ALL_CODES:
            chars[index] = COLOR_CHAR
            chars[index + 1] = chars[index + 1].lower()
    return "".join(chars)


def format_color_codes(text: str) -> str:
    """Translate ``&`` color markers in ``text``."""
    return translate_alternate_color_codes(ALTERNATE_COLOR_CHAR, text)


def strip_color(text: str) -> str:
    """Remove every native color escape from ``text``."""
    return _STRIP_COLOR_PATTERN.sub("", text)


__all__ = [
    "ALL_CODES",
    "ALTERNATE_COLOR_CHAR",
    "COLOR_CHAR",
    "ChatColor",
    "format_color_codes",
    "strip_color",
    "translate_alternate_color_codes",
]
