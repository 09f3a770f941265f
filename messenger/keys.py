#!/usr/bin/env python
#
# Messenger - Message keys
# © 2025 Shinichi Morita (shin3tky)
#

"""
Built-in message keys and their default templates.

Edit the key constants and ``DEFAULT_MESSAGES`` to suit your plugin, and list
every constant in ``BUILTIN_KEYS`` so the duplicate check can see it.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .schema import Line, Lines, Template

# Begin example message keys
EXAMPLE = "example-string"
EXAMPLE_FORMAT = "example-string-format"
EXAMPLE_COLOR = "example-string-color"
EXAMPLE_LIST = "example-string-list"
# End keys

#: (constant name, key) pairs scanned by the duplicate check
BUILTIN_KEYS: Tuple[Tuple[str, str], ...] = (
    ("EXAMPLE", EXAMPLE),
    ("EXAMPLE_FORMAT", EXAMPLE_FORMAT),
    ("EXAMPLE_COLOR", EXAMPLE_COLOR),
    ("EXAMPLE_LIST", EXAMPLE_LIST),
)

DEFAULT_MESSAGES: Dict[str, Template] = {
    EXAMPLE: Line("This is a string"),
    EXAMPLE_FORMAT: Line("This is a string with some data in it: %s"),
    EXAMPLE_COLOR: Line("This is a string with some &ccolor in it"),
    EXAMPLE_LIST: Lines(("This is the first message", "This is the second message")),
}


def find_duplicate_keys(keys: Iterable[Tuple[str, str]]) -> List[Tuple[str, str]]:
    """Return every (constant name, key) pair whose key was already declared.

    The first declaration of a key is not reported; each later one is.
    """
    seen = set()
    duplicates: List[Tuple[str, str]] = []
    for name, key in keys:
        if key in seen:
            duplicates.append((name, key))
        seen.add(key)
    return duplicates


__all__ = [
    "EXAMPLE",
    "EXAMPLE_FORMAT",
    "EXAMPLE_COLOR",
    "EXAMPLE_LIST",
    "BUILTIN_KEYS",
    "DEFAULT_MESSAGES",
    "find_duplicate_keys",
]
