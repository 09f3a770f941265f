#!/usr/bin/env python
#
# Messenger - Core Package
# © 2025 Shinichi Morita (shin3tky)
#

"""
YAML-backed plugin message templates.

This package provides:
- schema: Template variants, constants, and configuration
- colors: ``&`` color-code translation
- keys: Built-in message keys and defaults
- storage: Message file access
- sinks: Delivery targets
- store: The ``Messenger`` message store

Logging:
    This library uses Python's standard logging module. By default, a NullHandler
    is attached to prevent "No handler found" warnings. To see log output, configure
    logging in your application:

    Example:
        >>> import logging
        >>> logging.basicConfig(level=logging.DEBUG)

    Or attach a handler to the 'messenger' logger:

        >>> import logging
        >>> logger = logging.getLogger('messenger')
        >>> logger.addHandler(logging.StreamHandler())
        >>> logger.setLevel(logging.DEBUG)
"""

import logging

# Configure library-level logger with NullHandler to prevent
# "No handler found" warnings when the library is used without
# explicit logging configuration.
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())

from .schema import (
    VERSION,
    DEFAULT_FILE_NAME,
    DEFAULT_PREFIX,
    SPLIT_TOKEN,
    Line,
    Lines,
    Missing,
    Malformed,
    Template,
    Rendered,
    MessengerConfig,
    parse_template,
)

from .colors import (
    ALL_CODES,
    COLOR_CHAR,
    ChatColor,
    format_color_codes,
    strip_color,
    translate_alternate_color_codes,
)

from .exceptions import (
    MessengerError,
    MessengerStorageError,
    MessengerConfigError,
    MessengerStateError,
    MessengerFormatError,
    format_error_for_user,
)
from .i18n import get_message

from . import keys
from .keys import BUILTIN_KEYS, DEFAULT_MESSAGES, find_duplicate_keys

from .config_io import load_messenger_config
from .storage import YamlMessageFile

from .sinks import (
    BaseMessageSink,
    CallbackSink,
    StreamSink,
    LoggerSink,
    RecordingSink,
)

from .store import Messenger

__version__ = VERSION

__all__ = [
    # Schema
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
    # Colors
    "ALL_CODES",
    "COLOR_CHAR",
    "ChatColor",
    "format_color_codes",
    "strip_color",
    "translate_alternate_color_codes",
    # Exceptions
    "MessengerError",
    "MessengerStorageError",
    "MessengerConfigError",
    "MessengerStateError",
    "MessengerFormatError",
    "format_error_for_user",
    "get_message",
    # Keys
    "keys",
    "BUILTIN_KEYS",
    "DEFAULT_MESSAGES",
    "find_duplicate_keys",
    # I/O
    "load_messenger_config",
    "YamlMessageFile",
    # Sinks
    "BaseMessageSink",
    "CallbackSink",
    "StreamSink",
    "LoggerSink",
    "RecordingSink",
    # Store
    "Messenger",
]
