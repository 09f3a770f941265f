#!/usr/bin/env python
#
# Messenger - Custom Exceptions
# © 2025 Shinichi Morita (shin3tky)
#

"""
Custom exception classes for the message store.

Exception Hierarchy:
    MessengerError (base)
    ├── MessengerStorageError (message file read/write failures)
    ├── MessengerConfigError (configuration errors)
    ├── MessengerStateError (store used before load)
    └── MessengerFormatError (placeholder substitution failures)

Storage errors are normally logged by the store and kept on
``Messenger.last_error`` rather than raised.

Example:
    >>> messenger = Messenger("plugins/MyPlugin")
    >>> if not messenger.load():
    ...     print(format_error_for_user(messenger.last_error))
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .i18n import DEFAULT_LOCALE, get_message


class MessengerError(Exception):
    """Base exception for all messenger errors.

    Attributes:
        message: Human-readable error message.
        filepath: Path to the related file (if applicable).
        original_error: The original exception that was caught (if wrapping).
        context: Additional context information as key-value pairs.
    """

    def __init__(
        self,
        message: str,
        *,
        filepath: Optional[str] = None,
        original_error: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.filepath = filepath
        self.original_error = original_error
        self.context = context or {}

        full_message = message
        if filepath:
            full_message = f"{message} (file: {filepath})"
        if original_error:
            full_message = (
                f"{full_message}: {type(original_error).__name__}: {original_error}"
            )

        super().__init__(full_message)


class MessengerStorageError(MessengerError):
    """Exception raised when the message file cannot be read or written.

    Common error categories (stored in context["error_category"]):
        - "directory_creation_failed": Failed to create the data folder
        - "create_failed": Failed to create the message file
        - "read_failed": Failed to read the message file
        - "parse_failed": Message file is not valid YAML
        - "decode_failed": Message file is not valid UTF-8
        - "invalid_format": Message file is not a mapping at the top level
        - "write_failed": Failed to write the message file
        - "serialize_failed": Messages could not be represented as YAML

    Example:
        >>> raise MessengerStorageError(
        ...     "Failed to write message file",
        ...     filepath="plugins/MyPlugin/messages.yml",
        ...     operation="save",
        ...     context={"error_category": "write_failed"},
        ... )
    """

    def __init__(
        self,
        message: str = "Message file operation failed",
        *,
        filepath: Optional[str] = None,
        original_error: Optional[BaseException] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.operation = operation

        ctx = context.copy() if context else {}
        if operation:
            ctx["operation"] = operation

        super().__init__(
            message,
            filepath=filepath,
            original_error=original_error,
            context=ctx,
        )

    @property
    def error_category(self) -> Optional[str]:
        return self.context.get("error_category")


class MessengerConfigError(MessengerError):
    """Exception raised when configuration is invalid.

    Attributes:
        config_key: The configuration key that has an issue.
    """

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        filepath: Optional[str] = None,
        original_error: Optional[BaseException] = None,
        config_key: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.config_key = config_key

        ctx = context.copy() if context else {}
        if config_key:
            ctx["config_key"] = config_key

        super().__init__(
            message,
            filepath=filepath,
            original_error=original_error,
            context=ctx,
        )


class MessengerStateError(MessengerError):
    """Exception raised when messages are requested before a successful load."""

    def __init__(
        self,
        message: str = "Messages have not been loaded; call load() first",
        *,
        filepath: Optional[str] = None,
        original_error: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            filepath=filepath,
            original_error=original_error,
            context=context,
        )


class MessengerFormatError(MessengerError):
    """Exception raised when format arguments do not fit a template.

    Attributes:
        key: Message key being rendered.
        template: Raw template text.
        args: Format arguments supplied by the caller.
    """

    def __init__(
        self,
        message: str = "Failed to format message",
        *,
        key: Optional[str] = None,
        template: Optional[str] = None,
        args: Sequence[Any] = (),
        original_error: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.key = key
        self.template = template
        self.args_used = tuple(args)

        ctx = context.copy() if context else {}
        if key:
            ctx["key"] = key
        if template is not None:
            ctx["template"] = template
        ctx["args"] = repr(self.args_used)

        super().__init__(
            message,
            original_error=original_error,
            context=ctx,
        )


def format_error_for_user(
    error: MessengerError, *, verbose: bool = False, locale: str = DEFAULT_LOCALE
) -> str:
    """Format an error message for console display.

    Args:
        error: The MessengerError to format.
        verbose: If True, include the error context.
        locale: Locale code for message localization.

    Returns:
        Formatted error message string.
    """
    lines: List[str] = [
        get_message("ui.error.header", locale=locale, message=error.message),
    ]

    if error.filepath:
        lines.append(
            get_message("ui.error.filepath", locale=locale, filepath=error.filepath)
        )

    if error.original_error:
        lines.append(
            get_message(
                "ui.error.cause",
                locale=locale,
                error_type=type(error.original_error).__name__,
                error_message=error.original_error,
            )
        )

    if verbose and error.context:
        lines.append(get_message("ui.error.context", locale=locale))
        lines.extend(f"  {key}: {value}" for key, value in error.context.items())

    return "\n".join(lines)


__all__ = [
    "MessengerError",
    "MessengerStorageError",
    "MessengerConfigError",
    "MessengerStateError",
    "MessengerFormatError",
    "format_error_for_user",
]
