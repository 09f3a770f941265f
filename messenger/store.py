#!/usr/bin/env python
#
# Messenger - Message store
# © 2025 Shinichi Morita (shin3tky)
#

"""
YAML-backed message store with lazy default seeding.

Messages are kept in ``<data_folder>/<file_name>``. Keys missing from the
file are copied from the defaults the first time they are requested and the
file is saved, so server owners can edit every message that was ever used.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from .colors import format_color_codes
from .config_io import load_messenger_config
from .exceptions import (
    MessengerError,
    MessengerFormatError,
    MessengerStateError,
    MessengerStorageError,
)
from .i18n import DEFAULT_LOCALE, get_message, log_warning
from .keys import BUILTIN_KEYS, DEFAULT_MESSAGES, find_duplicate_keys
from .schema import (
    DEFAULT_FILE_NAME,
    DEFAULT_PREFIX,
    Line,
    Lines,
    Malformed,
    MessengerConfig,
    Missing,
    Rendered,
    Template,
    parse_defaults,
    parse_template,
    render_lines,
    split_lines,
)
from .sinks import BaseMessageSink
from .storage import YamlMessageFile

# Module-level logger for message store diagnostics
logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class Messenger:
    """
    Stores, renders and sends plugin messages.

    Note: :meth:`load` must be called before messages can be retrieved, and
    again after the defaults or the file name change.

    Attributes:
        last_error: Storage error from the most recent failed load/save, if any.

    Example:
        >>> messenger = Messenger("plugins/MyPlugin")
        >>> messenger.prefix = ChatColor.DARK_GRAY + "[MyPlugin] " + ChatColor.WHITE
        >>> messenger.load()
        True
        >>> messenger.get(keys.EXAMPLE_FORMAT, "data")
        Line(text='This is a string with some data in it: data')
        >>> _ = messenger.send(keys.EXAMPLE_LIST, CallbackSink(print))
    """

    def __init__(
        self,
        data_folder: PathLike,
        *,
        defaults: Optional[Mapping[str, Any]] = None,
        prefix: Optional[str] = DEFAULT_PREFIX,
        file_name: str = DEFAULT_FILE_NAME,
        keys: Iterable[Tuple[str, str]] = BUILTIN_KEYS,
        locale: str = DEFAULT_LOCALE,
    ):
        """
        Create a message store for a plugin data folder.

        Args:
            data_folder: Folder the message file lives in (created on load).
            defaults: Default templates; ``None`` keeps the built-in examples.
            prefix: Prefix sent before prefixed messages, ``None`` for none.
            file_name: Message file name inside ``data_folder``.
            keys: Declared (constant name, key) pairs checked for duplicates.
            locale: Locale of the store's own log messages.
        """
        self._data_folder = os.fspath(data_folder)
        self._defaults: Dict[str, Template] = (
            dict(DEFAULT_MESSAGES) if defaults is None else parse_defaults(defaults)
        )
        self._prefix = prefix
        self._file_name = file_name
        self._message_file = YamlMessageFile(
            os.path.join(self._data_folder, file_name)
        )
        self._entries: Optional[Dict[str, Any]] = None
        self._keys = tuple(keys)
        self.locale = locale
        self.last_error: Optional[MessengerError] = None

        # Run unique test on keys
        self.test_duplicates()

    @classmethod
    def from_config(
        cls, data_folder: PathLike, config: MessengerConfig, **kwargs: Any
    ) -> "Messenger":
        """Create a store from a :class:`MessengerConfig`."""
        return cls(
            data_folder,
            defaults=config.defaults,
            prefix=config.prefix,
            file_name=config.file_name,
            **kwargs,
        )

    @classmethod
    def from_config_file(
        cls, data_folder: PathLike, path: PathLike, **kwargs: Any
    ) -> "Messenger":
        """
        Create a store from a YAML/JSON configuration file.

        Raises:
            MessengerConfigError: If the file cannot be read or is invalid.
        """
        return cls.from_config(data_folder, load_messenger_config(path), **kwargs)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(config_file={self.config_file!r}, "
            f"loaded={self.loaded})"
        )

    # ========================================
    # Configuration
    # ========================================
    @property
    def data_folder(self) -> str:
        return self._data_folder

    @property
    def defaults(self) -> Dict[str, Template]:
        """Default templates, keyed by message key."""
        return self._defaults

    @defaults.setter
    def defaults(self, defaults: Mapping[str, Any]) -> None:
        self._defaults = parse_defaults(defaults)

    @property
    def prefix(self) -> Optional[str]:
        """Prefix sent before prefixed messages; ``None`` for no prefix."""
        return self._prefix

    @prefix.setter
    def prefix(self, prefix: Optional[str]) -> None:
        self._prefix = prefix

    @property
    def file_name(self) -> str:
        return self._file_name

    @file_name.setter
    def file_name(self, file_name: str) -> None:
        # Takes effect on the next load()
        self._file_name = file_name
        self._message_file = YamlMessageFile(
            os.path.join(self._data_folder, file_name)
        )

    @property
    def config_file(self) -> str:
        """Path of the message file."""
        return self._message_file.path

    @property
    def loaded(self) -> bool:
        return self._entries is not None

    # ========================================
    # Loading & saving
    # ========================================
    def load(self) -> bool:
        """
        Load the message file, creating it from the defaults if absent.

        Returns:
            True if the file was loaded or created and saved, False if a
            storage error occurred (see :attr:`last_error`).
        """
        self.last_error = None
        try:
            if not self._message_file.exists():
                logger.info(
                    "Message file %s not found, creating it with %d default(s)",
                    self.config_file,
                    len(self._defaults),
                )
                self._message_file.create()
                self._entries = {
                    key: template.to_raw() for key, template in self._defaults.items()
                }
                self._message_file.write(self._entries)
            else:
                self._entries = self._message_file.read()
                logger.info(
                    "Loaded %d message(s) from %s",
                    len(self._entries),
                    self.config_file,
                )
        except MessengerStorageError as error:
            self._record_failure(error)
            return False
        return True

    def reload(self) -> bool:
        """Re-read the message file."""
        return self.load()

    def save(self) -> bool:
        """
        Persist the loaded messages.

        Returns:
            True on success, False if the file could not be written.
        """
        entries = self._require_entries()
        try:
            self._message_file.write(entries)
        except MessengerStorageError as error:
            self._record_failure(error)
            return False
        return True

    def _record_failure(self, error: MessengerStorageError) -> None:
        self.last_error = error
        logger.warning("%s", error)

    def _require_entries(self) -> Dict[str, Any]:
        if self._entries is None:
            raise MessengerStateError(
                filepath=self.config_file,
                original_error=self.last_error,
            )
        return self._entries

    # ========================================
    # Lookup
    # ========================================
    def contains(self, key: str) -> bool:
        """Check whether ``key`` is present in the loaded message file."""
        return self._require_entries().get(key) is not None

    def keys(self) -> List[str]:
        """Keys present in the loaded message file."""
        return list(self._require_entries())

    def _resolve(self, key: str) -> Union[Template, Missing, Malformed]:
        entries = self._require_entries()

        value = entries.get(key)
        if value is not None:
            template = parse_template(key, value)
            if isinstance(template, Malformed):
                log_warning(
                    logger,
                    "log.store.malformed_value",
                    locale=self.locale,
                    key=key,
                    path=self.config_file,
                    value_type=template.value_type,
                )
            return template

        default = self._defaults.get(key)
        if default is None:
            logger.debug("No message or default for key '%s'", key)
            return Missing(key)

        logger.debug("Seeding default for '%s' into %s", key, self.config_file)
        entries[key] = default.to_raw()
        self.save()
        return default

    def get(self, key: str, *args: Any) -> Rendered:
        """
        Get a rendered message.

        Without ``args`` only color codes are translated. With ``args`` the
        template is first formatted with ``%`` placeholders, consumed in order
        across all lines of a multi-line message.

        Args:
            key: The key the message is stored as.
            *args: Positional format arguments.

        Returns:
            ``Line`` or ``Lines`` with the rendered text, ``Missing`` if no
            template exists, ``Malformed`` if the stored value is unusable.

        Raises:
            MessengerStateError: If called before a successful load.
            MessengerFormatError: If ``args`` do not fit the template.
        """
        template = self._resolve(key)
        if isinstance(template, (Missing, Malformed)):
            return template
        return self._render(key, template, args)

    def _render(self, key: str, template: Template, args: Tuple[Any, ...]) -> Template:
        if isinstance(template, Line):
            text = template.text
            if args:
                text = self._substitute(key, text, args)
            return Line(format_color_codes(text))

        text = render_lines(template.lines)
        if args:
            text = self._substitute(key, text, args)
        return Lines(split_lines(format_color_codes(text)))

    @staticmethod
    def _substitute(key: str, text: str, args: Tuple[Any, ...]) -> str:
        try:
            return text % args
        except (TypeError, ValueError, KeyError) as exc:
            raise MessengerFormatError(
                f"Failed to format message '{key}'",
                key=key,
                template=text,
                args=args,
                original_error=exc,
            ) from exc

    # ========================================
    # Delivery
    # ========================================
    def apply_prefix(self, rendered: Rendered) -> Rendered:
        """Prepend the prefix to a rendered line or to every rendered line."""
        if self._prefix is None:
            return rendered
        if isinstance(rendered, Line):
            return Line(self._prefix + rendered.text)
        if isinstance(rendered, Lines):
            return Lines(tuple(self._prefix + line for line in rendered.lines))
        return rendered

    def send(self, key: str, sink: BaseMessageSink, *args: Any) -> Rendered:
        """
        Send a prefixed message.

        A single line is delivered with ``sink.send_message``; multiple lines
        with one ``sink.send_messages`` call.

        Args:
            key: The key the message is stored as.
            sink: Delivery target.
            *args: Positional format arguments.

        Returns:
            The delivered value, or ``Missing``/``Malformed`` when nothing was
            sent.
        """
        rendered = self.apply_prefix(self.get(key, *args))
        if isinstance(rendered, Line):
            sink.send_message(rendered.text)
        elif isinstance(rendered, Lines):
            sink.send_messages(list(rendered.lines))
        else:
            self._warn_not_sent(rendered)
        return rendered

    def send_raw(self, key: str, sink: BaseMessageSink, *args: Any) -> Rendered:
        """
        Send a message without the prefix, one ``send_message`` call per line.

        Used for interactive prompts where the prefix would get in the way.
        """
        rendered = self.get(key, *args)
        if isinstance(rendered, Line):
            sink.send_message(rendered.text)
        elif isinstance(rendered, Lines):
            for line in rendered.lines:
                sink.send_message(line)
        else:
            self._warn_not_sent(rendered)
        return rendered

    def _warn_not_sent(self, rendered: Union[Missing, Malformed]) -> None:
        if isinstance(rendered, Missing):
            reason = get_message(
                "log.store.reason.missing", locale=self.locale, path=self.config_file
            )
        else:
            reason = get_message(
                "log.store.reason.malformed",
                locale=self.locale,
                value_type=rendered.value_type,
            )
        log_warning(
            logger,
            "log.store.not_sent",
            locale=self.locale,
            key=rendered.key,
            reason=reason,
        )

    # ========================================
    # Validation
    # ========================================
    def test_duplicates(self) -> List[Tuple[str, str]]:
        """
        Warn about declared key constants that share a key.

        Returns:
            The (constant name, key) pairs that repeat an earlier key.
        """
        duplicates = find_duplicate_keys(self._keys)
        for name, key in duplicates:
            log_warning(
                logger, "log.keys.duplicate", locale=self.locale, name=name, key=key
            )
        return duplicates


__all__ = ["Messenger"]
