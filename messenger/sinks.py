#!/usr/bin/env python
#
# Messenger - Message sinks
# © 2025 Shinichi Morita (shin3tky)
#

"""
Delivery targets for rendered messages.

A sink is anything that accepts lines of text: a player session, a command
invoker, the console. :class:`~messenger.store.Messenger` only needs the two
entry points defined by :class:`BaseMessageSink`.
"""

from __future__ import annotations

import logging
import sys
from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, TextIO

from .colors import strip_color


class BaseMessageSink(ABC):
    """Abstract base class for message delivery targets.

    Subclasses must implement:
        - send_message: Deliver a single line

    ``send_messages`` delivers several lines in one call; the default
    implementation forwards each line to ``send_message``.

    Example:
        >>> class PlayerSink(BaseMessageSink):
        ...     def __init__(self, player):
        ...         self.player = player
        ...
        ...     def send_message(self, message):
        ...         self.player.chat(message)
    """

    @abstractmethod
    def send_message(self, message: str) -> None:
        """Deliver one line.

        Args:
            message: Fully rendered line.
        """
        pass

    def send_messages(self, messages: Sequence[str]) -> None:
        """Deliver several lines in order.

        Args:
            messages: Fully rendered lines.
        """
        for message in messages:
            self.send_message(message)


class CallbackSink(BaseMessageSink):
    """Deliver each line to a callable, e.g. ``print``."""

    def __init__(self, callback: Callable[[str], object]):
        self.callback = callback

    def send_message(self, message: str) -> None:
        self.callback(message)


class StreamSink(BaseMessageSink):
    """Write lines to a text stream.

    Args:
        stream: Target stream (defaults to ``sys.stdout`` at send time).
        strip_colors: Remove color escapes before writing.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, strip_colors: bool = True):
        self.stream = stream
        self.strip_colors = strip_colors

    def send_message(self, message: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        if self.strip_colors:
            message = strip_color(message)
        stream.write(message + "\n")

    def send_messages(self, messages: Sequence[str]) -> None:
        super().send_messages(messages)
        stream = self.stream if self.stream is not None else sys.stdout
        stream.flush()


class LoggerSink(BaseMessageSink):
    """Emit lines as log records, with color escapes removed."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO):
        self.logger = logger
        self.level = level

    def send_message(self, message: str) -> None:
        self.logger.log(self.level, "%s", strip_color(message))


class RecordingSink(BaseMessageSink):
    """Keep delivered lines in memory.

    Attributes:
        messages: Every delivered line, in order.
        calls: One entry per call, holding the line(s) of that call.
    """

    def __init__(self) -> None:
        self.messages: List[str] = []
        self.calls: List[List[str]] = []

    def send_message(self, message: str) -> None:
        self.messages.append(message)
        self.calls.append([message])

    def send_messages(self, messages: Sequence[str]) -> None:
        self.messages.extend(messages)
        self.calls.append(list(messages))

    def clear(self) -> None:
        self.messages.clear()
        self.calls.clear()


__all__ = [
    "BaseMessageSink",
    "CallbackSink",
    "StreamSink",
    "LoggerSink",
    "RecordingSink",
]
