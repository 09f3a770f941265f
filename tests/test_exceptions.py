#!/usr/bin/env python
#
# Messenger - Exception Tests
# © 2025 Shinichi Morita (shin3tky)
#

"""
Unit tests for custom exception classes.
"""

import os
import sys
import unittest

# Add project root directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from messenger.exceptions import (  # noqa: E402
    MessengerConfigError,
    MessengerError,
    MessengerFormatError,
    MessengerStateError,
    MessengerStorageError,
    format_error_for_user,
)


class TestMessengerError(unittest.TestCase):
    """Test cases for the base MessengerError exception."""

    def test_basic_creation(self):
        err = MessengerError("Something went wrong")
        self.assertEqual(err.message, "Something went wrong")
        self.assertIsNone(err.filepath)
        self.assertIsNone(err.original_error)
        self.assertEqual(err.context, {})
        self.assertEqual(str(err), "Something went wrong")

    def test_full_message_format(self):
        """Test that full message includes all components."""
        original = OSError("Disk full")
        err = MessengerError(
            "Write failed",
            filepath="/plugins/Demo/messages.yml",
            original_error=original,
        )
        self.assertEqual(
            str(err),
            "Write failed (file: /plugins/Demo/messages.yml): OSError: Disk full",
        )

    def test_exception_hierarchy(self):
        for cls in (
            MessengerStorageError,
            MessengerConfigError,
            MessengerStateError,
            MessengerFormatError,
        ):
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, MessengerError))


class TestSubclasses(unittest.TestCase):
    def test_storage_error_category_and_operation(self):
        err = MessengerStorageError(
            operation="save", context={"error_category": "write_failed"}
        )
        self.assertEqual(err.message, "Message file operation failed")
        self.assertEqual(err.error_category, "write_failed")
        self.assertEqual(err.context["operation"], "save")

    def test_storage_error_does_not_mutate_context(self):
        context = {"error_category": "read_failed"}
        MessengerStorageError(operation="load", context=context)
        self.assertEqual(context, {"error_category": "read_failed"})

    def test_config_error_key(self):
        err = MessengerConfigError("Bad prefix", config_key="prefix")
        self.assertEqual(err.config_key, "prefix")
        self.assertEqual(err.context["config_key"], "prefix")

    def test_state_error_default_message(self):
        self.assertIn("load()", MessengerStateError().message)

    def test_format_error_context(self):
        err = MessengerFormatError(key="greet", template="Hi %s %s", args=("Bo",))
        self.assertEqual(err.key, "greet")
        self.assertEqual(err.args_used, ("Bo",))
        self.assertEqual(err.context["args"], "('Bo',)")
        self.assertEqual(err.context["template"], "Hi %s %s")


class TestFormatErrorForUser(unittest.TestCase):
    def test_basic(self):
        err = MessengerStorageError(
            "Failed to read message file",
            filepath="messages.yml",
            original_error=PermissionError("denied"),
        )
        text = format_error_for_user(err)
        self.assertEqual(
            text.splitlines(),
            [
                "ERROR: Failed to read message file",
                "  File: messages.yml",
                "  Cause: PermissionError: denied",
            ],
        )

    def test_verbose_includes_context(self):
        err = MessengerStorageError(
            "Failed", operation="load", context={"error_category": "read_failed"}
        )
        text = format_error_for_user(err, verbose=True)
        self.assertIn("  Context:", text)
        self.assertIn("error_category: read_failed", text)
        self.assertIn("operation: load", text)


if __name__ == "__main__":
    unittest.main()
