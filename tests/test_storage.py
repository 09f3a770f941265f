"""
Tests for message file access in messenger.storage.
"""

import os
import sys
import tempfile
import unittest

import yaml

# Add project root directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from messenger.exceptions import MessengerStorageError  # noqa: E402
from messenger.storage import (  # noqa: E402
    YamlMessageFile,
    flatten_sections,
    nest_sections,
)


class TestSections(unittest.TestCase):
    def test_flatten_nested_mapping(self):
        data = {"menu": {"title": "Hi", "items": ["a", "b"]}, "plain": "x"}
        self.assertEqual(
            flatten_sections(data),
            {"menu.title": "Hi", "menu.items": ["a", "b"], "plain": "x"},
        )

    def test_flatten_stringifies_keys(self):
        self.assertEqual(flatten_sections({1: "one"}), {"1": "one"})

    def test_nest_dotted_keys(self):
        self.assertEqual(
            nest_sections({"menu.title": "Hi", "menu.footer": "Bye", "plain": "x"}),
            {"menu": {"title": "Hi", "footer": "Bye"}, "plain": "x"},
        )

    def test_nest_section_replaces_scalar_parent(self):
        self.assertEqual(nest_sections({"a": "x", "a.b": "y"}), {"a": {"b": "y"}})


class TestYamlMessageFile(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = self._tmp.name
        self.path = os.path.join(self.tmp_dir, "data", "messages.yml")
        self.message_file = YamlMessageFile(self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def _write_text(self, text):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.write(text)

    def test_create_makes_parent_and_empty_file(self):
        self.assertFalse(self.message_file.exists())
        self.message_file.create()
        self.assertTrue(self.message_file.exists())
        self.assertEqual(self.message_file.read(), {})

    def test_create_keeps_existing_file(self):
        self._write_text("greeting: Hello\n")
        self.message_file.create()
        self.assertEqual(self.message_file.read(), {"greeting": "Hello"})

    def test_write_nests_sections_and_keeps_order(self):
        self.message_file.write({"b": "1", "menu.title": "Hi", "a": ["x", "y"]})
        with open(self.path, encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
        self.assertEqual(data, {"b": "1", "menu": {"title": "Hi"}, "a": ["x", "y"]})
        self.assertEqual(list(data), ["b", "menu", "a"])

    def test_write_then_read_returns_flat_entries(self):
        entries = {"menu.title": "&6Shop", "lines": ["one", "two"]}
        self.message_file.write(entries)
        self.assertEqual(self.message_file.read(), entries)

    def test_write_keeps_unicode_readable(self):
        self.message_file.write({"greeting": "§aこんにちは"})
        with open(self.path, encoding="utf-8") as handle:
            self.assertIn("こんにちは", handle.read())

    def test_read_invalid_yaml(self):
        self._write_text("greeting: [unclosed\n")
        with self.assertRaises(MessengerStorageError) as ctx:
            self.message_file.read()
        self.assertEqual(ctx.exception.error_category, "parse_failed")
        self.assertEqual(ctx.exception.filepath, self.path)

    def test_read_non_utf8_file(self):
        os.makedirs(os.path.dirname(self.path), exist_ok=True)
        with open(self.path, "wb") as handle:
            handle.write(b'greet: "caf\xe9"\n')
        with self.assertRaises(MessengerStorageError) as ctx:
            self.message_file.read()
        self.assertEqual(ctx.exception.error_category, "decode_failed")
        self.assertEqual(ctx.exception.operation, "parse")
        self.assertIsInstance(ctx.exception.original_error, UnicodeDecodeError)

    def test_read_non_mapping(self):
        self._write_text("- a\n- b\n")
        with self.assertRaises(MessengerStorageError) as ctx:
            self.message_file.read()
        self.assertEqual(ctx.exception.error_category, "invalid_format")
        self.assertEqual(ctx.exception.context["actual_type"], "list")

    def test_read_missing_file(self):
        with self.assertRaises(MessengerStorageError) as ctx:
            self.message_file.read()
        self.assertEqual(ctx.exception.error_category, "read_failed")
        self.assertIsInstance(ctx.exception.original_error, OSError)

    def test_parent_that_is_a_file(self):
        blocker = os.path.join(self.tmp_dir, "blocker")
        with open(blocker, "w", encoding="utf-8") as handle:
            handle.write("")
        message_file = YamlMessageFile(os.path.join(blocker, "messages.yml"))
        with self.assertRaises(MessengerStorageError) as ctx:
            message_file.create()
        self.assertEqual(ctx.exception.error_category, "directory_creation_failed")


if __name__ == "__main__":
    unittest.main()
