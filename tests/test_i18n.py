import os
import sys
import unittest

# Add project root directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from messenger.i18n import DEFAULT_LOCALE, get_message, log_warning  # noqa: E402


class TestI18nMessages(unittest.TestCase):
    """Tests for diagnostic message loading and formatting."""

    def test_basic_lookup_and_locale(self):
        message_en = get_message(
            "log.keys.duplicate", locale="en", name="GREETING", key="greeting"
        )
        self.assertEqual(
            message_en, "Message key constant GREETING has duplicate key 'greeting'"
        )

        message_ja = get_message(
            "log.keys.duplicate", locale="ja", name="GREETING", key="greeting"
        )
        self.assertIn("GREETING", message_ja)
        self.assertNotEqual(message_ja, message_en)

    def test_region_locale_falls_back_to_language(self):
        self.assertEqual(
            get_message("log.keys.duplicate", locale="ja_JP", name="A", key="a"),
            get_message("log.keys.duplicate", locale="ja", name="A", key="a"),
        )

    def test_fallback_to_default_locale(self):
        message = get_message("ui.error.header", locale="ja", message="Boom")
        self.assertEqual(message, "ERROR: Boom")

    def test_missing_key_returns_key(self):
        key = "ui.does.not.exist"
        self.assertEqual(get_message(key, locale="fr"), key)

    def test_missing_params_are_left_in_template(self):
        message = get_message("ui.error.header", locale=DEFAULT_LOCALE)
        self.assertEqual(message, "ERROR: {message}")

    def test_params_mapping_and_kwargs_merge(self):
        message = get_message(
            "log.store.not_sent", params={"key": "a", "reason": "x"}, reason="y"
        )
        self.assertEqual(message, "Message 'a' was not sent: y")

    def test_log_warning(self):
        import logging

        logger = logging.getLogger("messenger.tests.i18n")
        with self.assertLogs(logger, level="WARNING") as logs:
            log_warning(logger, "ui.error.header", message="Boom")
        self.assertEqual(logs.records[0].getMessage(), "ERROR: Boom")


if __name__ == "__main__":
    unittest.main()
