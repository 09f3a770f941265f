"""
Tests for color-code translation in messenger.colors.
"""

import os
import sys
import unittest

# Add project root directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from messenger.colors import (  # noqa: E402
    COLOR_CHAR,
    ChatColor,
    format_color_codes,
    strip_color,
    translate_alternate_color_codes,
)


class TestTranslateAlternateColorCodes(unittest.TestCase):
    def test_recognized_code_is_translated(self):
        self.assertEqual(format_color_codes("&cRed"), "§cRed")

    def test_uppercase_code_is_lowercased(self):
        self.assertEqual(format_color_codes("&CRed &LBold"), "§cRed §lBold")

    def test_every_code_letter(self):
        for code in "0123456789abcdefklmnorx":
            with self.subTest(code=code):
                self.assertEqual(format_color_codes(f"&{code}x"), f"{COLOR_CHAR}{code}x")

    def test_unrecognized_marker_is_left_verbatim(self):
        self.assertEqual(format_color_codes("Tom & Jerry &z"), "Tom & Jerry &z")

    def test_trailing_marker_is_left_verbatim(self):
        self.assertEqual(format_color_codes("end&"), "end&")

    def test_double_marker_translates_second(self):
        self.assertEqual(format_color_codes("&&c"), "&§c")

    def test_custom_marker(self):
        self.assertEqual(translate_alternate_color_codes("$", "$aGreen &a"), "§aGreen &a")

    def test_marker_must_be_single_character(self):
        with self.assertRaises(ValueError):
            translate_alternate_color_codes("&&", "text")

    def test_no_literal_marker_remains(self):
        result = format_color_codes("This is a string with some &ccolor in it")
        self.assertNotIn("&c", result)
        self.assertIn("§c", result)


class TestChatColor(unittest.TestCase):
    def test_str_is_escape_sequence(self):
        self.assertEqual(str(ChatColor.DARK_GRAY), "§8")
        self.assertEqual(f"{ChatColor.WHITE}", "§f")

    def test_concatenation(self):
        self.assertEqual(
            ChatColor.DARK_GRAY + "[PLUGIN] " + ChatColor.WHITE, "§8[PLUGIN] §f"
        )
        self.assertEqual("x" + ChatColor.RED, "x§c")

    def test_code_property(self):
        self.assertEqual(ChatColor.BOLD.code, "l")


class TestStripColor(unittest.TestCase):
    def test_strips_native_codes(self):
        self.assertEqual(strip_color("§8[PLUGIN] §fHello §Lworld"), "[PLUGIN] Hello world")

    def test_leaves_alternate_codes(self):
        self.assertEqual(strip_color("&cnot translated"), "&cnot translated")


if __name__ == "__main__":
    unittest.main()
