#!/usr/bin/env python3
"""
Unit tests for core/registry.py
"""

import unittest

from ios_simulator_mcp.core.errors import ScreenshotNotFoundError
from ios_simulator_mcp.core.registry import ScreenshotRegistry


class TestScreenshotRegistry(unittest.TestCase):
    """Test cases for the in-memory screenshot registry"""

    def setUp(self):
        self.registry = ScreenshotRegistry()

    def test_register_then_resolve(self):
        uri = self.registry.register("home", b"png-bytes")
        self.assertEqual(uri, "screenshot://home")
        self.assertEqual(self.registry.resolve("home"), b"png-bytes")
        self.assertIn("home", self.registry)

    def test_register_encodes_uri(self):
        uri = self.registry.register("home screen", b"png-bytes")
        self.assertEqual(uri, "screenshot://home%20screen")
        self.assertEqual(self.registry.list_names(), ["home screen"])

    def test_last_write_wins(self):
        self.registry.register("home", b"first")
        self.registry.register("home", b"second")
        self.assertEqual(self.registry.resolve("home"), b"second")
        self.assertEqual(len(self.registry), 1)
        self.assertEqual(self.registry.list_names(), ["home"])

    def test_delete_present_and_absent(self):
        self.registry.register("home", b"png")
        self.assertTrue(self.registry.delete("home"))
        self.assertIsNone(self.registry.resolve("home"))
        self.assertFalse(self.registry.delete("home"))
        self.assertEqual(len(self.registry), 0)

    def test_delete_absent_is_noop(self):
        self.registry.register("keep", b"png")
        self.assertFalse(self.registry.delete("missing"))
        self.assertEqual(self.registry.list_names(), ["keep"])

    def test_list_names_exact_set(self):
        for name in ("A", "B", "C"):
            self.registry.register(name, name.encode())
        names = self.registry.list_names()
        self.assertEqual(sorted(names), ["A", "B", "C"])
        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(self.registry.list_text(), "A\nB\nC")

    def test_empty_list_text(self):
        self.assertEqual(self.registry.list_text(), "")

    def test_get_missing_raises(self):
        with self.assertRaises(ScreenshotNotFoundError) as cm:
            self.registry.get("nope")
        self.assertEqual(str(cm.exception), "Screenshot not found: nope")

    def test_clear(self):
        self.registry.register("a", b"1")
        self.registry.clear()
        self.assertEqual(self.registry.list_names(), [])


if __name__ == "__main__":
    unittest.main()
