#!/usr/bin/env python3
"""
Unit tests for core/parsing.py
"""

import unittest

from ios_simulator_mcp.core.parsing import (
    BootedDevice,
    list_booted_devices,
    parse_booted_device,
    parse_device_line,
)
from ios_simulator_mcp.tests.fakes import LISTING_WITH_BOOTED, LISTING_WITHOUT_BOOTED


class TestParsing(unittest.TestCase):
    """Test cases for simctl listing parsing"""

    def test_booted_line_yields_name_and_id(self):
        device = parse_booted_device("iPhone 15 (ABCD-1234-EF) (Booted)")
        self.assertEqual(device, BootedDevice(name="iPhone 15", udid="ABCD-1234-EF"))
        self.assertIn("iPhone 15", device.describe())
        self.assertIn("ABCD-1234-EF", device.describe())

    def test_no_booted_line(self):
        self.assertIsNone(parse_booted_device(LISTING_WITHOUT_BOOTED))
        self.assertIsNone(parse_booted_device(""))

    def test_first_booted_device_wins(self):
        device = parse_booted_device(LISTING_WITH_BOOTED)
        self.assertEqual(device.name, "iPhone 15")
        self.assertEqual(device.udid, "ABCD-1234-EF")

    def test_booted_line_without_id_is_skipped(self):
        listing = "    Broken entry (Booted)\n    iPad Air (3333-4444-BBBB) (Booted)\n"
        device = parse_booted_device(listing)
        self.assertEqual(device.udid, "3333-4444-BBBB")

    def test_full_uuid(self):
        line = "    iPhone 15 Pro (5A1B2C3D-0000-4E5F-8A9B-0C1D2E3F4A5B) (Booted) "
        device = parse_booted_device(line)
        self.assertEqual(device.name, "iPhone 15 Pro")
        self.assertEqual(device.udid, "5A1B2C3D-0000-4E5F-8A9B-0C1D2E3F4A5B")

    def test_parse_device_line_without_group(self):
        self.assertIsNone(parse_device_line("-- iOS 17.0 --"))

    def test_list_booted_devices(self):
        devices = list_booted_devices(LISTING_WITH_BOOTED)
        self.assertEqual([d.udid for d in devices], ["ABCD-1234-EF", "3333-4444-BBBB"])


if __name__ == "__main__":
    unittest.main()
