#!/usr/bin/env python3
"""
Constants for iOS Simulator Module

This module defines constants used throughout the simulator functionality,
ensuring consistent command templates and resource naming across the application.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- None (module contains only constants)

Expected output:
- None (module contains only constants)
"""

import os
import re
from typing import Dict, List
from urllib.parse import quote

# Server identity
SERVER_NAME = "ios-simulator"
SERVER_VERSION = "1.0.0"

# Environment variables
SCREENSHOT_DIR_ENV = "SCREENSHOT_RESOURCE_DIR"
SIMCTL_BINARY_ENV = "SIMCTL_BINARY"

# Default screenshot location when SCREENSHOT_RESOURCE_DIR is unset
DEFAULT_SCREENSHOT_DIR = os.path.join(
    os.path.expanduser("~"), "Downloads", "ios-simulator-screenshots"
)

# simctl is invoked through xcrun unless overridden
DEFAULT_SIMCTL_BINARY = "xcrun"

# Argument templates, appended after the binary
SIMCTL_COMMANDS: Dict[str, List[str]] = {
    "LIST_DEVICES": ["simctl", "list", "devices"],
    "BOOT": ["simctl", "boot"],
    "SCREENSHOT": ["simctl", "io", "{device_id}", "screenshot", "{path}"],
}

# Marker printed by `simctl list devices` next to running simulators
BOOTED_MARKER = "Booted"

# Device UDID inside the first parenthesis group of a listing line
DEVICE_ID_PATTERN = re.compile(r"\(([-0-9A-F]+)\)")

# Resource addressing
RESOURCE_SCHEME = "screenshot"
SCREENSHOT_LIST_URI = f"{RESOURCE_SCHEME}://list"
SCREENSHOT_URI_TEMPLATE = f"{RESOURCE_SCHEME}://{{name}}"

# Screenshot naming and encoding
SCREENSHOT_PREFIX = "screenshot"
SCREENSHOT_EXTENSION = "png"
SCREENSHOT_MIME_TYPE = "image/png"

# Logging settings
LOG_MAX_STR_LEN: int = 100  # Maximum string length for truncated logging


def screenshot_uri(name: str) -> str:
    """
    Return the resource URI for a registered screenshot name.

    The name is percent-encoded so that spaces, slashes and other URL
    delimiters still produce a readable URI, e.g. ``home screen`` becomes
    ``screenshot://home%20screen``.
    """
    return f"{RESOURCE_SCHEME}://{quote(name, safe='')}"


if __name__ == "__main__":
    """Validate module constants"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: Command templates are non-empty argument vectors
    total_tests += 1
    for key, template in SIMCTL_COMMANDS.items():
        if not template or template[0] != "simctl":
            all_validation_failures.append(f"SIMCTL_COMMANDS[{key}] should start with 'simctl', got {template}")

    # Test 2: Device id pattern extracts from a listing line
    total_tests += 1
    match = DEVICE_ID_PATTERN.search("iPhone 15 (ABCD-1234-EF) (Booted)")
    if not match or match.group(1) != "ABCD-1234-EF":
        all_validation_failures.append(f"DEVICE_ID_PATTERN failed on sample line: {match}")

    # Test 3: URI helpers agree
    total_tests += 1
    if screenshot_uri("list") != SCREENSHOT_LIST_URI:
        all_validation_failures.append(f"screenshot_uri('list') != {SCREENSHOT_LIST_URI}")
    if screenshot_uri("home screen") != "screenshot://home%20screen":
        all_validation_failures.append(f"screenshot_uri did not encode a space: {screenshot_uri('home screen')}")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Constants are valid and ready for use")
        sys.exit(0)
