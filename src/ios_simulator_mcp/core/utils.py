#!/usr/bin/env python3
"""
Utility Functions for iOS Simulator Module

This module provides common utility functions used by other core modules.
It includes functions for screenshot naming, path resolution, directory
handling and log-friendly formatting.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
- generate_screenshot_name() with no arguments
- resolve_output_path("home-screen", None, "/tmp/shots")

Expected output:
- "screenshot-1718000000000"
- "/tmp/shots/home-screen.png"
"""

import os
import time
from typing import Any, Optional

from loguru import logger

from ios_simulator_mcp.core.constants import (
    LOG_MAX_STR_LEN,
    SCREENSHOT_EXTENSION,
    SCREENSHOT_PREFIX,
)


def truncate_large_value(value: Any, max_str_len: int = LOG_MAX_STR_LEN) -> Any:
    """
    Truncates large string values for logging purposes.

    Args:
        value: The value to truncate (non-strings are returned unchanged)
        max_str_len: Maximum string length to allow

    Returns:
        Truncated string, or the value unchanged
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    if isinstance(value, str) and len(value) > max_str_len:
        return f"{value[:max_str_len]}... [truncated, {len(value)} chars total]"
    return value


def generate_screenshot_name(prefix: str = SCREENSHOT_PREFIX) -> str:
    """
    Generates a screenshot name from the current time in milliseconds.

    Args:
        prefix: Name prefix

    Returns:
        str: Generated name, e.g. ``screenshot-1718000000000``
    """
    timestamp = int(time.time() * 1000)
    return f"{prefix}-{timestamp}"


def resolve_output_path(name: str, output_path: Optional[str], screenshot_dir: str) -> str:
    """
    Picks the file a capture is written to.

    Args:
        name: Screenshot name, used for the default filename
        output_path: Explicit path from the caller, if any
        screenshot_dir: Resource directory for default filenames

    Returns:
        str: The explicit path, or ``<screenshot_dir>/<name>.png``
    """
    if output_path:
        return output_path
    return os.path.join(screenshot_dir, f"{name}.{SCREENSHOT_EXTENSION}")


def ensure_directory(directory: str) -> bool:
    """
    Ensures directory exists, creating it if necessary.

    Args:
        directory: Directory path

    Returns:
        bool: True if successful, False otherwise
    """
    if not directory:
        # Relative filename in the working directory
        return True
    try:
        os.makedirs(directory, exist_ok=True)
        return True
    except OSError as e:
        logger.error(f"Failed to create directory {directory}: {str(e)}")
        return False


def format_error_text(prefix: str, error: BaseException) -> str:
    """
    Builds the user-facing text for a failed operation.

    Args:
        prefix: Operation label, e.g. ``"Error taking screenshot"``
        error: The caught exception

    Returns:
        str: ``"<prefix>: <message>"``
    """
    message = str(error) or type(error).__name__
    return f"{prefix}: {message}"


def require_text(value: Optional[str], field: str) -> str:
    """
    Validates a required string argument.

    Returns:
        str: The value with surrounding whitespace removed

    Raises:
        ValueError: If the value is missing or blank
    """
    if value is None or not str(value).strip():
        raise ValueError(f"{field} must be a non-empty string")
    return str(value).strip()


if __name__ == "__main__":
    """Validate utility functions"""
    import sys

    all_validation_failures = []
    total_tests = 0

    # Test 1: generate_screenshot_name
    total_tests += 1
    name = generate_screenshot_name()
    if not name.startswith("screenshot-") or not name.split("-", 1)[1].isdigit():
        all_validation_failures.append(f"generate_screenshot_name: Invalid format: {name}")

    # Test 2: resolve_output_path default and explicit
    total_tests += 1
    if resolve_output_path("a", None, "/tmp/x") != os.path.join("/tmp/x", "a.png"):
        all_validation_failures.append("resolve_output_path: wrong default path")
    if resolve_output_path("a", "/elsewhere/b.png", "/tmp/x") != "/elsewhere/b.png":
        all_validation_failures.append("resolve_output_path: explicit path not honoured")

    # Test 3: truncate_large_value
    total_tests += 1
    if "truncated" not in truncate_large_value("x" * 500):
        all_validation_failures.append("truncate_large_value: long string not truncated")

    # Test 4: require_text
    total_tests += 1
    try:
        require_text("  ", "deviceId")
        all_validation_failures.append("require_text: blank value accepted")
    except ValueError:
        pass

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Utility functions are validated and ready for use")
        sys.exit(0)
