#!/usr/bin/env python3
"""
Screenshot Registry

In-memory store of captured screenshots keyed by name. The MCP layer exposes
it through a single parameterized resource that looks names up here at read
time, plus an aggregate listing resource.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Sample input:
    registry = ScreenshotRegistry()
    registry.register("home", png_bytes)

Expected output:
    registry.resolve("home") == png_bytes
    registry.list_text() == "home"
"""

import threading
from typing import Dict, List, Optional

from loguru import logger

from ios_simulator_mcp.core.constants import screenshot_uri
from ios_simulator_mcp.core.errors import ScreenshotNotFoundError


class ScreenshotRegistry:
    """
    Name -> PNG bytes mapping with insertion-ordered listing.

    Entries live for the lifetime of the object; files on disk are never
    touched. Mutations and reads share a lock so bytes are never observed
    mid-replacement.
    """

    def __init__(self) -> None:
        self._screenshots: Dict[str, bytes] = {}
        self._lock = threading.Lock()

    def register(self, name: str, data: bytes) -> str:
        """
        Store (or replace) a screenshot.

        Args:
            name: Screenshot name
            data: Raw PNG bytes

        Returns:
            str: The resource URI the screenshot is readable at
        """
        with self._lock:
            replaced = name in self._screenshots
            self._screenshots[name] = bytes(data)
        uri = screenshot_uri(name)
        if replaced:
            logger.info(f"Replaced screenshot {name} ({len(data)} bytes) at {uri}")
        else:
            logger.info(f"Registered screenshot {name} ({len(data)} bytes) at {uri}")
        return uri

    def delete(self, name: str) -> bool:
        """Remove a screenshot; returns whether it existed."""
        with self._lock:
            existed = self._screenshots.pop(name, None) is not None
        logger.debug(f"Delete screenshot {name}: existed={existed}")
        return existed

    def resolve(self, name: str) -> Optional[bytes]:
        """Return the current bytes for ``name``, or None."""
        with self._lock:
            return self._screenshots.get(name)

    def get(self, name: str) -> bytes:
        """
        Return the bytes for ``name``.

        Raises:
            ScreenshotNotFoundError: If no screenshot has that name
        """
        data = self.resolve(name)
        if data is None:
            raise ScreenshotNotFoundError(name)
        return data

    def list_names(self) -> List[str]:
        with self._lock:
            return list(self._screenshots)

    def list_text(self) -> str:
        """Newline-joined names, as served by ``screenshot://list``."""
        return "\n".join(self.list_names())

    def clear(self) -> None:
        with self._lock:
            self._screenshots.clear()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._screenshots

    def __len__(self) -> int:
        with self._lock:
            return len(self._screenshots)


if __name__ == "__main__":
    """Validate registry behaviour"""
    import sys

    all_validation_failures = []
    total_tests = 0

    registry = ScreenshotRegistry()

    # Test 1: register then resolve
    total_tests += 1
    registry.register("a", b"one")
    if registry.resolve("a") != b"one":
        all_validation_failures.append("register/resolve: bytes differ")

    # Test 2: last write wins
    total_tests += 1
    registry.register("a", b"two")
    if registry.resolve("a") != b"two" or len(registry) != 1:
        all_validation_failures.append("re-register: expected replacement with a single entry")

    # Test 3: delete semantics
    total_tests += 1
    if not registry.delete("a") or registry.delete("a") or registry.resolve("a") is not None:
        all_validation_failures.append("delete: wrong existence reporting")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Screenshot registry is validated and ready for use")
        sys.exit(0)
