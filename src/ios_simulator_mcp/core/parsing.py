#!/usr/bin/env python3
"""
Parsing of simctl Device Listings

This module turns the human-readable output of ``xcrun simctl list devices``
into structured records. It performs no I/O so it can be tested against
captured listings.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links:
- Pydantic: https://docs.pydantic.dev/latest/

Sample input:
    == Devices ==
    -- iOS 17.0 --
        iPhone 15 (ABCD-1234-EF) (Booted)

Expected output:
    BootedDevice(name='iPhone 15', udid='ABCD-1234-EF')
"""

from typing import Iterator, List, Optional

from pydantic import BaseModel, Field

from ios_simulator_mcp.core.constants import BOOTED_MARKER, DEVICE_ID_PATTERN


class BootedDevice(BaseModel):
    """A simulator reported as running by simctl."""
    name: str = Field(..., description="Device name as printed by simctl")
    udid: str = Field(..., description="Device UDID")

    def describe(self) -> str:
        return f"Booted Simulator: {self.name}\nUUID: {self.udid}"


def parse_device_line(line: str) -> Optional[BootedDevice]:
    """
    Extract name and id from one listing line.

    The id is the first parenthesised run of hex digits and hyphens; the name
    is the text before the first opening parenthesis.

    Args:
        line: A single line of listing output

    Returns:
        Optional[BootedDevice]: None when the line has no id group
    """
    match = DEVICE_ID_PATTERN.search(line)
    if not match:
        return None
    name = line.split("(", 1)[0].strip()
    return BootedDevice(name=name, udid=match.group(1))


def iter_booted_devices(listing: str) -> Iterator[BootedDevice]:
    """Yield every booted device in listing order, skipping lines without an id."""
    for line in listing.splitlines():
        if BOOTED_MARKER not in line:
            continue
        device = parse_device_line(line)
        if device is not None:
            yield device


def parse_booted_device(listing: str) -> Optional[BootedDevice]:
    """
    Find the booted simulator in ``simctl list devices`` output.

    If several lines are marked booted, the first one with an extractable id wins.

    Args:
        listing: Raw stdout of the listing command

    Returns:
        Optional[BootedDevice]: The first booted device, or None
    """
    return next(iter_booted_devices(listing), None)


def list_booted_devices(listing: str) -> List[BootedDevice]:
    """Return all booted devices found in the listing."""
    return list(iter_booted_devices(listing))


if __name__ == "__main__":
    """Validate parsing functions"""
    import sys

    all_validation_failures = []
    total_tests = 0

    sample = """== Devices ==
-- iOS 17.0 --
    iPhone 14 (1111-AAAA) (Shutdown)
    iPhone 15 (ABCD-1234-EF) (Booted)
    iPad Air (2222-BBBB) (Booted)
"""

    # Test 1: first booted device wins
    total_tests += 1
    device = parse_booted_device(sample)
    if device is None or device.name != "iPhone 15" or device.udid != "ABCD-1234-EF":
        all_validation_failures.append(f"parse_booted_device: unexpected result {device}")

    # Test 2: no booted line
    total_tests += 1
    if parse_booted_device("-- iOS 17.0 --\n    iPhone 14 (1111-AAAA) (Shutdown)\n") is not None:
        all_validation_failures.append("parse_booted_device: found a device in a listing without one")

    # Test 3: all booted devices
    total_tests += 1
    if len(list_booted_devices(sample)) != 2:
        all_validation_failures.append("list_booted_devices: expected two devices")

    if all_validation_failures:
        print(f"❌ VALIDATION FAILED - {len(all_validation_failures)} of {total_tests} tests failed:")
        for failure in all_validation_failures:
            print(f"  - {failure}")
        sys.exit(1)
    else:
        print(f"✅ VALIDATION PASSED - All {total_tests} tests produced expected results")
        print("Parsing functions are validated and ready for use")
        sys.exit(0)
