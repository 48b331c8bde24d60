"""
Core Layer for iOS Simulator Module

This package contains the core business logic for driving iOS simulators:
simctl command execution, device listing parsing and the in-memory
screenshot registry.

The core layer is designed to be:
1. Independent of UI or integration concerns
2. Fully testable in isolation
3. Focused on business logic only

Usage:
    from ios_simulator_mcp.core import SimctlRunner, parse_booted_device
    listing = await SimctlRunner().list_devices()
    device = parse_booted_device(listing)
"""

# Core constants and settings
from ios_simulator_mcp.core.constants import (
    SCREENSHOT_LIST_URI,
    SCREENSHOT_URI_TEMPLATE,
    SCREENSHOT_MIME_TYPE,
    screenshot_uri
)
from ios_simulator_mcp.core.config import CONFIG, get_screenshot_dir, get_simctl_binary

# Errors
from ios_simulator_mcp.core.errors import (
    SimulatorError,
    SimctlError,
    ScreenshotError,
    ScreenshotNotFoundError
)

# Listing parsing
from ios_simulator_mcp.core.parsing import (
    BootedDevice,
    parse_booted_device,
    list_booted_devices
)

# Screenshot registry
from ios_simulator_mcp.core.registry import ScreenshotRegistry

# simctl runner
from ios_simulator_mcp.core.simctl import CommandResult, SimctlRunner

__all__ = [
    # Constants and configuration
    'SCREENSHOT_LIST_URI',
    'SCREENSHOT_URI_TEMPLATE',
    'SCREENSHOT_MIME_TYPE',
    'screenshot_uri',
    'CONFIG',
    'get_screenshot_dir',
    'get_simctl_binary',

    # Errors
    'SimulatorError',
    'SimctlError',
    'ScreenshotError',
    'ScreenshotNotFoundError',

    # Parsing
    'BootedDevice',
    'parse_booted_device',
    'list_booted_devices',

    # Registry
    'ScreenshotRegistry',

    # simctl
    'CommandResult',
    'SimctlRunner'
]
