"""
CLI Layer for iOS Simulator Module

This package contains the CLI (Command Line Interface) layer, providing a
rich interface for human users.

Usage:
    from ios_simulator_mcp.cli import app as simulator_app

    # Run the CLI app
    simulator_app()
"""

# CLI application
from ios_simulator_mcp.cli.cli import app, run

# Formatters for rich output
from ios_simulator_mcp.cli.formatters import (
    print_booted_device,
    print_devices_table,
    print_screenshot_result,
    print_error,
    print_info,
    print_json,
    create_progress,
    console
)

__all__ = [
    # CLI application
    'app',
    'run',

    # Formatters
    'print_booted_device',
    'print_devices_table',
    'print_screenshot_result',
    'print_error',
    'print_info',
    'print_json',
    'create_progress',
    'console'
]
