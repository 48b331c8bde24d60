#!/usr/bin/env python3
"""
Validators for iOS Simulator CLI

Typer callbacks that check CLI inputs before any simctl command runs.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.
"""

import os
from typing import Optional

import typer
from loguru import logger

from ios_simulator_mcp.core.utils import require_text
from ios_simulator_mcp.cli.formatters import print_error


def validate_device_id_argument(ctx: typer.Context, value: str) -> str:
    """
    Typer callback for validating a simulator UDID argument.

    Args:
        ctx: Typer context
        value: Device id from CLI

    Returns:
        str: The device id with surrounding whitespace removed
    """
    try:
        return require_text(value, "Device id")
    except ValueError as e:
        logger.error(f"Device id validation error: {str(e)}")
        print_error(str(e))
        raise typer.Exit(1)


def validate_output_path(ctx: typer.Context, value: Optional[str]) -> Optional[str]:
    """
    Typer callback for validating the screenshot output path.

    Rejects paths that point at an existing directory; missing parent
    directories are created when the screenshot is taken.
    """
    if value is None:
        return None
    if os.path.isdir(value):
        print_error(f"Output path is a directory, expected a file: {value}")
        raise typer.Exit(1)
    return value
