#!/usr/bin/env python3
"""
Formatters for iOS Simulator CLI

This module provides rich formatting utilities for the CLI presentation layer:
panels for single results, tables for device listings and plain JSON output
for machine consumption.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- BootedDevice records
- Screenshot result dictionaries
- Error messages

Expected output:
- Rich formatted tables and panels
"""

import json
import os
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table
from rich.text import Text

from ios_simulator_mcp.core.parsing import BootedDevice


# Initialize console
console = Console()
error_console = Console(stderr=True)


# Color scheme
COLORS = {
    "success": "green",
    "error": "red",
    "warning": "yellow",
    "info": "blue",
    "path": "cyan",
    "highlight": "magenta",
    "dim": "grey70",
}


def print_booted_device(device: BootedDevice) -> None:
    """
    Print the booted simulator as a panel.

    Args:
        device: Parsed booted device
    """
    info = Text()
    info.append("Name: ", style=COLORS["dim"])
    info.append(f"{device.name}\n", style=COLORS["highlight"])
    info.append("UUID: ", style=COLORS["dim"])
    info.append(device.udid, style=COLORS["path"])

    console.print(Panel(
        info,
        title="[bold green]Booted Simulator",
        border_style=COLORS["success"],
        padding=(1, 2)
    ))


def print_devices_table(devices: List[BootedDevice], title: str = "Booted Simulators") -> None:
    """Print devices as a two-column table."""
    table = Table(title=title, show_lines=False)
    table.add_column("Name", style=COLORS["highlight"])
    table.add_column("UUID", style=COLORS["path"])
    for device in devices:
        table.add_row(device.name, device.udid)
    console.print(table)


def print_screenshot_result(result: Dict[str, Any]) -> None:
    """
    Format and print screenshot result to the console.

    Args:
        result: Dictionary with ``file`` and ``size`` keys
    """
    file_path = result.get("file", "Unknown")

    file_info = Text()
    file_info.append("Filename: ", style=COLORS["dim"])
    file_info.append(f"{os.path.basename(file_path)}\n", style=COLORS["path"])
    file_info.append("Directory: ", style=COLORS["dim"])
    file_info.append(f"{os.path.dirname(file_path)}\n", style=COLORS["path"])

    if "size" in result:
        file_info.append("Size: ", style=COLORS["dim"])
        file_info.append(f"{result['size'] / 1024:.1f} KB", style=COLORS["info"])

    console.print(Panel(
        file_info,
        title="[bold green]Screenshot Captured Successfully",
        border_style=COLORS["success"],
        padding=(1, 2)
    ))


def print_raw(text: str) -> None:
    """Print command output verbatim, without markup processing."""
    console.print(Text(text))


def print_error(message: str) -> None:
    error_console.print(Panel(
        Text(message),
        title="[bold red]Error",
        border_style=COLORS["error"]
    ))


def print_info(message: str) -> None:
    console.print(f"[{COLORS['info']}]{message}[/]")


def print_success(message: str) -> None:
    console.print(f"[{COLORS['success']}]{message}[/]")


def print_json(data: Any) -> None:
    """Print data as indented JSON on stdout (no rich markup)."""
    print(json.dumps(data, indent=2, default=str))


def create_progress() -> Progress:
    """
    Create a transient spinner for long-running simctl calls.

    Returns:
        Progress: Rich progress instance (use as a context manager)
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=error_console,
        transient=True,
    )
