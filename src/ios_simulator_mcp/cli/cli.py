#!/usr/bin/env python3
"""
Command Line Interface for iOS Simulator Module

This module provides a CLI for the simulator functionality using Typer and
Rich, giving humans the same operations the MCP server offers to agents.

This module is part of the Presentation Layer and should only depend on
Core Layer components, not on Integration Layer.

Sample input:
- ios-sim booted
- ios-sim screenshot ABCD-1234-EF --name home

Expected output:
- Formatted console output of operation results
- Screenshot files saved to disk
- Structured JSON output with --json
"""

import asyncio
import os
import sys
from typing import Any, Dict, Optional

import typer
from loguru import logger

from ios_simulator_mcp import __version__
from ios_simulator_mcp.core.config import get_screenshot_dir
from ios_simulator_mcp.core.errors import ScreenshotError, SimulatorError
from ios_simulator_mcp.core.parsing import list_booted_devices, parse_booted_device
from ios_simulator_mcp.core.simctl import SimctlRunner
from ios_simulator_mcp.core.utils import ensure_directory, generate_screenshot_name, resolve_output_path
from ios_simulator_mcp.cli.formatters import (
    create_progress,
    print_booted_device,
    print_devices_table,
    print_error,
    print_info,
    print_json,
    print_raw,
    print_screenshot_result,
    print_success,
)
from ios_simulator_mcp.cli.validators import validate_device_id_argument, validate_output_path


app = typer.Typer(
    help="iOS Simulator tools (list, boot, screenshot) backed by xcrun simctl",
    rich_markup_mode="rich",
    add_completion=False
)


def format_cli_response(success: bool, data: Optional[Dict[str, Any]] = None, error: Optional[str] = None) -> Dict[str, Any]:
    response: Dict[str, Any] = {"success": success}
    if success and data is not None:
        response.update(data)
    elif not success and error is not None:
        response["error"] = error
    return response


def _fail(ctx: typer.Context, message: str) -> None:
    logger.error(message)
    if ctx.obj.get("json_output", False):
        print_json(format_cli_response(False, error=message))
    else:
        print_error(message)
    raise typer.Exit(1)


def _run(ctx: typer.Context, description: str, coro):
    """Run a core coroutine, with a spinner unless JSON output is requested."""
    if ctx.obj.get("json_output", False):
        return asyncio.run(coro)
    with create_progress() as progress:
        progress.add_task(description, total=None)
        return asyncio.run(coro)


@app.callback()
def main(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON"),
    simctl: Optional[str] = typer.Option(
        None,
        "--simctl",
        help="Launcher used to reach simctl (default: $SIMCTL_BINARY or xcrun)"
    ),
):
    """
    iOS Simulator CLI - inspect, boot and screenshot simulators.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json_output
    ctx.obj["runner"] = SimctlRunner(simctl)


@app.command("devices")
def devices_command(ctx: typer.Context):
    """
    Show all simulators reported by `simctl list devices`.
    """
    runner: SimctlRunner = ctx.obj["runner"]
    try:
        listing = _run(ctx, "Listing simulators...", runner.list_devices())
    except SimulatorError as e:
        _fail(ctx, f"Error: {str(e)}")

    if ctx.obj["json_output"]:
        print_json(format_cli_response(True, data={"output": listing}))
    else:
        print_raw(listing)


@app.command("booted")
def booted_command(
    ctx: typer.Context,
    show_all: bool = typer.Option(False, "--all", "-a", help="Show every booted simulator, not just the first"),
):
    """
    Show the booted simulator's name and UUID.
    """
    runner: SimctlRunner = ctx.obj["runner"]
    try:
        listing = _run(ctx, "Listing simulators...", runner.list_devices())
    except SimulatorError as e:
        _fail(ctx, f"Error: {str(e)}")

    json_output = ctx.obj["json_output"]
    if show_all:
        devices = list_booted_devices(listing)
        if json_output:
            print_json(format_cli_response(True, data={"devices": [d.model_dump() for d in devices]}))
        elif devices:
            print_devices_table(devices)
        else:
            print_info("No booted simulator found.")
        return

    device = parse_booted_device(listing)
    if json_output:
        print_json(format_cli_response(True, data={"device": device.model_dump() if device else None}))
    elif device is None:
        print_info("No booted simulator found.")
    else:
        print_booted_device(device)


@app.command("boot")
def boot_command(
    ctx: typer.Context,
    device_id: str = typer.Argument(..., help="The UUID of the simulator to boot", callback=validate_device_id_argument),
):
    """
    Boot a simulator by UUID.
    """
    runner: SimctlRunner = ctx.obj["runner"]
    try:
        result = _run(ctx, f"Booting {device_id}...", runner.boot(device_id))
    except SimulatorError as e:
        _fail(ctx, f"Error booting simulator: {str(e)}")

    if ctx.obj["json_output"]:
        print_json(format_cli_response(True, data={"device_id": device_id, "output": result.stdout}))
    else:
        print_success(f"Successfully booted simulator with ID: {device_id}")
        if result.stdout.strip():
            print_raw(result.stdout)


async def _capture(runner: SimctlRunner, device_id: str, path: str) -> int:
    directory = os.path.dirname(path)
    if not ensure_directory(directory):
        raise ScreenshotError(f"Could not create directory: {directory}")
    await runner.screenshot(device_id, path)
    if not os.path.isfile(path):
        raise ScreenshotError(f"Screenshot file was not created: {path}")
    return os.path.getsize(path)


@app.command("screenshot")
def screenshot_command(
    ctx: typer.Context,
    device_id: str = typer.Argument(..., help="The UUID of the simulator to screenshot", callback=validate_device_id_argument),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Screenshot name (default: screenshot-<timestamp>)"),
    output: Optional[str] = typer.Option(
        None,
        "--output", "-o",
        help="Output file path. If not provided, saves to the screenshot resource directory.",
        callback=validate_output_path
    ),
):
    """
    Save a PNG screenshot of a simulator.
    """
    runner: SimctlRunner = ctx.obj["runner"]
    screenshot_name = name.strip() if name and name.strip() else generate_screenshot_name()
    path = os.path.abspath(resolve_output_path(screenshot_name, output, get_screenshot_dir()))

    try:
        size = _run(ctx, "Capturing screenshot...", _capture(runner, device_id, path))
    except SimulatorError as e:
        _fail(ctx, f"Error taking screenshot: {str(e)}")

    result = {"name": screenshot_name, "file": path, "size": size}
    if ctx.obj["json_output"]:
        print_json(format_cli_response(True, data=result))
    else:
        print_screenshot_result(result)


@app.command("version")
def version_command(ctx: typer.Context):
    """
    Show version information.
    """
    info = {"name": "ios-simulator-mcp", "version": __version__, "screenshot_dir": get_screenshot_dir()}
    if ctx.obj["json_output"]:
        print_json(format_cli_response(True, data=info))
    else:
        print_info(f"Name: {info['name']}\nVersion: {info['version']}\nScreenshot directory: {info['screenshot_dir']}")


def run() -> None:
    """Console script entry point."""
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level}: {message}</level>",
        level="WARNING",
        colorize=True
    )
    app()


if __name__ == "__main__":
    run()
