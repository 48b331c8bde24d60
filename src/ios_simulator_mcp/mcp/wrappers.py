#!/usr/bin/env python3
"""
MCP Wrappers for iOS Simulator Module

This module provides the tool implementations behind the MCP server. Each
wrapper runs one simctl command through the core layer and converts the
outcome, including any failure, into a list of MCP content blocks, so the
calling agent always receives a well-formed response.

This module is part of the Integration Layer and can depend on Core Layer
components.

Sample input:
    tools = SimulatorTools(ScreenshotRegistry())
    await tools.take_screenshot("ABCD-1234-EF", name="home")

Expected output:
    [TextContent(text="Screenshot saved to: ...\\nAccessible as resource: screenshot://home"),
     ImageContent(data="<base64>", mimeType="image/png")]
"""

import asyncio
import base64
import os
from pathlib import Path
from typing import List, Optional, Union

from loguru import logger
from mcp.types import ImageContent, TextContent

from ios_simulator_mcp.core.config import get_screenshot_dir
from ios_simulator_mcp.core.constants import SCREENSHOT_MIME_TYPE
from ios_simulator_mcp.core.errors import ScreenshotError
from ios_simulator_mcp.core.parsing import parse_booted_device
from ios_simulator_mcp.core.registry import ScreenshotRegistry
from ios_simulator_mcp.core.simctl import SimctlRunner
from ios_simulator_mcp.core.utils import (
    ensure_directory,
    format_error_text,
    generate_screenshot_name,
    require_text,
    resolve_output_path,
)

ToolContent = Union[TextContent, ImageContent]

NO_BOOTED_SIMULATOR = "No booted simulator found."


def format_mcp_response(text: str, image_data: Optional[str] = None) -> List[ToolContent]:
    """
    Format a tool result as MCP content blocks.

    Args:
        text: Human-readable message
        image_data: Base64 PNG to attach inline, if any

    Returns:
        List[ToolContent]: Text block, followed by an image block when given
    """
    content: List[ToolContent] = [TextContent(type="text", text=text)]
    if image_data is not None:
        content.append(ImageContent(type="image", data=image_data, mimeType=SCREENSHOT_MIME_TYPE))
    return content


def format_error_response(prefix: str, error: BaseException) -> List[ToolContent]:
    """Log a failed operation and return it as a text-only response."""
    message = format_error_text(prefix, error)
    logger.error(message)
    return format_mcp_response(message)


class SimulatorTools:
    """
    Tool implementations for the MCP server.

    Holds the screenshot registry, the simctl runner and the directory used
    for default screenshot filenames. None of the methods raise.
    """

    def __init__(
        self,
        registry: ScreenshotRegistry,
        runner: Optional[SimctlRunner] = None,
        screenshot_dir: Optional[str] = None,
    ):
        self.registry = registry
        self.runner = runner or SimctlRunner()
        self.screenshot_dir = screenshot_dir or get_screenshot_dir()

    async def get_booted_sim_id(self) -> List[ToolContent]:
        try:
            listing = await self.runner.list_devices()
            device = parse_booted_device(listing)
            if device is None:
                logger.info("No booted simulator in device listing")
                return format_mcp_response(NO_BOOTED_SIMULATOR)
            logger.info(f"Booted simulator: {device.name} ({device.udid})")
            return format_mcp_response(device.describe())
        except Exception as e:
            return format_error_response("Error", e)

    async def get_all_simulators(self) -> List[ToolContent]:
        try:
            listing = await self.runner.list_devices()
            return format_mcp_response(listing)
        except Exception as e:
            return format_error_response("Error", e)

    async def boot_simulator(self, device_id: str) -> List[ToolContent]:
        try:
            device_id = require_text(device_id, "deviceId")
            result = await self.runner.boot(device_id)
            logger.info(f"Booted simulator {device_id}")
            return format_mcp_response(
                f"Successfully booted simulator with ID: {device_id}\n{result.stdout}"
            )
        except Exception as e:
            return format_error_response("Error booting simulator", e)

    async def take_screenshot(
        self,
        device_id: str,
        name: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> List[ToolContent]:
        """
        Capture a screenshot, save it to disk and register it as a resource.

        Nothing is registered unless the capture command succeeds and the
        file can be read back.
        """
        try:
            device_id = require_text(device_id, "deviceId")
            screenshot_name = name.strip() if name and name.strip() else generate_screenshot_name()
            actual_path = resolve_output_path(screenshot_name, output_path, self.screenshot_dir)

            directory = os.path.dirname(actual_path)
            if not ensure_directory(directory):
                raise ScreenshotError(f"Could not create directory: {directory}")

            await self.runner.screenshot(device_id, actual_path)

            absolute_path = os.path.abspath(actual_path)
            image_bytes = await self._read_capture(absolute_path)
            image_data = base64.b64encode(image_bytes).decode("utf-8")

            uri = self.registry.register(screenshot_name, image_bytes)
            logger.info(f"Screenshot of {device_id} saved to {absolute_path}")

            return format_mcp_response(
                f"Screenshot saved to: {absolute_path}\nAccessible as resource: {uri}",
                image_data=image_data,
            )
        except Exception as e:
            return format_error_response("Error taking screenshot", e)

    async def delete_screenshot(self, name: str) -> List[ToolContent]:
        try:
            name = require_text(name, "name")
            if self.registry.delete(name):
                return format_mcp_response(f"Successfully deleted screenshot: {name}")
            return format_mcp_response(f"Screenshot not found: {name}")
        except Exception as e:
            return format_error_response("Error deleting screenshot", e)

    async def _read_capture(self, path: str) -> bytes:
        try:
            return await asyncio.to_thread(Path(path).read_bytes)
        except FileNotFoundError as e:
            raise ScreenshotError(f"Screenshot file was not created: {path}") from e
