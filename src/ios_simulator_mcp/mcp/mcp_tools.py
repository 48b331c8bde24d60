#!/usr/bin/env python3
"""
MCP Tools for iOS Simulator Module

This module provides the MCP tool and resource definitions for controlling
iOS simulators through ``xcrun simctl``, to be used with Claude MCP.

This module is part of the Integration Layer and can depend on Core Layer
components.

Sample input:
- MCP server configuration

Expected output:
- Configured MCP server with registered tools and screenshot resources
"""

from typing import Optional
from urllib.parse import unquote

from loguru import logger
from mcp.server.fastmcp import FastMCP
from pydantic import Field

from ios_simulator_mcp.core.config import CONFIG, get_screenshot_dir
from ios_simulator_mcp.core.constants import (
    SCREENSHOT_LIST_URI,
    SCREENSHOT_MIME_TYPE,
    SCREENSHOT_URI_TEMPLATE,
)
from ios_simulator_mcp.core.errors import ScreenshotError
from ios_simulator_mcp.core.registry import ScreenshotRegistry
from ios_simulator_mcp.core.simctl import SimctlRunner
from ios_simulator_mcp.core.utils import ensure_directory
from ios_simulator_mcp.mcp.wrappers import SimulatorTools


def create_mcp_server(
    name: str = CONFIG["server"]["name"],
    registry: Optional[ScreenshotRegistry] = None,
    runner: Optional[SimctlRunner] = None,
    screenshot_dir: Optional[str] = None,
) -> FastMCP:
    """
    Create and configure MCP server with simulator tools

    Args:
        name: Name for the MCP server
        registry: Screenshot registry to expose (a fresh one if omitted)
        runner: simctl runner used by the tools
        screenshot_dir: Directory for default screenshot files

    Returns:
        FastMCP: Configured MCP server instance

    Raises:
        ScreenshotError: If the screenshot directory cannot be created
    """
    screenshot_dir = screenshot_dir or get_screenshot_dir()
    if not ensure_directory(screenshot_dir):
        raise ScreenshotError(f"Could not create screenshot directory: {screenshot_dir}")

    registry = registry if registry is not None else ScreenshotRegistry()
    tools = SimulatorTools(registry, runner=runner, screenshot_dir=screenshot_dir)

    mcp = FastMCP(name)
    logger.info(f"Initialized FastMCP server: {name} (screenshots in {screenshot_dir})")

    register_simulator_tools(mcp, tools)
    register_screenshot_tools(mcp, tools)
    register_screenshot_resources(mcp, registry)

    return mcp


def register_simulator_tools(mcp: FastMCP, tools: SimulatorTools) -> None:
    """
    Register device listing and boot tools with the MCP server

    Args:
        mcp: MCP server instance
        tools: Tool implementations
    """
    @mcp.tool()
    async def get_booted_sim_id():
        """
        Get the ID of the currently booted iOS simulator.

        Returns:
            The name and UUID of the booted simulator, or a message if none is booted.
        """
        logger.info("Booted simulator requested")
        return await tools.get_booted_sim_id()

    @mcp.tool()
    async def get_all_simulators():
        """
        Get a list of all available iOS simulators.

        Returns:
            The raw `simctl list devices` output.
        """
        logger.info("Simulator list requested")
        return await tools.get_all_simulators()

    @mcp.tool()
    async def boot_simulator(
        deviceId: str = Field(description="The UUID of the simulator to boot"),
    ):
        """
        Boot a specific simulator by ID.

        Returns:
            Result of the boot operation.
        """
        logger.info(f"Boot requested for {deviceId}")
        return await tools.boot_simulator(deviceId)


def register_screenshot_tools(mcp: FastMCP, tools: SimulatorTools) -> None:
    """
    Register screenshot capture and deletion tools with the MCP server

    Args:
        mcp: MCP server instance
        tools: Tool implementations
    """
    @mcp.tool()
    async def take_screenshot(
        deviceId: str = Field(description="The UUID of the simulator to screenshot"),
        name: Optional[str] = Field(
            default=None,
            description="Name for the screenshot to be accessed as a resource",
        ),
        outputPath: Optional[str] = Field(
            default=None,
            description="Optional path where to save the screenshot",
        ),
    ):
        """
        Take a screenshot of a booted iOS simulator.

        The image is saved to disk (by default a timestamped file in the
        screenshot resource directory), returned inline and made readable as
        the resource screenshot://<name>.

        Returns:
            Path to the saved screenshot and the image, or an error message.
        """
        logger.info(f"Screenshot requested for {deviceId} (name={name}, outputPath={outputPath})")
        return await tools.take_screenshot(deviceId, name=name, output_path=outputPath)

    @mcp.tool()
    async def delete_screenshot(
        name: str = Field(description="Name of the screenshot to delete"),
    ):
        """
        Delete a screenshot from the in-memory resource list.

        The file on disk is left in place.

        Returns:
            Result of the deletion operation.
        """
        logger.info(f"Screenshot deletion requested for {name}")
        return await tools.delete_screenshot(name)


def register_screenshot_resources(mcp: FastMCP, registry: ScreenshotRegistry) -> None:
    """
    Register the screenshot list and per-name screenshot resources

    Args:
        mcp: MCP server instance
        registry: Registry the resources read from
    """
    @mcp.resource(
        SCREENSHOT_LIST_URI,
        name="screenshot-list",
        description="Names of all screenshots captured by this server, one per line",
        mime_type="text/plain",
    )
    def screenshot_list() -> str:
        return registry.list_text()

    # Names are looked up when read, so deleted screenshots stop resolving
    @mcp.resource(
        SCREENSHOT_URI_TEMPLATE,
        name="screenshot",
        description="PNG image of a captured screenshot",
        mime_type=SCREENSHOT_MIME_TYPE,
    )
    def screenshot(name: str) -> bytes:
        return registry.get(unquote(name))
