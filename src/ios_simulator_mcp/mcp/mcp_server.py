#!/usr/bin/env python3
"""
MCP Server Entry Point for iOS Simulator Tools

This is the main entry point for the iOS simulator MCP server, designed to be
directly referenced in the .mcp.json configuration. The server speaks MCP over
stdin/stdout, so all logging goes to stderr and a log file.

This module is part of the Integration Layer and connects the MCP functionality
to the application core.
"""

import argparse
import asyncio
import json
import os
import platform
import shutil
import sys
from typing import Any, Dict, List, Optional

from loguru import logger

from ios_simulator_mcp.core.config import CONFIG, get_screenshot_dir, get_simctl_binary
from ios_simulator_mcp.mcp.mcp_tools import create_mcp_server


def configure_logging(level: str = CONFIG["logging"]["level"], log_file: Optional[str] = CONFIG["logging"]["file"]) -> None:
    """
    Configure logging with proper format and level.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path of the rotating log file, or None for stderr only
    """
    # Remove default handlers
    logger.remove()

    # stdout carries the protocol stream
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | {message}",
        level=level,
        colorize=True
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
        except OSError as e:
            logger.warning(f"File logging disabled, cannot create {log_dir}: {str(e)}")
            return
        logger.add(
            log_file,
            rotation=CONFIG["logging"]["rotation"],
            retention=CONFIG["logging"]["retention"],
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {message}"
        )


def get_server_info() -> Dict[str, Any]:
    """
    Get server information.

    Returns:
        Dict[str, Any]: Server information
    """
    return {
        "name": CONFIG["server"]["name"],
        "version": CONFIG["server"]["version"],
        "description": "MCP server for listing, booting and screenshotting iOS simulators",
        "screenshot_dir": get_screenshot_dir(),
        "simctl_binary": get_simctl_binary(),
    }


def health_check() -> Dict[str, Any]:
    """
    Perform a health check.

    Returns:
        Dict[str, Any]: Health check results
    """
    binary = get_simctl_binary()
    binary_path = shutil.which(binary)
    result = {
        "platform": platform.system(),
        "python_version": platform.python_version(),
        "simctl_binary": binary,
        "simctl_path": binary_path,
        "screenshot_dir": get_screenshot_dir(),
    }
    if binary_path is None:
        result["status"] = "unhealthy"
        result["error"] = f"{binary} not found on PATH"
    else:
        result["status"] = "healthy"
    return result


async def get_server_schema() -> Dict[str, List[Dict[str, Any]]]:
    """Describe the tools and resources a fresh server exposes."""
    mcp = create_mcp_server()
    tools = await mcp.list_tools()
    resources = await mcp.list_resources()
    templates = await mcp.list_resource_templates()
    return {
        "tools": [
            {"name": tool.name, "description": tool.description, "inputSchema": tool.inputSchema}
            for tool in tools
        ],
        "resources": [
            {"uri": str(resource.uri), "name": resource.name, "mimeType": resource.mimeType}
            for resource in resources
        ],
        "resourceTemplates": [
            {"uriTemplate": template.uriTemplate, "name": template.name, "mimeType": template.mimeType}
            for template in templates
        ],
    }


def run_server(debug: bool = False) -> int:
    """
    Run the stdio server until its input stream closes.

    Returns:
        int: Exit code
    """
    log_level = "DEBUG" if debug else CONFIG["logging"]["level"]
    configure_logging(log_level)

    logger.info("Starting MCP server for iOS simulator tools")
    logger.info(f"Screenshot directory: {get_screenshot_dir()}")

    try:
        mcp = create_mcp_server()
    except Exception as e:
        logger.error(f"Server failed to start: {str(e)}")
        return 1

    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
        return 0
    except Exception as e:
        logger.exception(f"Server terminated: {str(e)}")
        return 1

    logger.info("iOS Simulator MCP Server closed")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the MCP server.

    Returns:
        int: Exit code
    """
    parser = argparse.ArgumentParser(description="iOS Simulator MCP Server")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Start server command
    start_parser = subparsers.add_parser("start", help="Start the MCP server on stdio")
    start_parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    # Health check command
    subparsers.add_parser("health", help="Check that simctl is reachable")

    # Info command
    subparsers.add_parser("info", help="Display server information")

    # Schema command
    schema_parser = subparsers.add_parser("schema", help="Display server tools and resources")
    schema_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    # MCP clients launch the bare command
    if not args.command or args.command == "start":
        return run_server(debug=getattr(args, "debug", False))

    elif args.command == "health":
        result = health_check()
        print(json.dumps(result, indent=2))
        return 0 if result["status"] == "healthy" else 1

    elif args.command == "info":
        print(json.dumps(get_server_info(), indent=2))
        return 0

    elif args.command == "schema":
        schema = asyncio.run(get_server_schema())

        if args.json:
            print(json.dumps(schema, indent=2))
        else:
            for tool in schema["tools"]:
                print(f"Tool: {tool['name']}")
                print(f"  Description: {(tool['description'] or 'No description').strip().splitlines()[0]}")
                print("  Parameters:")
                required = tool["inputSchema"].get("required", [])
                for param_name, param_info in tool["inputSchema"].get("properties", {}).items():
                    flag = " (required)" if param_name in required else ""
                    print(f"    {param_name}{flag} - {param_info.get('description', 'No description')}")
                print()
            for resource in schema["resources"]:
                print(f"Resource: {resource['uri']} ({resource['mimeType']})")
            for template in schema["resourceTemplates"]:
                print(f"Resource template: {template['uriTemplate']} ({template['mimeType']})")

        return 0

    return 0


if __name__ == "__main__":
    """
    Direct entry point for the iOS simulator MCP server.
    This file is designed to be referenced in .mcp.json.

    Usage:
      python -m ios_simulator_mcp.mcp.mcp_server start [--debug]
      python -m ios_simulator_mcp.mcp.mcp_server health
      python -m ios_simulator_mcp.mcp.mcp_server info
      python -m ios_simulator_mcp.mcp.mcp_server schema [--json]
    """
    sys.exit(main())
