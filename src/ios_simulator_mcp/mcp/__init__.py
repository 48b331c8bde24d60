"""
MCP Layer for iOS Simulator Module

This package contains the MCP (Model Context Protocol) layer, exposing the
simulator tools and screenshot resources to AI agents.

Usage:
    # Start the MCP server
    python -m ios_simulator_mcp.mcp.mcp_server start

    # Use the MCP server in Python
    from ios_simulator_mcp.mcp import create_mcp_server
    mcp = create_mcp_server()
    mcp.run()
"""

# MCP server creation
from ios_simulator_mcp.mcp.mcp_tools import create_mcp_server

# MCP server entry point
from ios_simulator_mcp.mcp.mcp_server import (
    main,
    health_check,
    get_server_info,
    configure_logging
)

# MCP wrappers
from ios_simulator_mcp.mcp.wrappers import (
    SimulatorTools,
    format_mcp_response,
    format_error_response
)

__all__ = [
    # MCP server
    'create_mcp_server',
    'main',
    'health_check',
    'get_server_info',
    'configure_logging',

    # MCP wrappers
    'SimulatorTools',
    'format_mcp_response',
    'format_error_response'
]

# Example configuration for .mcp.json
EXAMPLE_MCP_CONFIG = """
{
  "mcpServers": {
    "ios-simulator": {
      "command": "ios-simulator-mcp",
      "env": {
        "SCREENSHOT_RESOURCE_DIR": "/path/to/screenshots"
      }
    }
  }
}
"""
