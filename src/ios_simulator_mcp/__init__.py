"""
iOS Simulator MCP Tool

Exposes iOS simulator automation (listing, booting, screenshots) to AI agents
over the Model Context Protocol, using the same three-layer layout as the
other tools in this repository:

1. Core Layer: simctl execution, listing parsing, screenshot registry
2. Presentation Layer: CLI interface with rich formatting
3. Integration Layer: MCP server for AI agent usage

Usage:
    # MCP server usage (Integration Layer)
    # ios-simulator-mcp
    # python -m ios_simulator_mcp.mcp.mcp_server start

    # CLI usage (Presentation Layer)
    # ios-sim booted
    # ios-sim screenshot <udid> --name home
"""

__version__ = "1.0.0"

__all__ = [
    '__version__'
]
