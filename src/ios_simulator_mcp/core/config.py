"""
Module Description:
Defines the central configuration dictionary (CONFIG) for the iOS simulator
MCP server. Loads settings from environment variables using python-dotenv for
the screenshot resource directory, the simctl launcher binary and logging.

Links:
- python-dotenv: https://github.com/theskumar/python-dotenv
- os module: https://docs.python.org/3/library/os.html

Sample Input/Output:

- Accessing config values:
  from ios_simulator_mcp.core.config import CONFIG
  log_level = CONFIG["logging"]["level"]

- Resolving the screenshot directory (re-reads SCREENSHOT_RESOURCE_DIR):
  get_screenshot_dir()  # '/Users/me/Downloads/ios-simulator-screenshots'
"""
import os
import sys
from typing import Any, Dict

from dotenv import load_dotenv
from loguru import logger

from ios_simulator_mcp.core.constants import (
    DEFAULT_SCREENSHOT_DIR,
    DEFAULT_SIMCTL_BINARY,
    SCREENSHOT_DIR_ENV,
    SERVER_NAME,
    SERVER_VERSION,
    SIMCTL_BINARY_ENV,
)

# Load environment variables
load_dotenv()

# Configuration
CONFIG: Dict[str, Any] = {
    "server": {
        "name": SERVER_NAME,
        "version": SERVER_VERSION,
    },
    "screenshots": {
        "dir": os.getenv(SCREENSHOT_DIR_ENV) or DEFAULT_SCREENSHOT_DIR,
    },
    "simctl": {
        "binary": os.getenv(SIMCTL_BINARY_ENV) or DEFAULT_SIMCTL_BINARY,
    },
    "logging": {
        "level": os.getenv("IOS_SIM_MCP_LOG_LEVEL", "INFO"),
        "file": os.getenv("IOS_SIM_MCP_LOG_FILE", "logs/ios_simulator_mcp.log"),
        "rotation": "10 MB",
        "retention": "1 week",
    },
}


def get_screenshot_dir() -> str:
    """
    Resolve the screenshot resource directory.

    The environment is consulted on every call so that a server started after
    SCREENSHOT_RESOURCE_DIR changes (or a test that patches it) sees the new value.
    """
    return os.getenv(SCREENSHOT_DIR_ENV) or DEFAULT_SCREENSHOT_DIR


def get_simctl_binary() -> str:
    """Return the launcher used to reach simctl (normally ``xcrun``)."""
    return os.getenv(SIMCTL_BINARY_ENV) or DEFAULT_SIMCTL_BINARY


def validate_config() -> bool:
    """
    Check that configuration values are usable.

    Returns:
        bool: True when every check passes
    """
    ok = True
    if not CONFIG["screenshots"]["dir"]:
        logger.error("Screenshot directory is empty")
        ok = False
    if not CONFIG["simctl"]["binary"]:
        logger.error("simctl binary is empty")
        ok = False
    if CONFIG["logging"]["level"].upper() not in ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"):
        logger.error(f"Unknown log level: {CONFIG['logging']['level']}")
        ok = False
    return ok


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, format="<level>{level}: {message}</level>", level="INFO", colorize=True)

    if validate_config():
        print("✅ VALIDATION PASSED - configuration is usable")
        print(f"Screenshot directory: {get_screenshot_dir()}")
        sys.exit(0)
    else:
        print("❌ VALIDATION FAILED - see log output above")
        sys.exit(1)
