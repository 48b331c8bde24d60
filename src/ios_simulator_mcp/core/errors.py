"""
Exceptions raised by the core layer.

Tool handlers catch these at their boundary and turn them into text responses;
they only reach the protocol runtime through resource resolution.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ios_simulator_mcp.core.simctl import CommandResult


class SimulatorError(Exception):
    """Base class for simulator automation failures."""


class SimctlError(SimulatorError):
    """An external simctl command could not be run or exited nonzero."""

    def __init__(self, message: str, result: Optional["CommandResult"] = None):
        super().__init__(message)
        self.result = result


class ScreenshotError(SimulatorError):
    """A capture finished but its output could not be prepared or read back."""


class ScreenshotNotFoundError(SimulatorError):
    """No screenshot is registered under the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Screenshot not found: {name}")
        self.name = name
