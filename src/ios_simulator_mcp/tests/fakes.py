"""
Test doubles for the simctl runner.
"""

import os
from typing import List, Optional, Tuple

from ios_simulator_mcp.core.errors import SimctlError
from ios_simulator_mcp.core.simctl import CommandResult

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-data"

LISTING_WITH_BOOTED = """== Devices ==
-- iOS 17.0 --
    iPhone 14 (1111-2222-AAAA) (Shutdown)
    iPhone 15 (ABCD-1234-EF) (Booted)
    iPad Air (3333-4444-BBBB) (Booted)
"""

LISTING_WITHOUT_BOOTED = """== Devices ==
-- iOS 17.0 --
    iPhone 14 (1111-2222-AAAA) (Shutdown)
    iPhone 15 (ABCD-1234-EF) (Shutdown)
"""


class FakeSimctlRunner:
    """
    In-process stand-in for SimctlRunner.

    ``screenshot`` writes ``image`` to the requested path unless the device id
    is in ``failing_devices`` or ``write_file`` is False.
    """

    def __init__(
        self,
        listing: str = LISTING_WITH_BOOTED,
        image: bytes = PNG_BYTES,
        failing_devices: Tuple[str, ...] = ("bad-device",),
        write_file: bool = True,
        list_error: Optional[str] = None,
    ):
        self.listing = listing
        self.image = image
        self.failing_devices = failing_devices
        self.write_file = write_file
        self.list_error = list_error
        self.calls: List[Tuple[str, ...]] = []

    def _result(self, *args: str, stdout: str = "") -> CommandResult:
        return CommandResult(args=["xcrun", "simctl", *args], returncode=0, stdout=stdout, stderr="")

    def _failure(self, *args: str) -> SimctlError:
        result = CommandResult(
            args=["xcrun", "simctl", *args],
            returncode=148,
            stdout="",
            stderr="Invalid device: " + args[-1],
        )
        return SimctlError(f"Command failed: {result.command_line}\n{result.stderr}", result=result)

    async def list_devices(self) -> str:
        self.calls.append(("list",))
        if self.list_error:
            raise SimctlError(self.list_error)
        return self.listing

    async def boot(self, device_id: str) -> CommandResult:
        self.calls.append(("boot", device_id))
        if device_id in self.failing_devices:
            raise self._failure("boot", device_id)
        return self._result("boot", device_id)

    async def screenshot(self, device_id: str, path: str) -> CommandResult:
        self.calls.append(("screenshot", device_id, path))
        if device_id in self.failing_devices:
            raise self._failure("io", device_id)
        if self.write_file:
            with open(path, "wb") as f:
                f.write(self.image)
        return self._result("io", device_id, "screenshot", path, stdout=f"Wrote screenshot to: {path}\n")
