#!/usr/bin/env python3
"""
simctl Command Runner

This module runs ``xcrun simctl`` subcommands as child processes using
asyncio, so a tool call suspends instead of blocking the event loop while the
simulator works.

This module is part of the Core Layer and should have no dependencies on
Presentation or Integration layers.

Links:
- asyncio subprocesses: https://docs.python.org/3/library/asyncio-subprocess.html

Sample input:
    runner = SimctlRunner()
    await runner.boot("ABCD-1234-EF")

Expected output:
    CommandResult(args=['xcrun', 'simctl', 'boot', 'ABCD-1234-EF'], returncode=0, stdout='', stderr='')
"""

import asyncio
import shlex
from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from ios_simulator_mcp.core.config import get_simctl_binary
from ios_simulator_mcp.core.constants import SIMCTL_COMMANDS
from ios_simulator_mcp.core.errors import SimctlError
from ios_simulator_mcp.core.utils import truncate_large_value


@dataclass
class CommandResult:
    """Outcome of one external command."""
    args: List[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def command_line(self) -> str:
        return shlex.join(self.args)


class SimctlRunner:
    """
    Thin async wrapper around the simctl CLI.

    No timeout is applied: a hung simctl keeps its caller waiting until the
    host cancels the request.
    """

    def __init__(self, binary: Optional[str] = None):
        self.binary = binary or get_simctl_binary()

    async def run(self, *args: str) -> CommandResult:
        """
        Run ``<binary> <args...>`` and capture its output.

        Raises:
            SimctlError: If the binary cannot be started or exits nonzero
        """
        argv = [self.binary, *args]
        command_line = shlex.join(argv)
        logger.debug(f"Running: {command_line}")

        try:
            process = await asyncio.create_subprocess_exec(
                *argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"Could not start {command_line}: {str(e)}")
            raise SimctlError(f"Command failed: {command_line}\n{str(e)}") from e

        stdout_b, stderr_b = await process.communicate()
        result = CommandResult(
            args=argv,
            returncode=process.returncode,
            stdout=stdout_b.decode("utf-8", errors="replace"),
            stderr=stderr_b.decode("utf-8", errors="replace"),
        )
        logger.debug(
            f"{command_line} exited {result.returncode}; "
            f"stdout={truncate_large_value(result.stdout)!r}"
        )

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip()
            message = f"Command failed: {command_line}"
            if detail:
                message = f"{message}\n{detail}"
            logger.error(f"{command_line} exited with status {result.returncode}")
            raise SimctlError(message, result=result)

        return result

    async def list_devices(self) -> str:
        """Return the raw text of ``simctl list devices``."""
        result = await self.run(*SIMCTL_COMMANDS["LIST_DEVICES"])
        return result.stdout

    async def boot(self, device_id: str) -> CommandResult:
        return await self.run(*SIMCTL_COMMANDS["BOOT"], device_id)

    async def screenshot(self, device_id: str, path: str) -> CommandResult:
        """Write a PNG screenshot of ``device_id`` to ``path``."""
        args = [part.format(device_id=device_id, path=path) for part in SIMCTL_COMMANDS["SCREENSHOT"]]
        return await self.run(*args)
