"""
The interactive read-tokenize-dispatch loop.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from replshell.core.tokenizer import tokenize

if TYPE_CHECKING:
    from replshell.commands import CommandDispatcher, ShellContext

logger = logging.getLogger(__name__)


class ShellRunner:
    """Runs the shell until end of input, ``exit`` or cancellation.

    Commands run one at a time in input order; each dispatch is awaited
    before the next line is read.
    """

    def __init__(self, context: "ShellContext", dispatcher: "CommandDispatcher"):
        self.context = context
        self.console = context.console
        self.config = context.config
        self.dispatcher = dispatcher

    async def run(self) -> None:
        cancel = self.context.host.cancel
        logger.debug("ShellRunner started")

        self.console.write_line(f"{self.config.app_name} Version {self.config.app_version}\n")

        try:
            while not cancel.is_set():
                # Prompt is re-read every time, commands may change it
                line = await self._read_line(cancel)

                if cancel.is_set():
                    break

                if line is None:
                    self.console.write_line()
                    await self.dispatcher.invoke("exit", [], cancel)
                    break

                tokens = tokenize(line)
                if not tokens:
                    continue

                await self.execute(tokens[0], tokens[1:], cancel)
        finally:
            logger.debug("ShellRunner stopped")

    async def _read_line(self, cancel: asyncio.Event) -> Optional[str]:
        """Read a line, giving up early if cancellation is requested."""
        read = asyncio.ensure_future(self.console.read_line(self.config.prompt))
        stop = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait({read, stop}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            stop.cancel()
            if not read.done():
                logger.debug("Attempting to stop ShellRunner")
                read.cancel()
        if read.cancelled():
            return None
        return read.result()

    async def execute(self, command: str, args: list[str], cancel: asyncio.Event) -> None:
        """Dispatch one command; failures are reported and the loop carries on."""
        try:
            await self.dispatcher.invoke(command, args, cancel)
        except KeyboardInterrupt:
            # Only reached where SIGINT is not routed to the cancel event
            self.console.write_line("\n[Interrupted]")
        except Exception as e:
            logger.exception(f"Command '{command}' failed")
            self.console.write_error(e)
