"""
Command dispatcher.

Owns the command table and routes a command name to help, to the
unknown-command message, or to the matching handler.
"""

from __future__ import annotations

import asyncio
import logging
import textwrap
from typing import Any, Optional, Sequence

from replshell.commands.base import CommandHandler, ShellContext, invoke_command
from replshell.commands.loader import CommandLoader

logger = logging.getLogger(__name__)

# Intercepted before table lookup
HELP_COMMANDS = frozenset({"help", "?"})


class CommandDispatcher:
    """Routes commands to their handlers."""

    def __init__(self, context: ShellContext, loader: Optional[CommandLoader] = None):
        self.context = context
        self.console = context.console

        loader = loader or CommandLoader(context)
        self._commands = loader.load_all()
        self._commands.freeze()

        title = f"{context.config.app_name} - Command Line Help"
        self._help_header = f"\n{title}\n{'-' * len(title)}\n"

    @property
    def commands(self) -> list[CommandHandler]:
        """Registered handlers in registration order."""
        return self._commands.all_commands()

    def command_names(self) -> list[str]:
        return self._commands.names()

    async def invoke(self, command: str, args: Sequence[str], cancel: asyncio.Event) -> Any:
        """Dispatch one command.

        Unknown commands are reported on the console and return None; errors
        raised by a handler propagate to the caller.
        """
        if command in HELP_COMMANDS:
            self.print_help()
            return None

        handler = self._commands.get(command)
        if handler is None:
            self.print_unknown_command(command)
            return None

        return await invoke_command(handler, args, cancel)

    def print_help(self) -> None:
        self.console.write_line(self._help_header)

        for handler in self._commands:
            self.console.write_line(handler.name)
            self.console.write_line(f"{textwrap.indent(handler.description, '  ')}\n")

    def print_unknown_command(self, command: str) -> None:
        logger.debug(f"Unknown command '{command}'")
        self.console.write("\nError: Unknown Command '", style="error")
        self.console.write(command, style="command")
        self.console.write_line("'\n", style="error")
