"""Cls command - clear the console screen."""
from __future__ import annotations

from replshell.commands.base import CommandHandler

__repl_commands__ = True


class ClearConsoleCommand(CommandHandler):
    name = "cls"
    description = "Clears the Console Screen."

    async def handle(self, args, cancel):
        self.console.clear()
