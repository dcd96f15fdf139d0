"""Hello command - print a greeting with the given arguments."""
from __future__ import annotations

from replshell.commands.base import CommandHandler

__repl_commands__ = True


class HelloWorldCommand(CommandHandler):
    name = "hello"
    description = "Prints a nice greeting."

    async def handle(self, args, cancel):
        self.console.write_line(f"Hello: {', '.join(args)}")

        self.logger.debug("Hello responded with greeting message.")
