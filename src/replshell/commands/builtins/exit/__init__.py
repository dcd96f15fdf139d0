"""Exit command - leave the shell."""
from __future__ import annotations

from replshell.commands.base import CommandHandler

__repl_commands__ = True


class ExitCommand(CommandHandler):
    name = "exit"

    @property
    def description(self) -> str:
        return f"Exits {self.config.app_name}."

    async def handle(self, args, cancel):
        """Say goodbye and terminate the process with exit code 0."""
        self.console.write_line("Bye...")
        self.context.host.exit(0)
