"""Prompt command - change the shell prompt at runtime."""
from __future__ import annotations

from replshell.commands.base import CommandHandler

__repl_commands__ = True

INVALID_ARGUMENTS = "\nInvalid number of arguments.  Please provide a prompt.\n"


class ChangePromptCommand(CommandHandler):
    name = "prompt"
    description = (
        "Changes the prompt displayed in the console.\n"
        "\n"
        "    prompt <newPrompt>\n"
        "\n"
        "    newPrompt: The new prompt to be displayed."
    )

    async def handle(self, args, cancel):
        if len(args) != 1:
            self.console.write_error(INVALID_ARGUMENTS)
            return

        self.config.prompt = f"{args[0].strip()} "
