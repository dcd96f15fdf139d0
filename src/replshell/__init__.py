"""
replshell - Extensible interactive command shell

Reads a line, tokenizes it, resolves the first token to a registered
command and runs it with the remaining tokens as arguments. Commands are
discovered from the built-in set and from external plugin modules.

Example usage:
    from replshell import CommandHandler

    class GreetCommand(CommandHandler):
        name = "greet"
        description = "Greets everybody."

        async def handle(self, args, cancel):
            self.console.write_line("Hi all")

    # Mark the module so the loader picks it up
    __repl_commands__ = True
"""

__version__ = "0.1.0"

from replshell.commands import (
    CommandDispatcher,
    CommandHandler,
    CommandLoader,
    CommandRegistry,
    ShellContext,
    invoke_command,
)
from replshell.core import (
    CommandLoadError,
    RegistryFrozenError,
    ReplShellError,
    tokenize,
)

__all__ = [
    "__version__",
    "CommandDispatcher",
    "CommandHandler",
    "CommandLoader",
    "CommandRegistry",
    "ShellContext",
    "invoke_command",
    "CommandLoadError",
    "RegistryFrozenError",
    "ReplShellError",
    "tokenize",
]
