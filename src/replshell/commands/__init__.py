"""
Command system for the shell.

Commands are CommandHandler subclasses discovered by the CommandLoader
from the built-in package, from configured plugin modules and from the
plugin directory (~/.replshell/commands/).
"""

from __future__ import annotations

from replshell.commands.base import CommandHandler, ShellContext, invoke_command
from replshell.commands.registry import CommandRegistry
from replshell.commands.loader import CommandLoader, PLUGIN_MARKER
from replshell.commands.dispatcher import CommandDispatcher, HELP_COMMANDS

__all__ = [
    "CommandDispatcher",
    "CommandHandler",
    "CommandLoader",
    "CommandRegistry",
    "HELP_COMMANDS",
    "PLUGIN_MARKER",
    "ShellContext",
    "invoke_command",
]
