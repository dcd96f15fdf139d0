"""
Command handler contract.

A command is a class with a unique ``name``, a ``description`` for the
help listing, and an async ``handle(args, cancel)`` coroutine. Handlers are
constructed by the loader with a ShellContext and always run through
``invoke_command``.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from replshell.cli.console import Console
    from replshell.cli.host import Host
    from replshell.config import ShellConfig


@dataclass
class ShellContext:
    """Collaborators handed to every command handler."""

    console: "Console"
    config: "ShellConfig"
    host: "Host"


class CommandHandler(ABC):
    """Base class for all commands."""

    def __init__(self, context: ShellContext):
        self.context = context
        self.logger = logging.getLogger(f"{type(self).__module__}.{type(self).__name__}")

    @property
    def console(self) -> "Console":
        return self.context.console

    @property
    def config(self) -> "ShellConfig":
        return self.context.config

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name as typed at the prompt (case-sensitive)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Help text, may span several lines."""

    @abstractmethod
    async def handle(self, args: Sequence[str], cancel: asyncio.Event) -> Any:
        """Run the command.

        Args:
            args: Arguments after the command name.
            cancel: Set when the shell is shutting down; polling it is optional.
        """

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


async def invoke_command(handler: CommandHandler, args: Sequence[str], cancel: asyncio.Event) -> Any:
    """Log and run a handler; its result and exceptions pass through unchanged."""
    handler.logger.debug(f"Handle {handler.name} command")
    return await handler.handle(args, cancel)
