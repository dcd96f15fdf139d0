"""
Command table for the shell.

Maps command names to handler instances. A later registration under an
existing name replaces the earlier handler (last registration wins) but
keeps its position in the listing order.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional

from replshell.core.exceptions import RegistryFrozenError

if TYPE_CHECKING:
    from replshell.commands.base import CommandHandler

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Registry for shell commands."""

    def __init__(self):
        self._commands: dict[str, CommandHandler] = {}
        self._frozen = False

    def register(self, handler: "CommandHandler") -> "CommandHandler":
        """Add a handler under its name.

        Raises:
            ValueError: If the handler's name is empty.
            RegistryFrozenError: If the registry was frozen.
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{handler.name}': registry is frozen")

        name = handler.name
        if not isinstance(name, str) or not name:
            raise ValueError(f"{type(handler).__name__} has an empty command name")

        previous = self._commands.get(name)
        if previous is not None and previous is not handler:
            logger.warning(
                f"Command '{name}' from {type(handler).__qualname__} replaces "
                f"{type(previous).__qualname__}"
            )

        self._commands[name] = handler
        logger.debug(f"Handler '{type(handler).__module__}.{type(handler).__qualname__}' for command '{name}' registered")
        return handler

    def get(self, name: str) -> Optional["CommandHandler"]:
        """Get a command by exact name."""
        return self._commands.get(name)

    def names(self) -> list[str]:
        """Command names in registration order."""
        return list(self._commands)

    def all_commands(self) -> list["CommandHandler"]:
        """All handlers in registration order."""
        return list(self._commands.values())

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator["CommandHandler"]:
        return iter(list(self._commands.values()))

    def __len__(self) -> int:
        return len(self._commands)
