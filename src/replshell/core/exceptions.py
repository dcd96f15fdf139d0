"""
Exception classes for the command system.
"""
from __future__ import annotations


class ReplShellError(Exception):
    """Base exception for replshell errors."""


class CommandLoadError(ReplShellError):
    """A command source could not be loaded or scanned."""

    def __init__(self, source: str, message: str):
        super().__init__(f"{source}: {message}")
        self.source = source


class RegistryFrozenError(ReplShellError):
    """Registration attempted after the command table was handed to the dispatcher."""
