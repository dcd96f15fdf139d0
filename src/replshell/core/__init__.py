"""Core building blocks shared by the command system and the shell loop."""

from replshell.core.exceptions import (
    CommandLoadError,
    RegistryFrozenError,
    ReplShellError,
)
from replshell.core.tokenizer import tokenize

__all__ = [
    "CommandLoadError",
    "RegistryFrozenError",
    "ReplShellError",
    "tokenize",
]
