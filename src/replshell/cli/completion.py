"""Tab completion of command names."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from prompt_toolkit.completion import Completer, Completion

if TYPE_CHECKING:
    from replshell.commands import CommandDispatcher

HELP_DESCRIPTION = "Lists the available commands."


class CommandCompleter(Completer):
    """Completes the first word of the line against the registered commands."""

    def __init__(self, commands: Callable[[], dict[str, str]]):
        self._commands = commands

    @classmethod
    def from_dispatcher(cls, dispatcher: "CommandDispatcher") -> "CommandCompleter":
        def commands() -> dict[str, str]:
            result = {"help": HELP_DESCRIPTION, "?": HELP_DESCRIPTION}
            for handler in dispatcher.commands:
                result[handler.name] = handler.description.splitlines()[0] if handler.description else ""
            return result
        return cls(commands)

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor.lstrip()

        # Arguments are not completed
        if any(ch.isspace() for ch in text):
            return

        for name, description in self._commands().items():
            if name.startswith(text):
                yield Completion(
                    name,
                    start_position=-len(text),
                    display_meta=description,
                )
