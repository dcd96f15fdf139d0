"""
Console I/O for the shell, built on prompt_toolkit.

Provides line input with persistent history, plain and styled output,
screen clearing and the terminal title.
"""

from __future__ import annotations

import traceback
from pathlib import Path
from typing import Optional, TextIO, Union

from prompt_toolkit import PromptSession, print_formatted_text
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.completion import Completer
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.history import FileHistory, History, InMemoryHistory
from prompt_toolkit.shortcuts import clear as clear_screen
from prompt_toolkit.shortcuts import clear_title, set_title
from prompt_toolkit.styles import Style


def get_style() -> Style:
    """Get the console style."""
    return Style.from_dict({
        "prompt": "ansicyan bold",
        "error": "#b22222",
        "warning": "ansiyellow",
        "command": "#7b68ee",
    })


class Console:
    """Terminal collaborator used by the shell loop and by commands.

    Args:
        color: Emit styled output; plain text otherwise.
        history_file: Persist input history here (in-memory if None).
        file: Write output to this stream instead of stdout.
    """

    def __init__(
        self,
        color: bool = True,
        history_file: Optional[Path] = None,
        file: Optional[TextIO] = None,
        completer: Optional[Completer] = None,
    ):
        self.color = color
        self.completer = completer
        self._history_file = history_file
        self._file = file
        self._style = get_style()
        self._session: Optional[PromptSession] = None
        self._title = ""

    def _history(self) -> History:
        if self._history_file is None:
            return InMemoryHistory()
        self._history_file.parent.mkdir(parents=True, exist_ok=True)
        return FileHistory(str(self._history_file))

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(
                history=self._history(),
                auto_suggest=AutoSuggestFromHistory(),
                completer=self.completer,
                style=self._style,
                complete_while_typing=True,
                enable_history_search=True,
            )
        return self._session

    async def read_line(self, prompt: str = "") -> Optional[str]:
        """Read one line; returns None at end of input (Ctrl+D)."""
        message = FormattedText([("class:prompt", prompt)]) if self.color else prompt
        try:
            return await self.session.prompt_async(message, completer=self.completer)
        except KeyboardInterrupt:
            # Ctrl+C discards the current input
            return ""
        except EOFError:
            return None

    def _print(self, text: str, style: Optional[str], end: str) -> None:
        if self.color and style:
            value: Union[str, FormattedText] = FormattedText([(f"class:{style}", text)])
        else:
            value = text
        print_formatted_text(value, end=end, style=self._style, file=self._file, flush=True)

    def write(self, text: str, style: Optional[str] = None) -> None:
        self._print(text, style, end="")

    def write_line(self, text: str = "", style: Optional[str] = None) -> None:
        self._print(text, style, end="\n")

    def write_warning(self, text: str) -> None:
        self.write_line(text, style="warning")

    def write_error(self, error: Union[str, BaseException]) -> None:
        """Write an error message, or an exception with its traceback."""
        if isinstance(error, BaseException):
            self.write_line(f"[{type(error).__name__}] {error}", style="error")
            if error.__traceback__ is not None:
                tb = "".join(traceback.format_tb(error.__traceback__))
                self.write_line(f"{tb}", style="error")
            return
        self.write_line(error, style="error")

    def clear(self) -> None:
        clear_screen()

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        set_title(value)

    def restore_title(self) -> None:
        self._title = ""
        clear_title()
