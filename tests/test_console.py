#!/usr/bin/env python3
"""
Tests for the prompt_toolkit console and command completion.
"""

import io

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from replshell.cli.completion import HELP_DESCRIPTION, CommandCompleter
from replshell.cli.console import Console
from replshell.commands import CommandDispatcher


class Stream(io.StringIO):
    """StringIO with prompt_toolkit's CRLF line endings normalised."""

    def getvalue(self):
        return super().getvalue().replace("\r\n", "\n")


@pytest.fixture
def stream():
    return Stream()


@pytest.fixture
def plain_console(stream):
    return Console(color=False, file=stream)


# ============================================================================
# Output
# ============================================================================

class TestConsoleOutput:
    """Tests for writing to a non-terminal stream."""

    def test_write_has_no_newline(self, plain_console, stream):
        plain_console.write("abc")
        plain_console.write("def")
        assert stream.getvalue() == "abcdef"

    def test_write_line(self, plain_console, stream):
        plain_console.write_line("hello")
        plain_console.write_line()
        assert stream.getvalue() == "hello\n\n"

    def test_styled_text_keeps_content(self, stream):
        console = Console(color=True, file=stream)
        console.write("Error: ", style="error")
        console.write_line("name", style="command")
        assert stream.getvalue() == "Error: name\n"

    def test_write_warning(self, plain_console, stream):
        plain_console.write_warning("careful")
        assert stream.getvalue() == "careful\n"

    def test_write_error_text(self, plain_console, stream):
        plain_console.write_error("\nInvalid number of arguments.\n")
        assert stream.getvalue() == "\nInvalid number of arguments.\n\n"

    def test_write_error_exception(self, plain_console, stream):
        try:
            raise ValueError("bad value")
        except ValueError as e:
            plain_console.write_error(e)

        output = stream.getvalue()
        assert output.startswith("[ValueError] bad value\n")
        assert "test_write_error_exception" in output

    def test_write_error_exception_without_traceback(self, plain_console, stream):
        plain_console.write_error(RuntimeError("plain"))
        assert stream.getvalue() == "[RuntimeError] plain\n"


# ============================================================================
# Terminal control
# ============================================================================

class TestConsoleTerminal:
    """Tests for title, clearing and input."""

    def test_title(self, plain_console):
        with patch("replshell.cli.console.set_title") as set_title:
            plain_console.title = "App 1.0"
        set_title.assert_called_once_with("App 1.0")
        assert plain_console.title == "App 1.0"

    def test_restore_title(self, plain_console):
        with patch("replshell.cli.console.set_title"):
            plain_console.title = "App 1.0"
        with patch("replshell.cli.console.clear_title") as clear_title:
            plain_console.restore_title()
        clear_title.assert_called_once()
        assert plain_console.title == ""

    def test_clear(self, plain_console):
        with patch("replshell.cli.console.clear_screen") as clear_screen:
            plain_console.clear()
        clear_screen.assert_called_once()

    @pytest.mark.asyncio
    async def test_read_line(self, plain_console):
        session = MagicMock()
        session.prompt_async = AsyncMock(return_value="hello world")
        plain_console._session = session

        assert await plain_console.read_line(">> ") == "hello world"
        assert session.prompt_async.await_args.args[0] == ">> "

    @pytest.mark.asyncio
    async def test_read_line_end_of_input(self, plain_console):
        session = MagicMock()
        session.prompt_async = AsyncMock(side_effect=EOFError)
        plain_console._session = session

        assert await plain_console.read_line(">> ") is None

    @pytest.mark.asyncio
    async def test_read_line_interrupt_discards_input(self, plain_console):
        session = MagicMock()
        session.prompt_async = AsyncMock(side_effect=KeyboardInterrupt)
        plain_console._session = session

        assert await plain_console.read_line(">> ") == ""


# ============================================================================
# Completion
# ============================================================================

def complete(completer, text):
    return [c.text for c in completer.get_completions(Document(text), CompleteEvent())]


class TestCommandCompleter:
    """Tests for first-word command completion."""

    @pytest.fixture
    def completer(self, context):
        return CommandCompleter.from_dispatcher(CommandDispatcher(context))

    def test_prefix(self, completer):
        assert complete(completer, "he") == ["help", "hello"]

    def test_all_commands_on_empty_input(self, completer):
        assert complete(completer, "") == ["help", "?", "cls", "exit", "hello"]

    def test_no_completion_for_arguments(self, completer):
        assert complete(completer, "hello wor") == []

    def test_leading_spaces(self, completer):
        assert complete(completer, "  cl") == ["cls"]

    def test_meta_is_first_description_line(self, completer):
        completions = list(completer.get_completions(Document("?"), CompleteEvent()))
        assert len(completions) == 1
        assert completions[0].display_meta_text == HELP_DESCRIPTION
