#!/usr/bin/env python3
"""
Tests for the built-in commands and the prompt plugin.
"""

import logging

import pytest

from replshell.commands import invoke_command
from replshell.commands.builtins.cls import ClearConsoleCommand
from replshell.commands.builtins.exit import ExitCommand
from replshell.commands.builtins.hello import HelloWorldCommand
from replshell.contrib.prompt import INVALID_ARGUMENTS, ChangePromptCommand


class TestClearConsoleCommand:
    """Tests for cls."""

    def test_metadata(self, context):
        cmd = ClearConsoleCommand(context)
        assert cmd.name == "cls"
        assert cmd.description == "Clears the Console Screen."

    @pytest.mark.asyncio
    async def test_clears_console(self, context, console, host):
        await ClearConsoleCommand(context).handle(["ignored"], host.cancel)
        assert console.cleared == 1
        assert console.output == []

    @pytest.mark.asyncio
    async def test_ignores_cancellation(self, context, console, host):
        host.cancel.set()
        await ClearConsoleCommand(context).handle([], host.cancel)
        assert console.cleared == 1


class TestExitCommand:
    """Tests for exit."""

    def test_description_uses_app_name(self, context):
        assert ExitCommand(context).description == "Exits TestApp."

    @pytest.mark.asyncio
    async def test_says_bye_and_exits_with_zero(self, context, console, host):
        await ExitCommand(context).handle(["x", "y"], host.cancel)
        assert host.exit_codes == [0]
        assert console.written_lines() == ["Bye..."]


class TestHelloWorldCommand:
    """Tests for hello."""

    def test_metadata(self, context):
        cmd = HelloWorldCommand(context)
        assert cmd.name == "hello"
        assert cmd.description == "Prints a nice greeting."

    @pytest.mark.asyncio
    async def test_greets_arguments(self, context, console, host):
        await HelloWorldCommand(context).handle(["a", "b"], host.cancel)
        assert console.written_lines() == ["Hello: a, b"]

    @pytest.mark.asyncio
    async def test_no_arguments(self, context, console, host):
        await HelloWorldCommand(context).handle([], host.cancel)
        assert console.written_lines() == ["Hello: "]

    @pytest.mark.asyncio
    async def test_logs_response(self, context, host, caplog):
        with caplog.at_level(logging.DEBUG):
            await invoke_command(HelloWorldCommand(context), ["x"], host.cancel)
        messages = [r.getMessage() for r in caplog.records]
        assert "Handle hello command" in messages
        assert "Hello responded with greeting message." in messages


class TestChangePromptCommand:
    """Tests for the prompt plugin command."""

    def test_metadata(self, context):
        cmd = ChangePromptCommand(context)
        assert cmd.name == "prompt"
        assert cmd.description.splitlines()[0] == "Changes the prompt displayed in the console."
        assert "prompt <newPrompt>" in cmd.description

    @pytest.mark.asyncio
    async def test_sets_prompt(self, context, config, host):
        await ChangePromptCommand(context).handle(["x"], host.cancel)
        assert config.prompt == "x "

    @pytest.mark.asyncio
    async def test_trims_prompt(self, context, config, host):
        await ChangePromptCommand(context).handle(["  my shell>  "], host.cancel)
        assert config.prompt == "my shell> "

    @pytest.mark.asyncio
    @pytest.mark.parametrize("args", [[], ["a", "b"], ["a", "b", "c"]])
    async def test_wrong_argument_count(self, context, config, console, host, args):
        original = config.prompt
        await ChangePromptCommand(context).handle(args, host.cancel)

        assert config.prompt == original
        assert console.output == [("line", INVALID_ARGUMENTS, "error")]
        assert INVALID_ARGUMENTS == "\nInvalid number of arguments.  Please provide a prompt.\n"
