"""
Shared fixtures: a recording console, a recording host and a ready-made shell context.
"""

import asyncio

import pytest

from replshell.commands import ShellContext
from replshell.config import ShellConfig


class FakeConsole:
    """Console double that records output and replays scripted input."""

    def __init__(self, lines=None):
        self.lines = list(lines or [])
        self.prompts = []
        self.output = []  # (kind, text, style)
        self.cleared = 0
        self.title = ""

    async def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text, style=None):
        self.output.append(("write", text, style))

    def write_line(self, text="", style=None):
        self.output.append(("line", text, style))

    def write_warning(self, text):
        self.output.append(("line", text, "warning"))

    def write_error(self, error):
        if isinstance(error, BaseException):
            error = f"[{type(error).__name__}] {error}"
        self.output.append(("line", error, "error"))

    def clear(self):
        self.cleared += 1

    def written_lines(self):
        return [text for kind, text, _ in self.output if kind == "line"]

    @property
    def text(self):
        return "".join(text + ("\n" if kind == "line" else "") for kind, text, _ in self.output)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def config():
    """Config without external sources so only built-ins load."""
    return ShellConfig(
        app_name="TestApp",
        app_version="1.2.3",
        command_modules=[],
        commands_dir=None,
    )


class FakeHost:
    """Host double that records exit codes instead of leaving the process.

    exit() sets the cancel event so the shell loop stops at its next check.
    """

    def __init__(self):
        self.cancel = asyncio.Event()
        self.exit_codes = []

    def request_cancel(self):
        self.cancel.set()

    def exit(self, code=0):
        self.exit_codes.append(code)
        self.cancel.set()


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def context(console, config, host):
    return ShellContext(console=console, config=config, host=host)
