"""
CLI module for the replshell package.

Provides the console, the process host, the interactive loop and the
``replshell`` entry point.
"""

from replshell.cli.console import Console
from replshell.cli.host import Host
from replshell.cli.shell import ShellRunner

__all__ = [
    "Console",
    "Host",
    "ShellRunner",
]
