#!/usr/bin/env python3
"""
CLI entry point for the interactive shell (replshell command).
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from replshell import __version__
from replshell.cli.completion import CommandCompleter
from replshell.cli.console import Console
from replshell.cli.host import Host
from replshell.cli.shell import ShellRunner
from replshell.commands import CommandDispatcher, ShellContext
from replshell.config import CONFIG_DIR, ShellConfig, get_config_manager
from replshell.logging import close_logging, configure_logging

logger = logging.getLogger(__name__)

HISTORY_FILE = CONFIG_DIR / "history"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="replshell",
        description="Interactive command shell with pluggable commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Type 'help' or '?' at the prompt for the available commands.\n"
            "Arguments containing spaces must be double-quoted."
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--environment", help="Environment name (selects config.<env>.json)")
    parser.add_argument("--prompt", help="Initial prompt text")
    parser.add_argument(
        "--command-module",
        action="append",
        default=[],
        metavar="MODULE",
        help="Extra module or path to load commands from (repeatable)",
    )
    parser.add_argument("--commands-dir", help="Directory of plugin command packages")
    parser.add_argument(
        "--no-strict",
        action="store_true",
        help="Scan external modules even without the __repl_commands__ marker",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output")
    parser.add_argument("--debug", action="store_true", help="Debug logging, mirrored to stderr")
    return parser


def load_config(args: argparse.Namespace) -> ShellConfig:
    """Merge configuration files, environment and command line options."""
    overrides = {
        "environment": args.environment,
        "prompt": args.prompt,
        "commands_dir": args.commands_dir,
        "strict_discovery": False if args.no_strict else None,
        "color": False if args.no_color else None,
    }
    config = get_config_manager().load(overrides=overrides)
    config.command_modules.extend(args.command_module)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the replshell CLI."""
    args = build_parser().parse_args(argv)
    config = load_config(args)

    configure_logging(
        logging.DEBUG if args.debug else config.log_level,
        config.log_file,
        console=args.debug,
    )
    logger.debug(f"Starting {config.app_name} {config.app_version} ({config.environment})")

    console = Console(color=config.color, history_file=HISTORY_FILE)
    host = Host()
    context = ShellContext(console=console, config=config, host=host)

    dispatcher = CommandDispatcher(context)
    console.completer = CommandCompleter.from_dispatcher(dispatcher)
    runner = ShellRunner(context, dispatcher)

    async def run() -> None:
        host.install_signal_handlers()
        try:
            await runner.run()
        finally:
            host.remove_signal_handlers()

    console.title = config.console_title
    try:
        asyncio.run(run())
    finally:
        console.restore_title()
        logger.debug(f"{config.app_name} stopped")
        close_logging()

    return 0


if __name__ == "__main__":
    sys.exit(main())
