"""Logging configuration for replshell.

Log records go to a file so they don't interleave with the interactive
prompt. ``--debug`` additionally mirrors them to stderr.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

ROOT_LOGGER = "replshell"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level state
_handlers: list[logging.Handler] = []


def configure_logging(
    level: int | str = logging.WARNING,
    log_file: Optional[str | Path] = None,
    console: bool = False,
) -> Optional[Path]:
    """Install handlers on the ``replshell`` logger.

    Args:
        level: Logging level (name or number).
        log_file: File to append to; None disables file logging.
        console: Also log to stderr.

    Returns:
        Path to the log file, or None if file logging is disabled.
    """
    close_logging()

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger(ROOT_LOGGER)

    log_path = None
    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        _handlers.append(file_handler)

    if console:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        _handlers.append(stream_handler)

    for handler in _handlers:
        root.addHandler(handler)
    root.setLevel(level)

    if not _handlers:
        # Keep warnings from reaching the prompt via logging.lastResort
        root.addHandler(logging.NullHandler())

    return log_path


def close_logging() -> None:
    """Remove and close handlers installed by configure_logging."""
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if handler in _handlers or isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    while _handlers:
        _handlers.pop().close()
    root.setLevel(logging.NOTSET)
