"""Process host: shutdown signals and process exit."""
from __future__ import annotations

import asyncio
import logging
import signal
import sys
from typing import NoReturn

logger = logging.getLogger(__name__)

SHUTDOWN_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class Host:
    """Owns the cancellation event shared by the shell loop and commands."""

    def __init__(self):
        self.cancel = asyncio.Event()
        self._signals: list[signal.Signals] = []

    def request_cancel(self) -> None:
        logger.debug("Cancellation requested")
        self.cancel.set()

    def install_signal_handlers(self) -> None:
        """Set the cancel event on SIGINT and SIGTERM. Must run inside the event loop."""
        loop = asyncio.get_running_loop()
        for sig in SHUTDOWN_SIGNALS:
            try:
                loop.add_signal_handler(sig, self.request_cancel)
            except (NotImplementedError, RuntimeError):
                # Not supported by the Windows event loop
                logger.debug(f"Signal handler for {sig.name} not supported on this platform")
                continue
            self._signals.append(sig)

    def remove_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        while self._signals:
            loop.remove_signal_handler(self._signals.pop())

    def exit(self, code: int = 0) -> NoReturn:
        logger.debug(f"Exiting with code {code}")
        sys.exit(code)
