"""Shared logging initialization.

Usage:
    from core.logging_setup import configure_logging
    configure_logging("DEBUG")

Modules log through `logging.getLogger(__name__)`; this only installs the
Rich console handler on the root logger.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(message)s"  # rich handler already adds time & level


def configure_logging(level: int | str = logging.INFO) -> None:
    """Idempotently configure the root logger with a Rich handler on stderr."""

    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, RichHandler):
            handler.setLevel(level)
            return

    handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
