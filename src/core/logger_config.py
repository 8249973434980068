from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_FORMAT = "%(message)s"


def setup_logger(verbose: bool = False, *, console: Console | None = None) -> logging.Logger:
    """Configure the root logger once; stdout stays free for piping."""

    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger()
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    # httpx/httpcore are chatty at DEBUG; keep them at INFO even in verbose mode.
    logging.getLogger("httpcore").setLevel(logging.INFO)
    logging.getLogger("httpx").setLevel(logging.INFO if verbose else logging.WARNING)

    return logger
