"""Process-wide logging setup: one stdout handler with a shared format."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = (
    "%(asctime)s - [%(levelname)s] - %(name)s - "
    "(%(filename)s).%(funcName)s(%(lineno)d) - %(message)s"
)


def setup_logging(level: int | str = logging.INFO) -> None:
    """Route all loggers to stdout. httpx is held at WARNING: its request lines carry the bot token."""
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logging.basicConfig(level=level, handlers=[stdout_handler], force=True)

    logging.getLogger("httpx").setLevel(logging.WARNING)
