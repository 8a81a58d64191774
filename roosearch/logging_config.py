"""
Centralized logging configuration for the RooSearch CLI and MCP server.

Log records go to stderr so the MCP stdio channel on stdout stays clean.
"""

from __future__ import annotations

import logging
from typing import Optional

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level_str: str, *, fmt: Optional[str] = None) -> None:
    """Configure root logging from a level name. Safe to call more than once.

    Unknown names fall back to WARNING.
    """
    level_str = (level_str or "WARNING").upper()
    level = LEVEL_MAP.get(level_str, logging.WARNING)

    # Reset handlers so repeated calls (tests, nested CLI invocations) reconfigure cleanly.
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    logging.basicConfig(
        level=level,
        format=fmt or "%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger(__name__).debug(
        "configure_logging called with level_str=%s -> level=%s", level_str, logging.getLevelName(level)
    )
