"""Logging setup for certparser.

Command line tools call ``setup_logging()`` once at startup; library modules
only ask for a named logger and never configure handlers themselves.
"""

from __future__ import annotations

import logging
import sys

from certparser.common.config import CONFIG


def setup_logging(
    level: int | str | None = None,
    fmt: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
) -> None:
    """Configure the root logger.

    ``level`` defaults to ``CONFIG['log_level']`` and accepts either an
    integer constant or a level name such as ``"DEBUG"``.
    """
    if level is None:
        level = CONFIG['log_level']
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(
        level=level,
        format=fmt,
        datefmt=datefmt,
        stream=sys.stdout,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
