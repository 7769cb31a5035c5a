# todo/logging_setup.py

from __future__ import annotations

import logging
import sys


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Configure the `todo` logger hierarchy with a single stderr handler.

    Interactive output (tables, panels) goes to stdout through Rich,
    so logs stay on stderr and are quiet unless --verbose is given.
    Safe to call more than once: previous handlers are replaced.
    """
    logger = logging.getLogger("todo")
    logger.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    logger.propagate = False
