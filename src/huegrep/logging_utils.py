"""Logging setup for the huegrep command line."""

from __future__ import annotations

import logging
import sys


def setup_logging(*, debug: bool = False) -> logging.Logger:
    """Configure the package logger to write to stderr.

    Only warnings are shown unless debug is set. Existing handlers are
    replaced, so calling it again rebinds to the current stderr.
    """
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger("huegrep")
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    return logger
