"""Library logging setup.

Every module logs through a child of the ``monadcase`` logger. The library
adds no handlers by default; call ``configure_logging()`` once at startup to
get stderr output at the configured level.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import get_settings

ROOT_LOGGER = "monadcase"

_HANDLER_NAME = "monadcase-stream"


def get_logger(name: str) -> logging.Logger:
    """Logger under the library namespace, e.g. get_logger("monads.try")."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(level: str | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Attach a stream handler to the library logger (idempotent).

    Args:
        level: Level name; defaults to ``settings.log_level``
        stream: Output stream; defaults to stderr
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(level.upper() if level else get_settings().log_level)
    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    root.addHandler(handler)
    return root
