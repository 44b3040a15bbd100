"""Logging setup.

Library modules log through ``logging.getLogger(__name__)``; pipeline entry
points also take an optional ``logger`` so callers (and tests) can redirect
events without touching global state.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_ROOT_LOGGER = "pagescan"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single stderr handler to the ``pagescan`` logger.

    Calling this again only updates the level.
    """
    root = logging.getLogger(_ROOT_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)

    if not any(getattr(h, "_pagescan", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._pagescan = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root


def get_logger(name: str, logger: logging.Logger | None = None) -> logging.Logger:
    """Return *logger* if one was injected, else the module logger *name*."""
    return logger if logger is not None else logging.getLogger(name)
