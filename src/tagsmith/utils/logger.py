"""Loggers under the ``tagsmith`` namespace.

tagsmith only logs at DEBUG: registry changes and child encoder decisions
(stringified fallbacks, rejected values). No handler is installed; to see
the records, configure the ``tagsmith`` logger in the application.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "tagsmith"


def get_logger(name: str) -> logging.Logger:
    """Logger for ``name``, nested under ``tagsmith``.

    Module ``__name__`` values inside the package are used unchanged.
    """
    if name != ROOT_LOGGER and not name.startswith(f"{ROOT_LOGGER}."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
