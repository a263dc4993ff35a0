"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper returning loggers under the ``passforge`` namespace.
    - Switch the package between quiet and verbose (debug) output.

Notes/Edge cases:
    - Configuration is idempotent: calling :func:`configure_logging` again
      replaces the package handler instead of adding a second one.
    - Generated passwords and seed secrets must never be passed to a logger.

Dependencies:
    - Python ``logging`` module.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]

ROOT_LOGGER = "passforge"

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the package root logger.

    Module names already under ``passforge`` are used as is; anything else is
    nested below it.
    """

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` level, otherwise only warnings are shown.
    The handler is created on each call so it writes to the current
    ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_passforge", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    handler._passforge = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    root.propagate = False
    return root
