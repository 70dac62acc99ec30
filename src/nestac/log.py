# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Logging helpers for nestac.

All loggers live under the ``nestac`` namespace. As a library, nestac only
attaches a ``NullHandler``; applications that want output call
:func:`setup_root_logger` (or configure ``logging`` themselves).
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "nestac"

_ROOT_LOGGER_CONFIGURED = False

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: str | None = None,
    handler: logging.Handler | None = None,
) -> None:
    """Attach a single handler to the ``nestac`` logger.

    Calling it more than once has no effect.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stderr StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger inheriting from the ``nestac`` logger.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``nestac`` logger (children inherit it)."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
