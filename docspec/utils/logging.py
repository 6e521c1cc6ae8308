"""Logging helpers for docspec.

Every logger handed out by :func:`get_logger` lives under the ``docspec``
namespace, so applications configure the library's logging in one place.
"""

from __future__ import annotations

import logging
from typing import Any

__all__ = ("get_logger", "log_with_context")

ROOT_LOGGER_NAME = "docspec"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the docspec namespace.

    Args:
        name: Logger name. If not provided, returns the root docspec logger.

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)

    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **extra_fields: Any) -> None:
    """Log a message with structured extra fields.

    The fields are attached to the record as ``extra_fields`` for handlers and
    formatters that render them.

    Args:
        logger: The logger to use
        level: Log level
        message: Log message
        **extra_fields: Additional fields to attach to the record
    """
    if not logger.isEnabledFor(level):
        return
    logger.log(level, message, extra={"extra_fields": extra_fields})
