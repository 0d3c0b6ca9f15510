"""Centralized logging configuration for docsview.

Usage::

    from docsview.logging import setup_logging, get_logger

    setup_logging(level="DEBUG", console=True)  # once, from the CLI
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAMESPACE = "docsview"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logging_configured = False


def setup_logging(level: str = "WARNING", log_file: str | None = None, console: bool = False) -> None:
    """Configure the ``docsview`` logger tree.

    ``log_file`` receives records at any level; ``console`` mirrors them to
    stderr. With neither, a ``NullHandler`` keeps the library silent.
    """
    global _logging_configured

    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(numeric_level)
    logger.handlers.clear()
    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    _logging_configured = True
    logger.debug("Logging configured: level=%s, log_file=%s, console=%s", level, log_file, console)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``docsview`` namespace."""
    if name == LOGGER_NAMESPACE or name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def is_configured() -> bool:
    return _logging_configured


__all__ = ["setup_logging", "get_logger", "is_configured"]
