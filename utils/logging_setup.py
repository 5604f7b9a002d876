"""
utils/logging_setup.py
----------------------

Central logging configuration for the morphology engine.

Goals:
- Provide a single place to configure logging format and level.
- Make it easy to get a logger in any module:
      from utils.logging_setup import get_logger
      log = get_logger(__name__)
- Allow overrides via environment variables:
      MORPH_LOG_LEVEL   (e.g. DEBUG, INFO, WARNING, ERROR)
      MORPH_LOG_FORMAT  ("console" or "json")
      MORPH_LOG_FILE    (path to a log file; if unset, log to stderr only)

Usage
=====

In your module:

    from utils.logging_setup import get_logger

    log = get_logger(__name__)

    log.info("rules_resolved", lang="en", rules="EnglishRules")
    log.debug("overrides_loaded", lang="en", entries=3)

Implementation notes
====================

- Events go through `structlog`, rendered either for the console or as JSON
  lines, on top of Python's built-in `logging` handlers.
- `init_logging` is idempotent; calling it multiple times is safe.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

import structlog

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False

DEFAULT_LOG_FORMAT = "%(message)s"


def _get_env_log_level() -> int:
    """
    Read MORPH_LOG_LEVEL from environment and map it to a logging level.
    Defaults to logging.INFO if unset or invalid.
    """
    level_name = os.getenv("MORPH_LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _build_renderer(fmt: str):
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def init_logging(
    level: Optional[int] = None,
    fmt: Optional[str] = None,
    filename: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Initialize stdlib logging and structlog.

    Args:
        level:
            Logging level (e.g. logging.DEBUG). If None, it is read from
            the MORPH_LOG_LEVEL environment variable, defaulting to INFO.
        fmt:
            "console" or "json". If None, read from MORPH_LOG_FORMAT.
        filename:
            Optional log file. MORPH_LOG_FILE takes precedence.
        force:
            If True, reconfigure logging even if it was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    if level is None:
        level = _get_env_log_level()
    if fmt is None:
        fmt = os.getenv("MORPH_LOG_FORMAT", "console").lower()

    filename = os.getenv("MORPH_LOG_FILE") or filename

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if filename:
        handlers.append(logging.FileHandler(filename, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    logging.basicConfig(level=level, handlers=handlers, force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            _build_renderer(fmt),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    _INITIALIZED = True


def get_logger(name: str):
    """
    Get a structlog logger with the given name, ensuring logging is initialized.

    Args:
        name:
            Logger name, usually __name__ of the calling module.
    """
    if not _INITIALIZED:
        init_logging()
    return structlog.get_logger(name)


__all__ = ["init_logging", "get_logger"]
