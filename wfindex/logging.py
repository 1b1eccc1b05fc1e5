"""Logging setup driven by the ``logging`` section of .wfindex.yml."""

from __future__ import annotations

import logging
from typing import List, Optional

from .config import LoggingConfig

ROOT_LOGGER = "wfindex"
CONSOLE_FORMAT = "[wfindex] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a component logger below the ``wfindex`` root logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def resolve_level(settings: LoggingConfig, *, verbose: bool = False) -> int:
    """A ``--verbose`` flag can raise the configured verbosity but never lower it."""
    return logging.DEBUG if verbose or settings.verbose else logging.INFO


def build_handlers(settings: LoggingConfig, level: int) -> List[logging.Handler]:
    """Console handler always, plus a file sink when ``logging.file`` is set."""
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    handlers: List[logging.Handler] = [console]

    if settings.file is not None:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(settings.file, encoding="utf-8")
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        handlers.append(sink)

    for handler in handlers:
        handler.setLevel(level)
    return handlers


def configure_logging(
    settings: Optional[LoggingConfig] = None, *, verbose: bool = False
) -> logging.Logger:
    """Apply ``settings`` to the ``wfindex`` logger and return it.

    Calling this again (one CLI run per test, say) replaces the handlers from
    the previous call instead of stacking them.
    """
    settings = settings or LoggingConfig()
    level = resolve_level(settings, verbose=verbose)

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in build_handlers(settings, level):
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    if settings.file is not None:
        logger.debug("Writing logs to %s", settings.file)
    return logger


__all__ = ["build_handlers", "configure_logging", "get_logger", "resolve_level"]
