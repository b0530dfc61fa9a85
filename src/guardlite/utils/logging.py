"""Logging helpers with consistent formatting."""

from __future__ import annotations

import logging
import sys
from typing import Iterator, Optional

from rich.logging import RichHandler

from guardlite.utils.env import get_bool_env


def _build_handler(level: int, rich: bool) -> logging.Handler:
    if rich:
        handler: logging.Handler = RichHandler(
            level=level,
            markup=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            show_time=True,
            show_path=False,
        )
    else:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(name)s %(levelname)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    return handler


def _guardlite_loggers() -> Iterator[logging.Logger]:
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if isinstance(logger, logging.Logger) and name.startswith("guardlite"):
            yield logger


def get_logger(name: str, level: int = logging.INFO, *, rich: Optional[bool] = None) -> logging.Logger:
    """Configure and return a logger.

    ``rich`` defaults to the ``GUARDLITE_RICH_LOGS`` environment flag (on when unset).
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(level)
    if rich is None:
        rich = get_bool_env("GUARDLITE_RICH_LOGS", default=True)

    logger.addHandler(_build_handler(level, rich))
    logger.propagate = False
    return logger


def set_level(level: str) -> None:
    """Apply a textual level (``"DEBUG"``, ``"INFO"``...) to every guardlite logger."""
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    for logger in _guardlite_loggers():
        logger.setLevel(numeric)
        for handler in logger.handlers:
            handler.setLevel(numeric)


def set_rich(enabled: bool) -> None:
    """Switch every configured guardlite logger between rich and plain output."""
    for logger in _guardlite_loggers():
        if not logger.handlers:
            continue
        if all(isinstance(handler, RichHandler) == enabled for handler in logger.handlers):
            continue
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.addHandler(_build_handler(logger.level or logging.INFO, enabled))
