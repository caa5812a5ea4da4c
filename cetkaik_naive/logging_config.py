"""Unified logging configuration.

Library modules only ever call ``logging.getLogger(__name__)``; hosts that
want output call ``setup_logging`` once.

Usage:
    from cetkaik_naive.logging_config import setup_logging, LogContext

    logger = setup_logging("cetkaik_naive", level="DEBUG")
    with LogContext(logger, logging.WARNING):
        ...
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .config import default_log_format, default_log_level

__all__ = [
    "DEFAULT_FORMAT",
    "COMPACT_FORMAT",
    "DETAILED_FORMAT",
    "STRUCTURED_FORMAT",
    "setup_logging",
    "get_logger",
    "configure_third_party_loggers",
    "LogContext",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
COMPACT_FORMAT = "%(levelname).1s %(name)s: %(message)s"
DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d %(funcName)s - %(message)s"
)
STRUCTURED_FORMAT = (
    '{"time": "%(asctime)s", "logger": "%(name)s", '
    '"level": "%(levelname)s", "message": "%(message)s"}'
)

_FORMATS = {
    "default": DEFAULT_FORMAT,
    "compact": COMPACT_FORMAT,
    "detailed": DETAILED_FORMAT,
    "structured": STRUCTURED_FORMAT,
}

# Third-party packages that are chatty at INFO.
_NOISY_PACKAGES = ("hypothesis", "urllib3", "asyncio")

# Marks handlers installed by setup_logging so repeated calls stay idempotent.
_HANDLER_TAG = "_cetkaik_handler"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = default_log_level()
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    name: str,
    level: Union[int, str, None] = None,
    format_style: Optional[str] = None,
    log_file: Union[str, Path, None] = None,
    log_dir: Union[str, Path, None] = None,
    console: bool = True,
    propagate: bool = False,
) -> logging.Logger:
    """Configure and return the logger ``name``.

    Calling this twice for the same name does not stack handlers.
    Unknown ``format_style`` values fall back to the default format.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))
    logger.propagate = propagate

    fmt = _FORMATS.get((format_style or default_log_format()).lower(), DEFAULT_FORMAT)
    formatter = logging.Formatter(fmt)

    existing = {getattr(h, _HANDLER_TAG) for h in logger.handlers if hasattr(h, _HANDLER_TAG)}

    if console and "console" not in existing:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, "console")
        logger.addHandler(handler)

    if log_file is None and log_dir is not None:
        log_file = Path(log_dir) / f"{name}.log"
    if log_file is not None:
        path = Path(log_file)
        tag = f"file:{path.resolve()}"
        if tag not in existing:
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(formatter)
            setattr(file_handler, _HANDLER_TAG, tag)
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_third_party_loggers(
    quiet: bool = True,
    verbose_packages: Optional[Iterable[str]] = None,
) -> None:
    """Raise noisy third-party loggers to WARNING unless listed as verbose."""
    if not quiet:
        return
    keep = set(verbose_packages or ())
    for package in _NOISY_PACKAGES:
        if package not in keep:
            logging.getLogger(package).setLevel(logging.WARNING)


class LogContext:
    """Temporarily change a logger's level; restored even on exception."""

    def __init__(self, logger: logging.Logger, level: Union[int, str]):
        self.logger = logger
        self.level = _resolve_level(level)
        self._previous: Optional[int] = None

    def __enter__(self) -> logging.Logger:
        self._previous = self.logger.level
        self.logger.setLevel(self.level)
        return self.logger

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._previous is not None:
            self.logger.setLevel(self._previous)
