"""Logging configuration for the kindctl package."""
import logging
import sys
from typing import Optional, Union

from kindctl.config import Settings


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Turn a level name like ``"debug"`` (or None for LOG_LEVEL) into a number."""
    if isinstance(level, int):
        return level
    return getattr(logging, (level or Settings.LOG_LEVEL).upper(), logging.INFO)


def setup_logging(debug_mode: bool = False, level: Optional[str] = None) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if debug_mode else resolve_level(level),
        format=Settings.LOG_FORMAT,
        handlers=[logging.StreamHandler()],
        force=True,
    )


def setup_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """Named logger for long-running services (the HTTP API).

    Writes to stdout with its own handler and does not propagate, so server
    output is not duplicated when the root logger is configured too. Calling
    it again only updates the level.
    """
    log_level = resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(Settings.LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(log_level)

    return logger
