"""Logging setup for the zooinspect CLI."""

import logging
from logging.handlers import RotatingFileHandler

from zooinspect.core.settings import get_path, settings

# Marks handlers installed here so repeated setup replaces rather than stacks them
_HANDLER_MARK = "_zooinspect_handler"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure root logging from settings.

    Args:
        verbose: Log at DEBUG regardless of LOG_LEVEL

    Returns:
        The zooinspect package logger
    """
    level = logging.DEBUG if verbose else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(settings.log_format)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    setattr(stream_handler, _HANDLER_MARK, True)
    root.addHandler(stream_handler)

    if settings.log_file_enabled:
        log_path = get_path("logs")
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=settings.log_file_max_size_mb * 1024 * 1024,
            backupCount=settings.log_file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARK, True)
        root.addHandler(file_handler)

    return logging.getLogger("zooinspect")
