"""
Logging configuration for pysiteindex.

Library modules obtain loggers through get_logger() so that every logger
sits under the ``pysiteindex`` hierarchy. Applications opt in to output
with setup_logging(); the library itself never configures the root logger.
"""
import logging
from pathlib import Path
from typing import Optional, Union

__all__ = [
    'PACKAGE_LOGGER_NAME',
    'DEFAULT_FORMAT',
    'get_logger',
    'setup_logging',
    'log_missing_rows',
]

PACKAGE_LOGGER_NAME = 'pysiteindex'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger within the package hierarchy.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Logger instance
    """
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + '.'):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: Union[int, str] = logging.INFO,
                  log_file: Optional[Union[str, Path]] = None,
                  fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Attach handlers to the package logger.

    Calling this again replaces the handlers added by a previous call.

    Args:
        level: Logging level (name or number)
        log_file: Optional path of a file to log to in addition to stderr
        fmt: Log record format string

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, '_pysiteindex_handler', False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(fmt)
    handlers = [logging.StreamHandler()]
    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._pysiteindex_handler = True
        logger.addHandler(handler)

    return logger


def log_missing_rows(logger: logging.Logger, method: str, reason: str, count: int) -> None:
    """Log rows that produced no site index.

    Args:
        logger: Logger to write to
        method: Site index method used for the batch
        reason: Why the rows are missing (e.g. "unknown species")
        count: Number of affected rows; nothing is logged when zero
    """
    if count:
        logger.warning("%d row(s) without site index (%s) using %s", count, reason, method)
