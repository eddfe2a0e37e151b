"""Defines the :class:`.Logger` class and the package-level logging one-liners.

Everything the library reports goes to the :data:`.PACKAGE_LOGGER` record: the one-liners
write to it directly, and :class:`.Logger` attaches the configured handler to it (or to any
other named record) the first time it is created.
"""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from os import makedirs
from os.path import exists, join

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER: str = "astrochron"
"""``str``: name of the top-level log record."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record format shared by every handler the :class:`.Logger` creates."""


def _buildHandler(name: str, path: str) -> tuple[logging.Handler, str]:
    """Return the handler writing to `path`, plus the file name it writes to.

    Args:
        name (``str``): name of the log record, used in the log file name
        path (``str``): ``"stdout"`` or a directory for rotating log files

    Returns:
        ``tuple``: (handler, ``"stdout"`` or the log file path)
    """
    if path == "stdout":
        return logging.StreamHandler(sys.stdout), "stdout"

    if not exists(path):
        logging.getLogger(PACKAGE_LOGGER).info(f"Path did not exist: {path!r}. Creating path...")
        makedirs(path)

    filename = join(path, f"{name}_{pathSafeTime()}.log")
    logging_config = BehavioralConfig.getConfig().logging
    handler = RotatingFileHandler(
        filename,
        maxBytes=logging_config.MaxFileSize,
        backupCount=logging_config.MaxFileCount,
    )
    return handler, filename


class Logger:
    """Extended logger wraps the standard Python logging package.

    Unset arguments fall back to the ``[logging]`` section of the :class:`.BehavioralConfig`.
    Attribute access is deferred to the wrapped :class:`logging.Logger`, so ``Logger(name).info``
    works as usual.
    """

    def __init__(
        self,
        name: str = PACKAGE_LOGGER,
        level: int | None = None,
        path: str | None = None,
        allow_multiple_handlers: bool | None = None,
    ):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``, optional): Name of the log record. Defaults to :data:`.PACKAGE_LOGGER`.
            level (``int``, optional): Determines what level of log messages are published
            path (``str``, optional): ``"stdout"`` or the directory where log files are stored
            allow_multiple_handlers (``bool``, optional): whether multiple log handlers are permitted
        """
        logging_config = BehavioralConfig.getConfig().logging
        if not level:
            level = logging_config.Level
        if not path:
            path = logging_config.OutputLocation
        if not allow_multiple_handlers:
            allow_multiple_handlers = logging_config.AllowMultipleHandlers

        self.logger = logging.getLogger(name)
        self.filename: str | None = None
        if not self.logger.handlers or allow_multiple_handlers is True:
            handler, self.filename = _buildHandler(name, path)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))

            self.logger.setLevel(level)
            self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Defer everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _astrochronLog(message: str, level: int):
    """Log a message to the top-level log record.

    This provides a simple, easy one-liner that doesn't require pre-initializing a logger object.
    The primary use case is for simple functions that need to log messages.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER).log(msg=message, level=level)


def astrochronLogCritical(message: str):
    """Log a CRITICAL message to the top-level log record."""
    _astrochronLog(message, level=logging.CRITICAL)


def astrochronLogError(message: str):
    """Log an ERROR message to the top-level log record."""
    _astrochronLog(message, level=logging.ERROR)


def astrochronLogWarning(message: str):
    """Log a WARNING message to the top-level log record."""
    _astrochronLog(message, level=logging.WARNING)


def astrochronLogInfo(message: str):
    """Log an INFO message to the top-level log record."""
    _astrochronLog(message, level=logging.INFO)


def astrochronLogDebug(message: str):
    """Log a DEBUG message to the top-level log record."""
    _astrochronLog(message, level=logging.DEBUG)
