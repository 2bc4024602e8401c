"""
Logging helpers shared by the babelfile modules.

Loggers live under the ``babelfile`` namespace. A single stream handler is
attached to the root ``babelfile`` logger on first use, with its level taken
from ``BABELFILE_LOG_LEVEL``.
"""

import logging

from babelfile import config

ROOT_LOGGER_NAME = "babelfile"

_root_logger = logging.getLogger(ROOT_LOGGER_NAME)


def setup_logging(level: str = None):
    """Attach the structured stream handler once and set the level."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)
        _root_logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    if level:
        _root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of the babelfile namespace."""
    setup_logging()
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
