"""Logging setup for the ``computor`` package.

Library modules only create ``logging.getLogger(__name__)`` loggers; the
command line entry point calls ``setup_logging`` once to attach a handler.
"""

import logging
import sys

LOGGER_NAME = "computor"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``computor.cli``."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: str | int = "WARNING", stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again only changes the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(getattr(h, "_computor", False) for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._computor = True
        logger.addHandler(handler)
    return logger
