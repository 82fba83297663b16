"""
Logging setup for the fuzzy logic engine.

Modules log through ``get_logger(__name__)``; nothing is printed.
Applications that want the records on a console call ``configure_logging``.
"""

import logging
from typing import Optional, Union

LOGGER_NAME = "backend.fuzzylogic"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger under the package namespace."""
    if not name:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(
    level: Union[str, int] = "INFO",
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling this more than once replaces the level and format of the
    handler installed by the first call instead of adding another one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)

    handler = None
    for existing in logger.handlers:
        if getattr(existing, "_fuzzylogic_handler", False):
            handler = existing
            break

    if handler is None:
        handler = logging.StreamHandler()
        handler._fuzzylogic_handler = True
        logger.addHandler(handler)

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return logger
