"""
Engine Logging

Every engine logger lives under the "points_engine" namespace. setup_logging
configures that namespace only and leaves the root logger to the host
application.
"""

import logging
import sys
from typing import Optional, TextIO


ROOT_LOGGER = "points_engine"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Configure the engine's logger namespace.

    Repeated calls replace the engine handler instead of stacking another.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        if getattr(handler, "points_engine_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.points_engine_handler = True
    logger.addHandler(handler)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Retrieve a logger inside the engine namespace.

    Module names under points_engine are used as is; anything else is nested
    below it, so get_logger("demo") logs as "points_engine.demo".
    """
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
