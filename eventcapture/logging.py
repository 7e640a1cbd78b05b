from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "eventcapture"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO", logger_name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Send records from the package logger (or ``logger_name``) to stdout.

    The root logger is left alone so host applications keep their own setup.
    Calling this again replaces the handler instead of stacking another one.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logger = logging.getLogger(logger_name)
    logger.setLevel(numeric_level)
    logger.propagate = False

    for handler in list(logger.handlers):
        if getattr(handler, "_eventcapture", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._eventcapture = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
