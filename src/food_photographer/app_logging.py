"""Logging configuration helpers."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the application logger with a single stream handler.

    Repeated calls only update the level, so building several apps in one
    process never duplicates output.
    """
    logger = logging.getLogger("food_photographer")
    logger.setLevel(level.upper())
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
