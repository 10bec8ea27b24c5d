import logging
import os

from .config import LOG_FORMAT, LOG_LEVEL_ENV


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    # Library code stays quiet by default; the CLI reports progress
    default_level = logging.WARNING
    if name.endswith(".cli"):
        default_level = logging.INFO

    level_name = os.getenv(LOG_LEVEL_ENV, logging.getLevelName(default_level))
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
