"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
DEBUG_CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
)


def setup_logging(level: str = "INFO", to_file: bool = False):
    """Configure loguru sinks for the console and, optionally, a daily log file."""
    logger.remove()

    logger.add(
        sys.stderr,
        format=DEBUG_CONSOLE_FORMAT if level == "DEBUG" else CONSOLE_FORMAT,
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "eonet_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.debug("Logging to {}", LOG_DIR)

    return logger
