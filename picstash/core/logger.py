# picstash/core/logger.py
import os
import sys

from loguru import logger

from picstash.config import Settings

CONSOLE_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(settings: Settings) -> None:
    """Configure loguru sinks (console, all logs, errors only)"""
    os.makedirs(settings.log_dir, exist_ok=True)

    # Drop the default handler (and ours, when called again)
    logger.remove()

    # Console
    logger.add(
        sys.stdout,
        colorize=True,
        format=CONSOLE_FORMAT,
        level=settings.log_level
    )

    # File (all logs)
    logger.add(
        os.path.join(settings.log_dir, "picstash.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="DEBUG"
    )

    # Errors only
    logger.add(
        os.path.join(settings.log_dir, "error.log"),
        rotation="10 MB",
        retention="30 days",
        compression="zip",
        format=FILE_FORMAT,
        level="ERROR"
    )
