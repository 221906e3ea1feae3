"""Logging configuration."""

import sys
from pathlib import Path

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"
ACTIVITY_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | actor={extra[actor_id]} | {extra[category]} | {message}"


def _is_activity(record) -> bool:
    return record["extra"].get("activity", False)


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, log_dir: Path = LOG_DIR):
    """Console sink at `level`; optional daily files for full detail and for activity entries."""
    logger.remove()

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "clubvote_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention=LOG_RETENTION,
            compression="gz",
        )
        # Copy of the activity trail that survives a failed activity_log write
        logger.add(
            log_dir / "activity_{time:YYYY-MM-DD}.log",
            format=ACTIVITY_FORMAT,
            level="INFO",
            filter=_is_activity,
            rotation="00:00",
            retention=LOG_RETENTION,
        )
        logger.info("Logging to {}", log_dir)

    return logger
