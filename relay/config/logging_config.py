"""
Configure logging for the relay.

Everything logs through the single ``clover_relay`` logger. Output goes to stdout
and, unless disabled with ``LOG_TO_FILE=false``, to a rotating file under
``LOG_DIR`` (default ``logs/``). Uvicorn's own loggers are left alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from relay.config.constants import LOGGER_NAME

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "clover_relay.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5


def _file_logging_enabled() -> bool:
    return os.getenv("LOG_TO_FILE", "true").strip().lower() not in ("0", "false", "no")


def configure_logging(
    level: Optional[str] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the relay logger.

    Calling this again replaces the previous handlers, so the runner can
    reconfigure with its command line level after the app module has loaded.

    Args:
        level: Logging level name, defaults to the LOG_LEVEL env var or INFO
        log_dir: Directory for the rotating log file, defaults to LOG_DIR or ``logs``

    Returns:
        logging.Logger: The configured logger instance
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if _file_logging_enabled():
        directory = Path(log_dir or os.getenv("LOG_DIR") or "logs")
        try:
            directory.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                directory / LOG_FILE_NAME,
                maxBytes=MAX_LOG_SIZE,
                backupCount=BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging in {directory}: {e}")

    logger.propagate = False

    logger.debug(f"Logging configured at {level_name}")
    return logger
