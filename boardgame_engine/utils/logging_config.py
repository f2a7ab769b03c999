"""
Logging configuration for Board Game Engine
"""

import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from ..config import LOGS_DIR

LOGGER_NAME = "boardgame_engine"


def setup_logging(
    level: str = "INFO",
    log_file: bool = False,
    log_dir: Optional[Path] = None
) -> logging.Logger:
    """
    Set up logging for Board Game Engine.

    Calling it again replaces the handlers installed by the previous call,
    so the CLI can reconfigure after reading --log-level.

    Args:
        level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_file: Whether to also log to file
        log_dir: Directory for log files (defaults to PROJECT_ROOT/logs)

    Returns:
        Package logger
    """
    if log_dir is None:
        log_dir = LOGS_DIR

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Console handler (stderr keeps stdout clean for CLI output)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d")
        file_handler = logging.FileHandler(
            log_dir / f"boardgame_engine_{timestamp}.log"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
