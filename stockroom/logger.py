import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import settings


def setup_logger(
    name: str = "stockroom",
    log_level: Optional[str] = None,
    log_dir: Optional[Path] = None,
    to_file: Optional[bool] = None,
) -> logging.Logger:
    """
    Sets up the application logger with a stderr handler for warnings and a
    RotatingFileHandler for the full session trail.

    Menu text is printed directly, so the console handler only carries
    WARNING and above to keep the interactive screen clean.
    """
    logger = logging.getLogger(name)
    level = logging.getLevelName(log_level or settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    # Prevent adding handlers multiple times if logger is already set up
    if logger.handlers:
        return logger

    console_format = logging.Formatter("%(levelname)s: %(message)s")
    file_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # 1. Console Handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(console_format)
    logger.addHandler(console_handler)

    # 2. File Handler
    if to_file is None:
        to_file = settings.LOG_TO_FILE
    if to_file:
        directory = log_dir or settings.LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)
        log_file = directory / settings.LOG_FILENAME

        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(file_format)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
