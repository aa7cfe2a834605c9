import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from . import settings


def setup_logger(
    name: Optional[str] = None,
    log_level: Optional[int | str] = None,
    log_dir: Optional[Path] = None,
) -> logging.Logger:
    """
    Sets up a logger with console (StreamHandler) and file (RotatingFileHandler) output.
    Level, log directory, file name and rotation come from settings unless given.
    Calling it again for an already configured logger returns it untouched.
    """
    log_level = log_level if log_level is not None else settings.LOG_LEVEL
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Only the logger's own handlers count; ancestors may carry unrelated ones.
    if logger.handlers:
        return logger

    # Console stays minimal; the file keeps timestamps for later reading.
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    log_dir = Path(log_dir) if log_dir is not None else settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / settings.LOG_FILENAME,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    logger.addHandler(file_handler)

    return logger
