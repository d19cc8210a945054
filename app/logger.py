import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from app import settings


def setup_logger(name: Optional[str] = None, log_level: Optional[str] = None) -> logging.Logger:
    """
    Sets up a logger with console output and, when LOG_TO_FILE is on, a rotating file.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level or settings.LOG_LEVEL)

    # Prevent adding handlers multiple times if logger is already set up
    if logger.handlers:
        return logger

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_TO_FILE:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.LOG_DIR / "app.log", maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5 MB
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
