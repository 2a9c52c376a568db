# backend/tripboard/core/logger.py

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


# -------------------------------------------------------------------
# LOG DIRECTORY
# -------------------------------------------------------------------
DEFAULT_LOG_DIR = Path(__file__).resolve().parents[2] / "logs"

LOG_FILE_NAME = "tripboard.log"


# -------------------------------------------------------------------
# FORMATTER
# -------------------------------------------------------------------
LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
)

formatter = logging.Formatter(LOG_FORMAT)


# -------------------------------------------------------------------
# GLOBAL LOGGER
# -------------------------------------------------------------------
logger = logging.getLogger("tripboard")


def get_logger(name: str) -> logging.Logger:
    """Child of the ``tripboard`` logger, e.g. ``get_logger("security")``."""
    return logger.getChild(name)


def configure_logging(level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """
    Attach the rotating file handler and the console handler.

    Safe to call more than once (app reloads, test apps): handlers are
    only added the first time, later calls just adjust the level.
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Prevent duplicate handlers when reloading app
    if logger.handlers:
        return logger

    directory = Path(log_dir) if log_dir else DEFAULT_LOG_DIR
    directory.mkdir(parents=True, exist_ok=True)

    # ---------------------------------------------------------------
    # HANDLER: FILE (rotating)
    # ---------------------------------------------------------------
    file_handler = RotatingFileHandler(
        directory / LOG_FILE_NAME,
        maxBytes=5 * 1024 * 1024,   # 5 MB
        backupCount=5,              # keep 5 files
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.INFO)

    # ---------------------------------------------------------------
    # HANDLER: CONSOLE
    # ---------------------------------------------------------------
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.DEBUG)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.debug("Logger initialized successfully.")
    return logger
