"""Application log setup."""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler

from cafe.config import CafeConfig

LOGGER_NAME = "cafe"


def setup_logger(config: CafeConfig) -> logging.Logger:
    """
    Configure the ``cafe`` logger.

    Daily rotating file under the data directory, one week of backups.
    There is no console handler because the terminal UI owns stdout.
    """
    log_dir = config.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers if setup_logger() is called more than once.
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler = TimedRotatingFileHandler(
        filename=log_dir / "cafe.log",
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
