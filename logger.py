# logger.py
import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from config import config

LOGGER_NAME = "gas_station_api"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logger(log_dir: str, level: str = "INFO") -> logging.Logger:
    """Attach a rotating file handler (1MB x 5 backups) and a stdout handler."""

    app_logger = logging.getLogger(LOGGER_NAME)
    app_logger.setLevel(level.upper())

    # Avoid duplicate handlers if configured more than once
    if app_logger.handlers:
        return app_logger

    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "app.log"), maxBytes=1_000_000, backupCount=5
    )
    file_handler.setFormatter(formatter)
    app_logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    app_logger.addHandler(stream_handler)

    app_logger.propagate = False
    return app_logger


logger = configure_logger(config.LOG_DIR, config.LOG_LEVEL)
