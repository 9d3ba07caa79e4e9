"""Logging setup.

Modules log through `logging.getLogger(__name__)`. The application calls `configure_logging` once at startup so that
skipped save files end up in <base>/error.log as tab separated lines: timestamp, file path, cause, raw message.
"""

import logging

from src.core.config import Settings

# Storage modules live below this logger name
STORAGE_LOGGER_NAME = "src.storage"
ERROR_LOG_FORMAT = "%(asctime)s\t%(message)s"


def configure_logging(settings: Settings, level: int = logging.WARNING) -> logging.Handler:
    """Attach (once) a file handler for storage warnings and return it."""
    storage_logger = logging.getLogger(STORAGE_LOGGER_NAME)
    log_path = settings.error_log_path

    for handler in storage_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == str(
            log_path.resolve()
        ):
            return handler

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(ERROR_LOG_FORMAT))
    storage_logger.addHandler(handler)
    return handler
