import logging
import logging.config
import os

from inventory_sync.config import settings


def setup_logging(log_level=None, log_dir=None, log_format=None):
    """
    Configures logging for the application.
    """
    if log_level is None:
        log_level = settings.LOG_LEVEL
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    log_dir = log_dir or settings.LOG_DIR
    log_format = log_format or settings.LOG_FORMAT
    if log_format not in ("default", "json"):
        log_format = "default"

    # Create logs directory if it doesn't exist
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
                "class": "pythonjsonlogger.jsonlogger.JsonFormatter",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": log_format,
                "level": log_level,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": log_format,
                "level": log_level,
                "filename": os.path.join(log_dir, "inventory.log"),
                "maxBytes": 10 * 1024 * 1024, # 10MB
                "backupCount": 5,
                "encoding": "utf8"
            },
        },
        "loggers": {
            "root": {
                "handlers": ["console", "file"],
                "level": log_level,
                "propagate": True
            },
            "sqlalchemy.engine": {
                "handlers": ["console", "file"],
                "level": "WARNING",
                "propagate": False
            },
            "inventory_sync": {  # Application specific logger
                "handlers": ["console", "file"],
                "level": log_level,
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
    logging.getLogger("inventory_sync").info("Logging configured successfully.")
