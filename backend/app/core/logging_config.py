# backend/app/core/logging_config.py

import logging
import logging.config
import os

from .config import settings


def build_logging_config(log_file_path: str) -> dict:
    """dictConfig for the backend: console + rotating file for our code, tuned-down framework loggers."""
    handlers = ['console', 'rotating_file']
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'default': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                'datefmt': '%Y-%m-%d %H:%M:%S',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'default',
                'stream': 'ext://sys.stdout',
            },
            'rotating_file': {
                'class': 'logging.handlers.RotatingFileHandler',
                'formatter': 'default',
                'filename': log_file_path,
                'maxBytes': 1024 * 1024 * 5,  # 5 MB
                'backupCount': 5,
                'encoding': 'utf-8',
            },
        },
        'loggers': {
            '': {
                'handlers': handlers,
                'level': settings.LOG_LEVEL,
            },
            'uvicorn.error': {
                'handlers': handlers,
                'level': 'INFO',
                'propagate': False,
            },
            'uvicorn.access': {
                'handlers': handlers,
                'level': settings.ACCESS_LOG_LEVEL,
                'propagate': False,
            },
            'watchfiles': {
                'level': 'WARNING',
            },
        }
    }


def setup_logging():
    """Configures backend logging; the log file lives under settings.LOG_DIR."""
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    log_file_path = os.path.join(settings.LOG_DIR, settings.LOG_FILE_NAME)

    logging.config.dictConfig(build_logging_config(log_file_path))
    logging.getLogger(__name__).info(f"Backend logging initialized; file: {log_file_path}")
