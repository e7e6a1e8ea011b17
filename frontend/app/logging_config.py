# frontend/app/logging_config.py

import logging
import logging.config


def setup_logging(level: str = "INFO"):
    """
    Configures console logging for the frontend process.
    Gradio's own access chatter is kept at WARNING so workflow messages stay readable.
    """
    LOGGING_CONFIG = {
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
                'level': level,
                'stream': 'ext://sys.stdout',
            },
        },
        'loggers': {
            '': {
                'handlers': ['console'],
                'level': level,
            },
            'httpx': {
                'level': 'WARNING',
            },
            'urllib3': {
                'level': 'WARNING',
            },
        }
    }

    logging.config.dictConfig(LOGGING_CONFIG)
    logging.getLogger(__name__).info("Frontend logging initialized.")
