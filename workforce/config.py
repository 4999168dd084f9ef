# workforce/config.py

import os
import logging
import logging.config

DEFAULT_LOG_LEVEL = "WARNING"


def resolve_logs_dir() -> str:
    """WORKFORCE_LOG_DIR if set, otherwise ./logs under the working directory."""
    return os.environ.get("WORKFORCE_LOG_DIR") or os.path.join(os.getcwd(), "logs")


def resolve_log_level() -> str:
    """WORKFORCE_LOG_LEVEL if it names a logging level, otherwise WARNING."""
    level = os.environ.get("WORKFORCE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName maps known names to their int value and echoes anything else back
    if not isinstance(logging.getLevelName(level), int):
        logging.getLogger(__name__).warning(f"Unknown WORKFORCE_LOG_LEVEL '{level}', using {DEFAULT_LOG_LEVEL}.")
        return DEFAULT_LOG_LEVEL
    return level


# --- Paths ---
LOGS_DIR = resolve_logs_dir()
LOG_FILE_NAME = "workforce.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

# --- Logging Configuration ---
LOG_LEVEL = resolve_log_level()
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        # stdout is reserved for the demo narration
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'stream': 'ext://sys.stderr',
            'level': LOG_LEVEL,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.DEBUG,
            'encoding': 'utf-8',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': logging.DEBUG,
    },
}


def configure_logging(config: dict = LOGGING_CONFIG) -> None:
    """Creates the log directory if needed and applies the dictConfig."""
    file_handler = config.get('handlers', {}).get('file')
    if file_handler:
        log_dir = os.path.dirname(file_handler['filename'])
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
    logging.config.dictConfig(config)
