import logging
import sys
from logging.handlers import RotatingFileHandler

from storerate.core.config import settings

# Include the function name so handler logs point at the endpoint
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s] - %(message)s"
LOG_LEVEL = logging.getLevelName(settings.LOG_LEVEL.upper())

LOG_DIR = settings.LOG_DIR
if settings.LOG_TO_FILE:
    LOG_DIR.mkdir(parents=True, exist_ok=True)


def setup_logger(name: str, level: int = None) -> logging.Logger:
    logger = logging.getLogger(name)

    logger.setLevel(level or LOG_LEVEL)

    # Clear any existing handlers
    logger.handlers = []
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.INFO)
    logger.addHandler(console_handler)

    if not settings.LOG_TO_FILE:
        return logger

    # File handler with DEBUG level for more detailed logging
    log_file = LOG_DIR / f"{name.replace('.', '_')}.log"
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)
    logger.addHandler(file_handler)

    error_file = LOG_DIR / f"{name.replace('.', '_')}_error.log"
    error_handler = RotatingFileHandler(
        error_file,
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setFormatter(formatter)
    error_handler.setLevel(logging.ERROR)
    logger.addHandler(error_handler)

    return logger
