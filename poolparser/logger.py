"""
poolparser/logger.py
Shared application logger. Every module calls create_logger() at import time.
"""

import logging
import logging.handlers
import os
import sys
from poolparser.constants import APPLICATION_NAME, LOG_FOLDER, LOG_FILE_NAME

LOG_FORMAT = "<%(asctime)s> %(levelname)s - %(module)s.%(funcName)s: %(message)s"
LOG_MAX_BYTES = 1024 * 1024 * 5
LOG_BACKUP_COUNT = 3


def create_logger():
    """Returns the application logger, attaching handlers on first use"""
    logger = logging.getLogger(APPLICATION_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    try:
        os.makedirs(LOG_FOLDER, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(LOG_FOLDER, LOG_FILE_NAME),
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as error:
        logger.warning(f"File logging disabled: {error}")

    return logger
