"""
logger.py
---------
Diagnostic logger for the file_log package itself.

FileLogger writes *your* log lines to plain text files. This module is the
other direction: it reports what file_log is doing (collision retries,
dropped lines, retention failures, slow shutdowns) through Python's
logging module, so a host application can route or silence it.

Usage Example:
    from file_log.logging.logger import get_logger

    log = get_logger(__name__)
    log.warning("Could not open log file")
"""

import logging  # Python's built-in logging library
from logging.handlers import (
    RotatingFileHandler,
)  # For rotating the diagnostics file
import os

from file_log.constants import file_logger as constants

# ============================
# 1. Logging Configuration Constants
# ============================

# WARNING by default: a logging library should be quiet unless something is wrong
LOG_LEVEL = getattr(
    logging,
    os.getenv(constants.ENV_DIAGNOSTIC_LEVEL, "WARNING").upper(),
    logging.WARNING,
)
LOG_DIR = os.getenv(constants.ENV_DIAGNOSTIC_DIR)

# ============================
# 2. Create Formatter
# ============================

# Example output:
# 2026-10-19 15:22:11,345 - file_log.components.log_writer - WARNING - Could not open ...
formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# ============================
# 3. Create Console Handler
# ============================

console_handler = logging.StreamHandler()
console_handler.setLevel(LOG_LEVEL)
console_handler.setFormatter(formatter)

# ============================
# 4. Create File Handler (Rotating, opt-in)
# ============================

# Only when FILE_LOG_DIAGNOSTIC_DIR is set; importing the package must not
# create directories on its own.
file_handler = None
if LOG_DIR:
    os.makedirs(LOG_DIR, exist_ok=True)
    file_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, constants.DIAGNOSTIC_LOG_FILE_NAME),
        maxBytes=constants.DIAGNOSTIC_MAX_LOG_SIZE,
        backupCount=constants.DIAGNOSTIC_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

# ============================
# 5. Logger Factory Function
# ============================


def get_logger(name: str) -> logging.Logger:
    """
    Returns a configured diagnostic logger for the given module name.

    Args:
        name (str): Typically pass __name__ (the current module name)
                    so that each logger is clearly identified in log output.

    Returns:
        logging.Logger: A logger instance with console (and optional file) handlers attached.
    """
    logger = logging.getLogger(name)
    logger.setLevel(LOG_LEVEL)

    # Avoid adding the same handlers twice when get_logger() is called repeatedly.
    if not logger.handlers:
        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    return logger
