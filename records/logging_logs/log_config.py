"""
Logging configuration for the academic records service.
Centralizes all logging setup to follow DRY and SoC principles.
"""
import os
import time
import logging
from logging.handlers import RotatingFileHandler
from records.config.settings import LoggingConfig

LOG_FILE = os.path.join(LoggingConfig.LOG_DIR, LoggingConfig.LOG_FILE_NAME)

# Filter to prevent duplicate log messages
class DuplicateFilter(logging.Filter):
    def __init__(self, name=''):
        super().__init__(name)
        self.last_log = None
        self.last_time = 0

    def filter(self, record):
        current_log = (record.msg, record.args)
        current_time = time.time()

        # Same message within 0.1 seconds is dropped
        if current_log == self.last_log and current_time - self.last_time < 0.1:
            return False

        self.last_log = current_log
        self.last_time = current_time
        return True

def setup_logging(module_name=None):
    """
    Set up logging for the records service.

    Args:
        module_name: Optional name of the module for more specific logging

    Returns:
        Logger instance configured with file and console handlers
    """
    # Suppress MongoDB connection messages
    logging.getLogger('pymongo').setLevel(logging.WARNING)

    logger_name = f"records.{module_name}" if module_name else "records"
    logger = logging.getLogger(logger_name)

    # Only configure if handlers haven't been added yet
    if not logger.handlers:
        logger.setLevel(logging.DEBUG)
        logger.addFilter(DuplicateFilter())
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        try:
            os.makedirs(LoggingConfig.LOG_DIR, exist_ok=True)
            # delay=True avoids opening the file until the first record
            file_handler = RotatingFileHandler(
                LOG_FILE,
                maxBytes=LoggingConfig.MAX_LOG_SIZE,
                backupCount=LoggingConfig.BACKUP_COUNT,
                delay=True
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not set up file logging: {str(e)}")

        logger.propagate = False

    return logger

def get_logger(module_name=None):
    """
    Get a configured logger instance.

    Args:
        module_name: Optional name of the module for more specific logging

    Returns:
        Logger instance
    """
    return setup_logging(module_name)
