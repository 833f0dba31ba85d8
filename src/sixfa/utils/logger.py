"""
Logger Module

Provides standardized logging for sixfa using Python's built-in logging module.
Console output is kept quiet by default; a timestamped log file can be enabled
for troubleshooting the command line tool.

Seeds and tokens are secret material and must never be passed to these functions.
"""

import os
import logging
import datetime

from ..config import DEBUG_MODE, LOG_TO_FILE, LOG_DIRECTORY

# Default log levels
DEFAULT_CONSOLE_LEVEL = logging.DEBUG if DEBUG_MODE else logging.WARNING
DEFAULT_FILE_LEVEL = logging.DEBUG      # File always logs everything (when enabled)

CONSOLE_FORMAT = '%(levelname)s [%(filename)s:%(lineno)d]: %(message)s'
FILE_FORMAT = '[%(asctime)s] %(levelname)s [%(filename)s:%(lineno)d]: %(message)s'

# Global logger instance
logger = None
log_file_path = None

# Library loggers that should follow the application's console level
MODULE_LOGGERS = [
    'sixfa.totp.generator',
    'sixfa.totp.verifier',
    'sixfa.totp.clock',
    'sixfa.adapters',
]


def configure_module_loggers(console_level):
    """
    Route the library module loggers through a single console handler.

    Args:
        console_level (int): Logging level for console output
    """
    formatter = logging.Formatter(CONSOLE_FORMAT)
    for module_name in MODULE_LOGGERS:
        module_logger = logging.getLogger(module_name)
        module_logger.setLevel(logging.DEBUG)  # Let handlers control the output

        for handler in module_logger.handlers[:]:
            module_logger.removeHandler(handler)
            handler.close()

        module_handler = logging.StreamHandler()
        module_handler.setLevel(console_level)
        module_handler.setFormatter(formatter)
        module_logger.addHandler(module_handler)

        # Don't propagate to avoid duplicate messages
        module_logger.propagate = False


def setup_logger(name='sixfa',
                 console_level=None,
                 file_level=None,
                 log_to_file=LOG_TO_FILE,
                 log_dir=None):
    """
    Set up the logger with handlers for console and file output.

    Args:
        name (str): Logger name
        console_level (int): Logging level for console output (e.g., logging.DEBUG)
        file_level (int): Logging level for file output
        log_to_file (bool): Whether to log to a file
        log_dir (str): Directory for log files, defaults to the configured log directory

    Returns:
        logging.Logger: Configured logger instance
    """
    global logger, log_file_path

    if console_level is None:
        console_level = DEFAULT_CONSOLE_LEVEL
    if file_level is None:
        file_level = DEFAULT_FILE_LEVEL

    configure_module_loggers(console_level)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Set to lowest level to catch everything

    # Remove any existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)
    logger.propagate = False

    log_file_path = None
    if log_to_file:
        try:
            if log_dir is None:
                log_dir = LOG_DIRECTORY
            os.makedirs(log_dir, exist_ok=True)

            timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file_path = os.path.join(log_dir, f"sixfa_{timestamp}.log")

            file_handler = logging.FileHandler(log_file_path, mode='w', encoding='utf-8')
            file_handler.setLevel(file_level)
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
            logger.addHandler(file_handler)

            # Module loggers write to the same file
            for module_name in MODULE_LOGGERS:
                logging.getLogger(module_name).addHandler(file_handler)

            logger.info(f"=== sixfa log started at {datetime.datetime.now().isoformat()} ===")
        except OSError as e:
            # Fall back to console-only logging
            log_file_path = None
            logger.warning(f"Could not set up file logging in {log_dir}: {e}")

    return logger


def get_logger():
    """
    Get the configured logger instance or set up a new one if not configured.

    Returns:
        logging.Logger: Logger instance
    """
    if logger is None:
        return setup_logger()
    return logger


def set_console_level(level):
    """
    Set the console output log level.

    Args:
        level (int): Logging level (e.g., logging.DEBUG, logging.INFO)
    """
    loggers = [get_logger()] + [logging.getLogger(name) for name in MODULE_LOGGERS]
    for target in loggers:
        for handler in target.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)


def get_log_file_path():
    """Path of the current log file, or None when file logging is off."""
    return log_file_path


# Convenience functions that map to logging methods
def debug(msg, *args, **kwargs):
    get_logger().debug(msg, *args, **kwargs)


def info(msg, *args, **kwargs):
    get_logger().info(msg, *args, **kwargs)


def warning(msg, *args, **kwargs):
    get_logger().warning(msg, *args, **kwargs)


def error(msg, *args, **kwargs):
    get_logger().error(msg, *args, **kwargs)


def critical(msg, *args, **kwargs):
    get_logger().critical(msg, *args, **kwargs)
