"""
sixfa Configuration

Environment-driven defaults for the command line tool:
- Token window size, allowed drift windows and time unit
- Debug and file logging switches
- Log directory location

The token core never reads these values. Every generate/verify call takes its
parameters explicitly; this module only supplies defaults for the CLI.
"""

import os
import logging

logger = logging.getLogger(__name__)

# Application information
APP_NAME = "sixfa"
APP_VERSION = "0.1.0"

# Token defaults
DEFAULT_WINDOW = 30
DEFAULT_ALLOWED_WINDOWS = 1
DEFAULT_UNIT = "s"


def _env_flag(name):
    """True when the environment variable is set to 1/true/yes."""
    return os.environ.get(name, '').lower() in ('1', 'true', 'yes')


def _env_int(name, default, minimum=0):
    """
    Read a non-negative integer from the environment.

    Args:
        name (str): Environment variable name
        default (int): Value used when the variable is unset or invalid
        minimum (int): Smallest accepted value

    Returns:
        int: Parsed value or the default
    """
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default
    if value < minimum:
        logger.warning(f"Ignoring {name}={raw!r}: must be at least {minimum}, using {default}")
        return default
    return value


def get_log_directory():
    """
    Resolve the log directory.

    SIXFA_LOG_DIR wins when set; otherwise logs go to ~/.sixfa/logs.
    The directory is created lazily by the logger, not here.
    """
    env_dir = os.environ.get('SIXFA_LOG_DIR')
    if env_dir:
        return env_dir
    return os.path.join(os.path.expanduser('~'), '.sixfa', 'logs')


WINDOW = _env_int('SIXFA_WINDOW', DEFAULT_WINDOW, minimum=1)
ALLOWED_WINDOWS = _env_int('SIXFA_ALLOWED_WINDOWS', DEFAULT_ALLOWED_WINDOWS)
UNIT = os.environ.get('SIXFA_UNIT') or DEFAULT_UNIT

# Logging configuration
DEBUG_MODE = _env_flag('SIXFA_DEBUG')
LOG_TO_FILE = _env_flag('SIXFA_LOG')
LOG_DIRECTORY = get_log_directory()
