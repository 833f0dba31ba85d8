"""
Color Print Utilities

Coloured console output for the sixfa command line. This is for user-facing
messages only and does not go through logging.
"""

import os
import sys
import platform


# ANSI color codes
class Colors:
    RESET = '\033[0m'
    RED = '\033[31m'
    GREEN = '\033[32m'
    YELLOW = '\033[33m'
    CYAN = '\033[36m'
    BOLD = '\033[1m'


def _supports_color(stream):
    if os.environ.get('NO_COLOR'):
        return False
    return hasattr(stream, 'isatty') and stream.isatty()


def print_color(text, color=Colors.RESET, bold=False, stream=None):
    """
    Print text in the specified color.

    Colour codes are only emitted when the target stream is a terminal, so
    piped output (and captured test output) stays plain.

    Args:
        text: The text to print
        color: The color to use (from Colors class)
        bold: Whether to make the text bold
        stream: Output stream, defaults to sys.stdout
    """
    stream = stream or sys.stdout
    if not _supports_color(stream):
        print(text, file=stream)
        return

    if platform.system() == "Windows":
        os.system("")  # This enables ANSI escape sequences in Windows terminal

    prefix = f"{Colors.BOLD}{color}" if bold else color
    print(f"{prefix}{text}{Colors.RESET}", file=stream)


def print_info(text):
    """Print an informational message in cyan."""
    print_color(text, Colors.CYAN)


def print_success(text):
    """Print a success message in green."""
    print_color(text, Colors.GREEN, bold=True)


def print_warning(text):
    """Print a warning message in yellow to stderr."""
    print_color(text, Colors.YELLOW, stream=sys.stderr)


def print_error(text):
    """Print an error message in red to stderr."""
    print_color(text, Colors.RED, stream=sys.stderr)
