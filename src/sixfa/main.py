"""
sixfa: Compound TOTP Command Line

Generate and verify six-seed compound tokens from the terminal:

- generate: print the compound token for the given seeds
- verify:   check a compound token, exit status 0 on match and 1 on mismatch
- demo:     generate with seeds a-f at the current time and verify it

Seeds are passed positionally and mapped onto the six seed slots the same way
as for any other list caller: missing slots are empty, extras are ignored.
Exit status 2 means invalid input, 3 a fatal environment error.
"""

import sys
import logging
import argparse

from . import config
from .adapters import generate_from_list, verify_from_list
from .totp import current_unix_time, seconds_remaining
from .utils.logger import (setup_logger, set_console_level, get_log_file_path,
                           debug, info, warning, error, critical)
from .utils.colorprint import print_error, print_info, print_success, print_warning

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_INVALID = 2
EXIT_FATAL = 3

DEMO_SEEDS = ["a", "b", "c", "d", "e", "f"]
DEMO_ALLOWED_WINDOWS = 2
DEMO_WINDOW = 15


def build_parser():
    parser = argparse.ArgumentParser(prog="sixfa", description="sixfa: compound six-seed TOTP tokens")
    parser.add_argument("--debug", action="store_true", help="Enable debug output to console")
    parser.add_argument("--no-log", action="store_true", help="Disable logging to file")
    parser.add_argument("--version", action="store_true", help="Show version information and exit")

    timing = argparse.ArgumentParser(add_help=False)
    timing.add_argument("--time", type=int, default=None,
                        help="Unix timestamp in seconds (default: now)")
    timing.add_argument("--window", type=int, default=config.WINDOW,
                        help=f"Window size in seconds (default: {config.WINDOW})")

    subparsers = parser.add_subparsers(dest="command")

    gen = subparsers.add_parser("generate", parents=[timing], help="Generate a compound token")
    gen.add_argument("seeds", nargs="*", metavar="SEED", help="Up to six seeds, in order")

    ver = subparsers.add_parser("verify", parents=[timing], help="Verify a compound token")
    ver.add_argument("token", help="Compound token to verify")
    ver.add_argument("seeds", nargs="*", metavar="SEED", help="Up to six seeds, in order")
    ver.add_argument("--allowed-windows", type=int, default=config.ALLOWED_WINDOWS,
                     help=f"Windows of drift to accept (default: {config.ALLOWED_WINDOWS})")
    ver.add_argument("--unit", default=config.UNIT,
                     help="Time unit marker, currently always seconds")

    demo = subparsers.add_parser("demo", help="Generate and verify a token with seeds a-f")
    demo.add_argument("--window", type=int, default=DEMO_WINDOW,
                      help=f"Window size in seconds (default: {DEMO_WINDOW})")

    return parser


def cmd_generate(args):
    now = args.time if args.time is not None else current_unix_time()
    token = generate_from_list(args.seeds, now, args.window)
    print(token)
    if args.time is None:
        print_info(f"Expires in {seconds_remaining(args.window, now)}s")
    return EXIT_OK


def cmd_verify(args):
    now = args.time if args.time is not None else current_unix_time()
    ok = verify_from_list(args.seeds, now, args.token, args.window, args.allowed_windows, args.unit)
    if ok:
        info("Token verified")
        print_success("Token is valid")
        return EXIT_OK
    warning(f"Token rejected with {args.allowed_windows} allowed window(s)")
    print_warning("Token is not valid")
    return EXIT_MISMATCH


def cmd_demo(args):
    now = current_unix_time()
    token = generate_from_list(DEMO_SEEDS, now, args.window)
    print(f"Generated: {token}")
    ok = verify_from_list(DEMO_SEEDS, now, token, args.window, DEMO_ALLOWED_WINDOWS, config.DEFAULT_UNIT)
    print(f"Verified: {str(ok).lower()}")
    return EXIT_OK if ok else EXIT_MISMATCH


COMMANDS = {
    "generate": cmd_generate,
    "verify": cmd_verify,
    "demo": cmd_demo,
}


def main(argv=None):
    """
    Main entry point for the command line.

    Args:
        argv (list, optional): Arguments without the program name, defaults to sys.argv

    Returns:
        int: Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"{config.APP_NAME} {config.APP_VERSION}")
        return EXIT_OK

    if args.command is None:
        parser.print_help()
        return EXIT_INVALID

    setup_logger(log_to_file=config.LOG_TO_FILE and not args.no_log)
    if args.debug:
        set_console_level(logging.DEBUG)
    if get_log_file_path():
        debug(f"Logging to {get_log_file_path()}")

    try:
        return COMMANDS[args.command](args)
    except (ValueError, TypeError) as e:
        error(f"Invalid input for {args.command}: {e}")
        print_error(f"Error: {e}")
        return EXIT_INVALID
    except RuntimeError as e:
        critical(f"{args.command} failed: {e}")
        print_error(f"Fatal: {e}")
        return EXIT_FATAL


if __name__ == "__main__":
    sys.exit(main())
