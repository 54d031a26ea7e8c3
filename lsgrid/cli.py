"""
Command-line interface for lsgrid.

This module provides the command-line interface for the lsgrid utility.
"""

import argparse
import logging
import signal
import sys
import traceback
from typing import Any, List, Optional

from rich.console import Console

from lsgrid.config import COLOR_CHOICES, Config, ConfigValidationError
from lsgrid.layout import FillOrder
from lsgrid.listing import EXIT_SERIOUS, DisplayOptions, Lister
from lsgrid.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(args: List[str]) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="lsgrid",
        description="List directory contents in columns that fit the terminal"
    )

    parser.add_argument(
        "-a", "--all",
        action="store_true",
        help="Do not ignore entries starting with ."
    )

    parser.add_argument(
        "-l",
        dest="long",
        action="store_true",
        help="Use a long listing format"
    )

    # Output format; the last one given wins
    parser.add_argument(
        "-x",
        dest="format",
        action="store_const",
        const="across",
        help="List entries by lines instead of by columns"
    )
    parser.add_argument(
        "-C",
        dest="format",
        action="store_const",
        const="columns",
        help="List entries by columns"
    )
    parser.add_argument(
        "-1",
        dest="format",
        action="store_const",
        const="single",
        help="List one entry per line"
    )

    parser.add_argument(
        "-r", "--reverse",
        action="store_true",
        help="Reverse order while sorting"
    )

    parser.add_argument(
        "-n", "--numeric-uid-gid",
        dest="numeric_ids",
        action="store_true",
        help="Like -l, but list numeric user and group IDs"
    )

    parser.add_argument(
        "-w", "--width",
        type=int,
        help="Set output width to COLS",
        metavar="COLS"
    )

    parser.add_argument(
        "--color",
        choices=COLOR_CHOICES,
        help="Colorize the output (default: auto)"
    )

    # Configuration file
    parser.add_argument(
        "--config",
        help="Path to configuration file"
    )

    # Initialize configuration
    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize a new configuration file"
    )

    # Version
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information"
    )

    # Verbose mode
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Verbose mode (-v for progress, -vv for layout decisions and tracebacks)"
    )

    # Log file
    parser.add_argument(
        "--log-file",
        help="Path to file for logging diagnostics"
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Files and directories to list (default: .)"
    )

    parsed = parser.parse_args(args)
    if parsed.width is not None and parsed.width < 0:
        parser.error("argument -w/--width: must not be negative")
    return parsed


def make_console(color: str) -> Console:
    """Create the output console for a color policy.

    Args:
        color: One of ``auto``, ``always`` or ``never``.

    Returns:
        Console: Console writing to stdout.
    """
    if color == "always":
        return Console(force_terminal=True, highlight=False, soft_wrap=True, emoji=False)
    if color == "never":
        return Console(color_system=None, highlight=False, soft_wrap=True, emoji=False)
    return Console(highlight=False, soft_wrap=True, emoji=False)


def build_options(args: argparse.Namespace, config: Config, is_terminal: bool) -> DisplayOptions:
    """Combine command-line arguments with configuration.

    Without an explicit format, output to a terminal is a grid and output to
    anything else is one entry per line.
    """
    fill_order = config.get_fill_order()
    if args.format == "across":
        fill_order = FillOrder.ACROSS_ROWS
    elif args.format == "columns":
        fill_order = FillOrder.DOWN_COLUMNS

    if args.format is None:
        single_column = not is_terminal
    else:
        single_column = args.format == "single"

    return DisplayOptions(
        show_hidden=args.all or config.show_hidden(),
        long=args.long or args.numeric_ids,
        fill_order=fill_order,
        single_column=single_column,
        reverse=args.reverse,
        numeric_ids=args.numeric_ids or config.numeric_ids(),
        min_column_width=config.get_min_column_width(),
        separator_width=config.get_column_separator(),
    )


def handle_keyboard_interrupt(signum: int, frame: Any) -> None:
    """Handle keyboard interrupt (Ctrl+C)."""
    print("\nOperation cancelled by user", file=sys.stderr)
    sys.exit(130)  # 128 + SIGINT


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments without the program name; defaults to ``sys.argv[1:]``.

    Returns:
        int: Exit code.
    """
    # Set up signal handler for Ctrl+C
    signal.signal(signal.SIGINT, handle_keyboard_interrupt)

    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        setup_logging(args.verbose, args.log_file)

        # Handle --init flag
        if args.init:
            Config.create_default_config(args.config)
            return 0

        # Show version and exit
        if args.version:
            from lsgrid import __version__
            print(f"lsgrid version {__version__}")
            return 0

        # Load configuration
        config = Config(args.config)
        config.validate()
        if args.config and not config.config_file_found:
            logger.warning("configuration file %s not found, using defaults", args.config)

        color = args.color or config.get_color()
        console = make_console(color)
        width = args.width if args.width is not None else config.get_width()
        if width is None:
            width = console.width
        logger.info("terminal width %d, color %s", width, color)

        # Forced color must not turn piped output into a grid
        options = build_options(args, config, sys.stdout.isatty())
        return Lister(options, console, width).run(args.paths)

    except ConfigValidationError as e:
        print(f"Error: invalid configuration: {str(e)}", file=sys.stderr)
        return EXIT_SERIOUS
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        if args.verbose > 1:  # Show stack trace in double verbose mode
            traceback.print_exc(file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
