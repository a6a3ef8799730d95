#!/usr/bin/env python3
"""Command-line interface for sleepprogress."""

import argparse
import logging
import re
import sys
from collections import Counter
from typing import List, Optional

from sleepprogress import exit_flag
from sleepprogress.countdown import (
    DEFAULT_BAR_WIDTH,
    EXIT_INTERRUPTED,
    EXIT_USAGE,
    CountdownConfig,
    run_countdown,
)
from sleepprogress.display import CountdownDisplay
from sleepprogress.sleeper import CancellableSleeper

logger = logging.getLogger(__name__)

_SECONDS_RE = re.compile(r"\+?[0-9]+")


class UsageErrorParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def parse_width(value: str) -> int:
    if not _SECONDS_RE.fullmatch(value) or int(value) < 1:
        raise argparse.ArgumentTypeError(f"--width must be a positive integer, got {value!r}")
    return int(value)


def _configure_logging(verbose: bool):
    """Route package logging to stderr when verbose, otherwise silence it."""
    package_logger = logging.getLogger("sleepprogress")
    if verbose:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s: %(message)s"))
        package_logger.setLevel(logging.DEBUG)
        package_logger.handlers = [handler]
    else:
        # The progress line owns the terminal
        package_logger.setLevel(logging.CRITICAL)
        package_logger.handlers = [logging.NullHandler()]
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = UsageErrorParser(
        prog="sleepprogress",
        # Prefix matching would turn unknown flags like --no into errors
        allow_abbrev=False,
        description="Sleep for a number of seconds while showing progress",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Overwrite a single line with a progress bar:
  sleepprogress 10

  # One line per second, no bar:
  sleepprogress 10 --multiline --no-bar

  # Only the header and the summary:
  sleepprogress 300 --quiet
        """
    )

    parser.add_argument("seconds", nargs="*", metavar="seconds", help="Number of seconds to sleep (non-negative integer); the first numeric token is used")

    parser.add_argument("--multiline", action="store_true", help="Print one line per second instead of overwriting")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print the header and the final summary")
    parser.add_argument("--bar", dest="show_bar", action="store_true", default=True, help="Show a progress bar (default)")
    parser.add_argument("--no-bar", dest="show_bar", action="store_false", help="Hide the progress bar")
    parser.add_argument("--width", type=parse_width, default=DEFAULT_BAR_WIDTH, help=f"Progress bar width in cells (default: {DEFAULT_BAR_WIDTH})")
    parser.add_argument("--no-color", dest="colorize", action="store_false", help="Disable colored output")
    parser.add_argument("--no-header-times", dest="show_header_times", action="store_false", help="Do not print the start time and ETA")
    parser.add_argument("-v", "--verbose", action="store_true", help="Write debug logging to stderr")

    return parser


def _positional_tokens(argv: List[str], positionals: List[str], unknown: List[str]) -> List[str]:
    """Non-flag tokens in command-line order, including values given to unknown flags."""
    pending = Counter(positionals)
    pending.update(t for t in unknown if not t.startswith("-") or t[1:2].isdigit())
    tokens = []
    for token in argv:
        if pending[token] > 0:
            pending[token] -= 1
            tokens.append(token)
    return tokens


def select_seconds(parser: argparse.ArgumentParser, argv: List[str], positionals: List[str], unknown: List[str]) -> int:
    """Take the first numeric token as the duration; anything else is a usage error."""
    tokens = _positional_tokens(argv, positionals, unknown)
    for token in tokens:
        if _SECONDS_RE.fullmatch(token):
            return int(token)
    if not tokens:
        parser.error("the following arguments are required: seconds")
    parser.error(f"<seconds> must be a non-negative integer, got {tokens[0]!r}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()
    # Unknown flags are ignored rather than rejected
    args, unknown = parser.parse_known_args(argv)
    seconds = select_seconds(parser, argv, args.seconds, unknown)

    _configure_logging(args.verbose)
    if unknown:
        logger.debug(f"Ignoring unrecognized arguments: {unknown}")

    config = CountdownConfig(
        multiline=args.multiline,
        quiet=args.quiet,
        show_bar=args.show_bar,
        colorize=args.colorize,
        bar_width=args.width,
        show_header_times=args.show_header_times,
    )
    display = CountdownDisplay(config)

    latch = exit_flag.FORCE_EXIT
    latch.install()
    if not latch.installed:
        display.warn("Interrupt handler not installed; Ctrl+C will not stop cleanly")

    try:
        result = run_countdown(seconds, latch, CancellableSleeper(latch), display)
    except KeyboardInterrupt:
        display.interrupted(display.elapsed, seconds)
        return EXIT_INTERRUPTED

    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
