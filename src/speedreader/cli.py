#!/usr/bin/env python3
"""
Command-line entry point for Speed Reader.

    cat book.txt | speedreader --wpm=400 --lines=$(tput lines) --cols=$(tput cols)
"""

import argparse
import functools
import sys
from typing import IO, List, Optional

from speedreader import __version__
from speedreader.core.input_reader import read_input
from speedreader.core.interrupt import InterruptHandler
from speedreader.core.rsvp import RSVPEngine
from speedreader.settings.settings_models import (
    DEFAULT_COLS,
    DEFAULT_LINES,
    DEFAULT_LOOP_COUNT,
    DEFAULT_START_INDEX,
    DEFAULT_WORDS_PER_MINUTE,
    ReaderOptions,
    validate_options,
)
from speedreader.ui.presentation import PresentationLoop
from speedreader.ui.renderer import FrameRenderer
from speedreader.utils.error_codes import format_error_for_console
from speedreader.utils.exceptions import ConfigurationError, SpeedReaderError
from speedreader.utils.structured_logging import configure_logging, get_logger

logger = get_logger(__name__)

# Help messages
HELP_LINES = "lines in terminal, e.g. '$(tput lines)'"
HELP_COLS = "columns in terminal, e.g. '$(tput cols)'"
HELP_WORDS_PER_MINUTE = "words per minute, recommend somewhere from 300 - 700"
HELP_LOOP_COUNT = "number of times to loop, 0 for infinite"
HELP_START_INDEX = "to start at a particular word in a book, specify the word's index"


def non_negative_int(value: str) -> int:
    """argparse type accepting integers >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid non-negative integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def positive_int(value: str) -> int:
    """argparse type accepting integers >= 1."""
    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speedreader",
        description="Read piped text one word at a time in the middle of the terminal.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cat book.txt | speedreader --wpm=400
  cat book.txt | speedreader --lines=$(tput lines) --cols=$(tput cols)
  cat book.txt | speedreader --loop=0                 # repeat until Ctrl-C
  cat book.txt | speedreader --start-index=1520       # resume after Ctrl-C
"""
    )
    parser.add_argument("--lines", type=non_negative_int, default=DEFAULT_LINES, help=HELP_LINES)
    parser.add_argument("--cols", type=non_negative_int, default=DEFAULT_COLS, help=HELP_COLS)
    parser.add_argument("--wpm", type=positive_int, default=DEFAULT_WORDS_PER_MINUTE,
                        help=HELP_WORDS_PER_MINUTE)
    parser.add_argument("--loop", type=non_negative_int, default=DEFAULT_LOOP_COUNT,
                        help=HELP_LOOP_COUNT)
    parser.add_argument("--start-index", type=non_negative_int, default=DEFAULT_START_INDEX,
                        help=HELP_START_INDEX)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> ReaderOptions:
    """Build validated ReaderOptions from parsed arguments.

    Raises:
        ConfigurationError: If the values fail validation
    """
    options, result = validate_options({
        "lines": args.lines,
        "cols": args.cols,
        "wpm": args.wpm,
        "loop": args.loop,
        "start_index": args.start_index,
    })
    if not result.is_valid:
        raise ConfigurationError("; ".join(result.errors))
    for warning in result.warnings:
        logger.info(f"Options: {warning}")
    return options


def parse_options(argv: Optional[List[str]] = None) -> ReaderOptions:
    """Parse command-line flags. Invalid flags exit with status 2."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return options_from_args(args)
    except ConfigurationError as e:
        parser.error(e.message)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[IO] = None,
    stdout: Optional[IO] = None,
) -> int:
    """Main entry point.

    Returns:
        Exit status: 0 on completion or interrupt, 1 when there is nothing
        to read
    """
    configure_logging()

    options = parse_options(argv)
    output = stdout if stdout is not None else sys.stdout

    try:
        text = read_input(stdin)

        engine = RSVPEngine()
        engine.parse_text(text)
        logger.info(
            "Parsed input",
            words=engine.word_count,
            estimate=engine.calculate_time_remaining(engine.word_count, options.wpm),
        )

        renderer = FrameRenderer(options.middle_row, options.middle_col, stream=output)
        PresentationLoop(
            engine,
            options,
            renderer=renderer,
            interrupt_handler_factory=functools.partial(InterruptHandler, stream=output),
        ).run()
    except SpeedReaderError as e:
        logger.debug(f"Session aborted: {e.message}", error_code=e.error_code)
        print(format_error_for_console(e.error_code, details=e.message), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Ctrl-C before playback started, nothing to resume
        logger.info("Interrupted before playback")
        output.write("\n")
        output.flush()
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
