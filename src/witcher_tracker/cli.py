"""Command line entry point.

Reads sentences from standard input (or a script file), prints one
response per line on standard output and stops at ``Exit`` or end of
input. Logs go to standard error.

Usage:
    witcher-tracker [--script FILE] [--no-prompt] [--log-level LEVEL] [--version]
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from witcher_tracker import __version__
from witcher_tracker.core.config import get_settings
from witcher_tracker.core.exceptions import ConfigurationError
from witcher_tracker.core.logging import configure_logging, get_logger
from witcher_tracker.engine.interpreter import Interpreter


logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="witcher-tracker",
        description="Track Geralt's alchemy ingredients, potions, trophies and bestiary.",
    )
    parser.add_argument(
        "--script",
        type=argparse.FileType("r", encoding="utf-8"),
        metavar="FILE",
        help="read sentences from FILE instead of standard input (no prompts)",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        help="do not print the prompt before each line",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="override the configured log level",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def read_lines(
    stream: TextIO,
    prompt: str | None = None,
    output: TextIO | None = None,
) -> Iterator[str]:
    """Yield lines from ``stream``, printing ``prompt`` before each read.

    Args:
        stream: Input stream.
        prompt: Text printed (and flushed) before each read; None for none.
        output: Where the prompt goes, standard output by default.
    """
    output = output or sys.stdout
    while True:
        if prompt is not None:
            output.write(prompt)
            output.flush()
        line = stream.readline()
        if not line:
            return
        yield line


def _write_response(response: str) -> None:
    sys.stdout.write(response + "\n")
    sys.stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interpreter.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` if None.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"witcher-tracker: {' '.join(str(e).split())}", file=sys.stderr)
        return 1

    configure_logging(
        level=args.log_level or settings.effective_log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )

    repl = settings.repl
    interactive = args.script is None
    show_prompt = interactive and repl.show_prompt and not args.no_prompt
    interpreter = Interpreter(settings=repl)

    logger.info("Session started", interactive=interactive, version=__version__)
    if args.script is not None:
        with args.script as script:
            answered = interpreter.run(script, _write_response)
    else:
        lines = read_lines(sys.stdin, prompt=repl.prompt if show_prompt else None)
        answered = interpreter.run(lines, _write_response)
    logger.info("Session ended", lines_answered=answered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
