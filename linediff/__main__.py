"""
linediff Entry Point
====================

Command-line interface for the line-set differ. Parses flags, loads both
sources, optionally writes an HTML report and prints the diff to stdout.

Usage:
    python -m linediff <old-source> <new-source> [--added] [--removed] [--print]
"""
import argparse
import sys
from typing import IO, List, Optional

from .engine import diff
from .errors import InvalidOption, LineDiffError, UsageError
from .models import ColorMode, Options
from .reporter import ConsoleReporter
from .utils import ENCODING, ERRORS
from .visualizer import HTMLVisualizer


class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of exiting so every failure maps to exit code 1."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="linediff",
        description="linediff: compare two line lists as sorted, de-duplicated sets.",
        allow_abbrev=False,
    )
    parser.add_argument("old_source", help="Old list: a file path, /dev/fd/N or '-' for stdin")
    parser.add_argument("new_source", help="New list: a file path, /dev/fd/N or '-' for stdin")
    parser.add_argument("--added", action="store_true", help="Show only added lines (unless --removed is also given)")
    parser.add_argument("--removed", action="store_true", help="Show only removed lines (unless --added is also given)")
    parser.add_argument("--print", dest="print_sorted", action="store_true",
                        help="Print both normalized, sorted sources before the diff")
    parser.add_argument("--interleave", action="store_true",
                        help="Merge removed and added lines into one sorted stream")
    parser.add_argument("--color", choices=[mode.value for mode in ColorMode], default=ColorMode.AUTO.value,
                        help="Color +/- lines (default: auto, only on a terminal)")
    parser.add_argument("--html", metavar="PATH", help="Also write an HTML report to PATH")
    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> argparse.Namespace:
    """
    Parses argv, rejecting anything the parser does not know.

    Raises:
        InvalidOption: For an unrecognized flag.
        UsageError: For missing or extra positional arguments.
    """
    args, extras = parser.parse_known_args(argv)
    for token in extras:
        if token.startswith("-") and token != "-":
            raise InvalidOption(token)
    if extras:
        raise UsageError(f"unexpected argument: {extras[0]}")
    return args


def _console_stream() -> IO[str]:
    # Lines are UTF-8 with undecodable bytes as surrogates; write the input bytes back as-is.
    stream = sys.stdout
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding=ENCODING, errors=ERRORS)
    return stream


def main(argv: Optional[List[str]] = None, stdout: Optional[IO[str]] = None,
         stderr: Optional[IO[str]] = None) -> int:
    """
    Runs linediff and returns the process exit code.

    1. Parses command line arguments.
    2. Reads and normalizes both sources.
    3. Writes the HTML report, if requested.
    4. Prints the sorted dumps and diff lines.

    Nothing is written to stdout unless every earlier step succeeded.
    """
    stderr = stderr if stderr is not None else sys.stderr
    parser = build_parser()

    try:
        args = parse_arguments(parser, argv)
        options = Options.from_flags(
            added=args.added,
            removed=args.removed,
            print_sorted=args.print_sorted,
            color=ColorMode(args.color),
            interleave=args.interleave,
        )
        result = diff(args.old_source, args.new_source, options)
        if args.html:
            HTMLVisualizer().generate(result, args.html, options)
    except LineDiffError as e:
        if isinstance(e, (UsageError, InvalidOption)):
            stderr.write(parser.format_usage())
        print(f"Error: {e}", file=stderr)
        return e.exit_code

    reporter = ConsoleReporter(stdout if stdout is not None else _console_stream(), options.color)
    reporter.report(result, options)

    if args.html:
        print(f"Report written to {args.html}", file=stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
