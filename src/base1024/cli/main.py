"""Main CLI entry point for base1024."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from contextlib import ExitStack
from typing import BinaryIO, TextIO

from pydantic import ValidationError

from .. import __version__
from ..config import TranscodeOptions
from ..exceptions import DecodeError
from ..stream import decode_io, encode_io

logger = logging.getLogger(__name__)


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Set up the package logger with consistent formatting on stderr.

    Args:
        verbose: If True, log at DEBUG level instead of WARNING

    Returns:
        Configured package logger
    """
    package_logger = logging.getLogger("base1024")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    return package_logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the base1024 command."""
    parser = argparse.ArgumentParser(
        prog="base1024",
        description="base1024: Binary-to-Emoji Transcoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Encode or decode data from standard input (or a file) as base-1024 emoji text
and print the result to standard output (or a file).

Examples:
  base1024 < key.bin > key.txt            Encode a file
  base1024 -d < key.txt > key.bin         Decode it again
  echo -n "input data" | base1024 -w 20   Encode, 20 symbols per line
        """,
    )

    parser.add_argument(
        "-d",
        "--decode",
        action="store_true",
        help="Decode data instead of encoding it",
    )

    parser.add_argument(
        "-w",
        "--wrap",
        metavar="N",
        type=int,
        default=0,
        help="Wrap encoded lines after N symbols (default 0, no wrapping)",
    )

    parser.add_argument(
        "-i",
        "--input",
        metavar="FILE",
        type=str,
        help="Read from FILE instead of standard input",
    )

    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        type=str,
        help="Write to FILE instead of standard output",
    )

    parser.add_argument(
        "--strict-newlines",
        action="store_true",
        help="Reject line breaks in decoder input instead of ignoring them",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log progress to standard error",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"base1024 {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the base1024 CLI.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for transcoding errors, 2 for invalid options)
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.verbose)

    try:
        options = TranscodeOptions(wrap=args.wrap, ignore_newlines=not args.strict_newlines)
    except ValidationError as e:
        print(f"Error: invalid options: {e}", file=sys.stderr)
        return 2

    try:
        with ExitStack() as stack:
            if args.decode:
                source = _text_input(stack, args.input)
                destination = _binary_output(stack, args.output)
                count = decode_io(source, destination, options)
                logger.info("Decoded %d bytes", count)
            else:
                binary_source = _binary_input(stack, args.input)
                text_destination = _text_output(stack, args.output)
                count = encode_io(binary_source, text_destination, options)
                logger.info("Encoded %d symbols", count)
    except DecodeError as e:
        print(f"Error: failed to decode data: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _binary_input(stack: ExitStack, path: str | None) -> BinaryIO:
    if path is None:
        return sys.stdin.buffer
    return stack.enter_context(open(path, "rb"))


def _binary_output(stack: ExitStack, path: str | None) -> BinaryIO:
    if path is None:
        stack.callback(sys.stdout.buffer.flush)
        return sys.stdout.buffer
    return stack.enter_context(open(path, "wb"))


def _text_input(stack: ExitStack, path: str | None) -> TextIO:
    if path is None:
        wrapper = io.TextIOWrapper(sys.stdin.buffer, encoding="utf-8-sig")
        # Leave the underlying stdin open when the wrapper goes away
        stack.callback(wrapper.detach)
        return wrapper
    return stack.enter_context(open(path, encoding="utf-8-sig"))


def _text_output(stack: ExitStack, path: str | None) -> TextIO:
    if path is None:
        wrapper = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="\n")
        stack.callback(wrapper.detach)
        return wrapper
    return stack.enter_context(open(path, "w", encoding="utf-8", newline="\n"))


if __name__ == "__main__":
    sys.exit(main())
