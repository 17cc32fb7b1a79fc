"""Command line interface for the mnemonic codec."""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
import sys
from typing import Iterable, Sequence

from rich.console import Console
from rich.markup import escape

from .codec import DEFAULT_FORMAT, Template, decode, encode_with_format
from .exceptions import MnemonicError
from .utils import configure_logging

LOGGER = logging.getLogger(__name__)

FORMAT_ENV = "MNEMONICODE_FORMAT"

console = Console(stderr=True)

_LOG_LEVELS = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


def _read_bytes(path: str | None) -> bytes:
    if not path or path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: str | None, data: bytes) -> None:
    if not path or path == "-":
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def _add_io_arguments(parser: argparse.ArgumentParser, *, source: str, target: str) -> None:
    parser.add_argument("-i", "--in", dest="input_path", default="-", help=f"{source} (default: stdin)")
    parser.add_argument("-o", "--out", dest="output_path", default="-", help=f"{target} (default: stdout)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=_LOG_LEVELS,
        default=None,
        help="Set the log level for the CLI session",
    )


def _report(exc: BaseException) -> int:
    console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return 1


def _handle_encode(argv: Sequence[str], *, prog: str = "mnemonicode encode") -> int:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Encode binary data as a sequence of words.",
        allow_abbrev=False,
    )
    _add_io_arguments(parser, source="Binary input file", target="Word output file")
    parser.add_argument(
        "-f",
        "--format",
        dest="template",
        default=None,
        help=f"Word layout template (default: ${FORMAT_ENV} or '{DEFAULT_FORMAT}')",
    )
    args = parser.parse_args(list(argv))

    try:
        configure_logging(args.log_level)
        pattern = args.template if args.template is not None else os.getenv(FORMAT_ENV, DEFAULT_FORMAT)
        template = Template(pattern)
        payload = _read_bytes(args.input_path)
        text = encode_with_format(payload, template)
        _write_bytes(args.output_path, text.encode("utf-8"))
    except (MnemonicError, OSError) as exc:
        return _report(exc)

    LOGGER.info("encoded %d bytes with template %r", len(payload), template.pattern)
    return 0


def _handle_decode(argv: Sequence[str], *, prog: str = "mnemonicode decode") -> int:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Decode a sequence of words back into binary data.",
        allow_abbrev=False,
    )
    _add_io_arguments(parser, source="Word input file", target="Binary output file")
    args = parser.parse_args(list(argv))

    try:
        configure_logging(args.log_level)
        data = decode(_read_bytes(args.input_path))
        _write_bytes(args.output_path, data)
    except (MnemonicError, OSError) as exc:
        return _report(exc)

    LOGGER.info("decoded %d bytes", len(data))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mnemonicode",
        description="Convert binary data to and from easily transcribed English words.",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("encode", help="Encode binary data as words")
    subparsers.add_parser("decode", help="Decode words back into binary data")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    args = list(argv) if argv is not None else sys.argv[1:]
    if not args:
        build_parser().print_help()
        return 0

    command, rest = args[0], args[1:]

    if command == "encode":
        return _handle_encode(rest)
    if command == "decode":
        return _handle_decode(rest)
    if command in {"-h", "--help"}:
        build_parser().print_help()
        return 0

    console.print(f"[red]Error:[/red] unknown command '{escape(command)}'")
    build_parser().print_help()
    return 1


def encode_main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the ``mnencode`` filter."""

    return _handle_encode(list(argv) if argv is not None else sys.argv[1:], prog="mnencode")


def decode_main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the ``mndecode`` filter."""

    return _handle_decode(list(argv) if argv is not None else sys.argv[1:], prog="mndecode")


if __name__ == "__main__":  # pragma: no cover - module entry point
    sys.exit(main())
