"""suffixnest CLI entry point.

Usage: uv run suffixnest [INPUT] [--log-level LEVEL]

Reads cases from INPUT (or stdin when INPUT is omitted or "-") and
prints one answer per case.
"""
import argparse
import io
import logging
import sys

from suffixnest.driver.errors import InputFormatError
from suffixnest.driver.runner import run_cases

EXIT_INPUT_ERROR = 2

# One character per input byte, so no byte sequence can fail to decode.
INPUT_ENCODING = "latin-1"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="suffixnest",
        description="Maximum number of nested patterns per case, via Aho-Corasick links.",
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="Input file with the cases (default: stdin)",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def _stdin() -> io.TextIOBase:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin
    return io.StringIO(buffer.read().decode(INPUT_ENCODING))


def _run(path: str) -> None:
    if path == "-":
        run_cases(_stdin(), sys.stdout)
        return
    with open(path, encoding=INPUT_ENCODING) as stream:
        run_cases(stream, sys.stdout)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        _run(args.input)
    except InputFormatError as exc:
        print(f"suffixnest: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except OSError as exc:
        print(f"suffixnest: cannot read input: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    return 0
