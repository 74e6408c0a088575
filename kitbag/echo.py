"""Print command-line arguments joined by a separator."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO


def echo(
    newline: bool,
    sep: str,
    args: Iterable[str],
    out: TextIO | None = None,
) -> None:
    """Write ``args`` joined by ``sep`` to ``out``, optionally ending the line."""
    stream = sys.stdout if out is None else out
    stream.write(sep.join(args))
    if newline:
        stream.write("\n")


def echo_with_indices(args: Iterable[str]) -> Iterator[str]:
    """Yield each argument followed by its position, one per line."""
    for index, arg in enumerate(args):
        yield f"{arg} {index}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="echo", description="Print arguments.")
    parser.add_argument(
        "-n", action="store_true", dest="no_newline", help="omit trailing newline"
    )
    parser.add_argument("-s", default=" ", dest="sep", help="separator")
    parser.add_argument(
        "--indices",
        action="store_true",
        help="print each argument on its own line with its index",
    )
    parser.add_argument("args", nargs=argparse.REMAINDER)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the echo command."""
    options = _build_parser().parse_args(argv)
    args = list(options.args)
    if args and args[0] == "--":
        args = args[1:]
    if options.indices:
        for line in echo_with_indices(args):
            print(line)
        return 0
    echo(not options.no_newline, options.sep, args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())