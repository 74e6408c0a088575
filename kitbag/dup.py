"""Find and report duplicated lines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field


@dataclass
class LineInfo:
    """How often a line was seen and the inputs it was seen in."""

    count: int = 0
    filenames: list[str] = field(default_factory=list)

    @property
    def distinct_filenames(self) -> list[str]:
        """Input names without repeats, in order of first appearance."""
        return list(dict.fromkeys(self.filenames))


def _chomp(line: str) -> str:
    return line.removesuffix("\n").removesuffix("\r")


def count_lines(
    lines: Iterable[str],
    counts: MutableMapping[str, LineInfo],
    name: str = "stdin",
) -> MutableMapping[str, LineInfo]:
    """Tally each line into ``counts``, recording ``name`` as its source."""
    for raw in lines:
        line = _chomp(raw)
        info = counts.setdefault(line, LineInfo())
        info.count += 1
        info.filenames.append(name)
    return counts


def duplicates(counts: Mapping[str, int | LineInfo]) -> Iterator[tuple[str, int]]:
    """Yield ``(line, count)`` for every line seen more than once."""
    for line, value in counts.items():
        n = value.count if isinstance(value, LineInfo) else value
        if n > 1:
            yield line, n


def split_file_lines(data: str) -> list[str]:
    """Split whole-file text on newlines, keeping a trailing empty piece."""
    return data.split("\n")


def dedup(lines: Iterable[str]) -> Iterator[str]:
    """Yield each distinct line once, in order of first appearance."""
    seen: set[str] = set()
    for raw in lines:
        line = _chomp(raw)
        if line not in seen:
            seen.add(line)
            yield line


def _open(path: str):
    return open(path, encoding="utf-8", errors="surrogateescape", newline="")


def _gather(files: list[str]) -> tuple[dict[str, LineInfo], bool]:
    counts: dict[str, LineInfo] = {}
    ok = True
    if not files:
        count_lines(sys.stdin, counts, "stdin")
        return counts, ok
    for path in files:
        try:
            with _open(path) as handle:
                count_lines(handle, counts, path)
        except OSError as err:
            print(f"dup: {err}", file=sys.stderr)
            ok = False
    return counts, ok


def _whole_files(files: list[str]) -> dict[str, int]:
    counts: dict[str, int] = {}
    for path in files:
        try:
            with _open(path) as handle:
                data = handle.read()
        except OSError as err:
            print(f"dup: {err}", file=sys.stderr)
            continue
        for line in split_file_lines(data):
            counts[line] = counts.get(line, 0) + 1
    return counts


def _unique(files: list[str]) -> int:
    try:
        if not files:
            for line in dedup(sys.stdin):
                print(line)
            return 0
        lines: list[str] = []
        for path in files:
            with _open(path) as handle:
                lines.extend(handle)
    except OSError as err:
        print(f"dedup: {err}", file=sys.stderr)
        return 1
    for line in dedup(lines):
        print(line)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Print duplicated lines from standard input or the named files."""
    parser = argparse.ArgumentParser(prog="dup", description="Report duplicate lines.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--names",
        action="store_true",
        help="list every line with its count and the files it appeared in",
    )
    mode.add_argument(
        "--whole",
        action="store_true",
        help="read each named file whole and split it on newlines",
    )
    mode.add_argument(
        "--unique", action="store_true", help="print each distinct line once"
    )
    parser.add_argument("files", nargs="*")
    options = parser.parse_args(argv)

    if options.unique:
        return _unique(options.files)

    if options.whole:
        for line, n in duplicates(_whole_files(options.files)):
            print(f"{n}\t{line}")
        return 0

    counts, _ = _gather(options.files)
    if options.names:
        for line, info in counts.items():
            print(f"{info.count}\t{line}\nFilenames:")
            for name in info.distinct_filenames:
                print(name)
            print()
        return 0

    for line, n in duplicates(counts):
        print(f"{n}\t{line}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())