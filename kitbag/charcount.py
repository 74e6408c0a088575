"""Count Unicode characters in UTF-8 input."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from dataclasses import dataclass, field

UTF_MAX = 4

_SPECIAL_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    "'": "\\'",
}


@dataclass
class CharCounts:
    """Per-character counts, encoded-length histogram and invalid bytes."""

    counts: Counter[str] = field(default_factory=Counter)
    utflen: list[int] = field(default_factory=lambda: [0] * (UTF_MAX + 1))
    invalid: int = 0


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def count_chars(data: bytes) -> CharCounts:
    """Count characters in UTF-8 ``data``; each undecodable byte is one invalid."""
    result = CharCounts()
    pos = 0
    while pos < len(data):
        size = _sequence_length(data[pos])
        try:
            ch = data[pos : pos + size].decode("utf-8") if size else ""
        except UnicodeDecodeError:
            ch = ""
        if len(ch) != 1:
            result.invalid += 1
            pos += 1
            continue
        result.counts[ch] += 1
        result.utflen[size] += 1
        pos += size
    return result


def _quote_rune(ch: str) -> str:
    if ch in _SPECIAL_ESCAPES:
        return f"'{_SPECIAL_ESCAPES[ch]}'"
    code = ord(ch)
    if ch.isprintable() and ch != "\x7f":
        return f"'{ch}'"
    if code < 0x80:
        return f"'\\x{code:02x}'"
    if code < 0x10000:
        return f"'\\u{code:04x}'"
    return f"'\\U{code:08x}'"


def format_counts(counts: CharCounts) -> str:
    """Render the counts as the tab-separated report."""
    parts = ["rune\tcount\n"]
    parts.extend(f"{_quote_rune(ch)}\t{n}\n" for ch, n in counts.counts.items())
    parts.append("\nlen\tcount\n")
    parts.extend(f"{i}\t{n}\n" for i, n in enumerate(counts.utflen) if i > 0)
    if counts.invalid > 0:
        parts.append(f"\n{counts.invalid} invalid UTF-8 characters\n")
    return "".join(parts)


def main(argv: list[str] | None = None) -> int:
    """Count the characters read from standard input."""
    argparse.ArgumentParser(
        prog="charcount", description="Count Unicode characters on standard input."
    ).parse_args(argv)
    try:
        data = sys.stdin.buffer.read()
    except OSError as err:
        print(f"charcount: {err}", file=sys.stderr)
        return 1
    sys.stdout.write(format_counts(count_chars(data)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())