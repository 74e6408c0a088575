"""Utilities for word games."""

from __future__ import annotations


def is_palindrome_bytes(s: str) -> bool:
    """Report whether ``s`` reads the same forward and backward, byte by byte.

    Bytes are compared at the start of each encoded character, so letter
    case, punctuation and multi-byte characters are not handled.
    """
    data = s.encode("utf-8")
    last = len(data) - 1
    return all(
        data[i] == data[last - i]
        for i, byte in enumerate(data)
        if byte & 0xC0 != 0x80
    )


def is_palindrome(s: str) -> bool:
    """Report whether ``s`` is a palindrome, ignoring case and non-letters."""
    letters = [ch.lower() for ch in s if ch.isalpha()]
    return letters == letters[::-1]