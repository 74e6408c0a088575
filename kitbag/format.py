"""Format any value as a short string without looking inside it."""

from __future__ import annotations

from typing import Any

_REFERENCE_TYPES = (list, dict, set, bytearray)

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _quote(s: str) -> str:
    """Return ``s`` as a double-quoted literal with escapes for unprintables."""
    parts = ['"']
    for ch in s:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        else:
            code = ord(ch)
            if code < 0x20 or code == 0x7F:
                parts.append(f"\\x{code:02x}")
            elif code < 0x10000:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
    parts.append('"')
    return "".join(parts)


def _type_name(value: Any) -> str:
    """Name of the type of ``value``, qualified by module unless built in."""
    cls = type(value)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def format_any(value: Any) -> str:
    """Format ``value`` as a string without inspecting its internal structure."""
    if value is None:
        return "invalid"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, str):
        return _quote(str(value))
    if isinstance(value, _REFERENCE_TYPES) or callable(value):
        return f"{_type_name(value)} 0x{id(value):x}"
    return f"{_type_name(value)} value"