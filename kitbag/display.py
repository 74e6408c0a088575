"""Display the structure of a value, one leaf per line."""

from __future__ import annotations

import dataclasses
import sys
from collections.abc import Iterator
from types import ModuleType
from typing import Any, TextIO

from kitbag.format import _type_name, format_any


def _is_struct(v: Any) -> bool:
    return (
        hasattr(v, "__dict__")
        and not callable(v)
        and not isinstance(v, (type, ModuleType))
    )


def _lines(path: str, v: Any) -> Iterator[str]:
    if v is None:
        yield f"{path} = nil"
    elif dataclasses.is_dataclass(v) and not isinstance(v, type):
        for f in dataclasses.fields(v):
            yield from _lines(f"{path}.{f.name}", getattr(v, f.name))
    elif isinstance(v, tuple) and hasattr(type(v), "_fields"):
        for name in type(v)._fields:
            yield from _lines(f"{path}.{name}", getattr(v, name))
    elif isinstance(v, (list, tuple)):
        for i, item in enumerate(v):
            yield from _lines(f"{path}[{i}]", item)
    elif isinstance(v, dict):
        for key, value in v.items():
            yield from _lines(f"{path}[{format_any(key)}]", value)
    elif _is_struct(v):
        for name, value in vars(v).items():
            yield from _lines(f"{path}.{name}", value)
    else:
        yield f"{path} = {format_any(v)}"


def display(name: str, x: Any, out: TextIO | None = None) -> None:
    """Write the structure of ``x`` under the label ``name`` to ``out``."""
    stream = sys.stdout if out is None else out
    type_name = "<nil>" if x is None else _type_name(x)
    stream.write(f"Display {name} ({type_name}):\n")
    if x is None:
        stream.write(f"{name} = invalid\n")
        return
    for line in _lines(name, x):
        stream.write(line + "\n")