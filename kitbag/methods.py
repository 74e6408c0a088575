"""Print the method set of any value."""

from __future__ import annotations

import inspect
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from kitbag.format import _type_name

_EMPTY = object()


def _annotation(ann: Any) -> str:
    if isinstance(ann, str):
        return ann
    if isinstance(ann, type):
        if ann.__module__ == "builtins":
            return ann.__qualname__
        return f"{ann.__module__}.{ann.__qualname__}"
    return repr(ann).replace("typing.", "")


def _param(name: str, annotations: dict, default: Any = _EMPTY) -> str:
    text = name
    ann = annotations.get(name, _EMPTY)
    if ann is not _EMPTY:
        text += f": {_annotation(ann)}"
    if default is not _EMPTY:
        text += (" = " if ann is not _EMPTY else "=") + repr(default)
    return text


def _code_signature(func: Any, skip: int) -> str:
    code = func.__code__
    names = code.co_varnames
    n_pos = code.co_argcount
    n_posonly = code.co_posonlyargcount
    n_kw = code.co_kwonlyargcount
    annotations = dict(getattr(func, "__annotations__", None) or {})
    defaults = func.__defaults__ or ()
    kwdefaults = func.__kwdefaults__ or {}
    first_default = n_pos - len(defaults)

    parts: list[str] = []
    for index, name in enumerate(names[:n_pos]):
        if index >= skip:
            default = defaults[index - first_default] if index >= first_default else _EMPTY
            parts.append(_param(name, annotations, default))
        if index + 1 == n_posonly and n_posonly > skip:
            parts.append("/")

    rest = n_pos + n_kw
    if code.co_flags & inspect.CO_VARARGS:
        parts.append("*" + _param(names[rest], annotations))
        rest += 1
    elif n_kw:
        parts.append("*")
    for name in names[n_pos : n_pos + n_kw]:
        parts.append(_param(name, annotations, kwdefaults.get(name, _EMPTY)))
    if code.co_flags & inspect.CO_VARKEYWORDS:
        parts.append("**" + _param(names[rest], annotations))

    text = "(" + ", ".join(parts) + ")"
    if "return" in annotations:
        text += " -> " + _annotation(annotations["return"])
    return text


def _text_signature(text: str) -> str:
    inner = text.strip()[1:-1]
    parts = [p.strip() for p in inner.split(",") if p.strip()]
    parts = [p for p in parts if not p.startswith("$")]
    if parts == ["/"]:
        parts = []
    return "(" + ", ".join(parts) + ")"


def _signature(bound: Any) -> str:
    is_bound = hasattr(bound, "__func__") and getattr(bound, "__self__", None) is not None
    func = getattr(bound, "__func__", bound)
    while hasattr(func, "__wrapped__"):
        func = func.__wrapped__
    if hasattr(func, "__code__") and hasattr(func, "__defaults__"):
        return _code_signature(func, 1 if is_bound else 0)
    text = getattr(bound, "__text_signature__", None)
    if isinstance(text, str) and text.startswith("(") and text.endswith(")"):
        return _text_signature(text)
    return "(...)"


def _public_methods(x: Any) -> Iterator[str]:
    cls = type(x)
    for name in sorted(dir(cls)):
        if name.startswith("_"):
            continue
        attr = inspect.getattr_static(cls, name, None)
        if isinstance(attr, (staticmethod, classmethod)) or callable(attr):
            yield name


def print_methods(x: Any, out: TextIO | None = None) -> None:
    """Write the type of ``x`` and the signature of each public method."""
    stream = sys.stdout if out is None else out
    type_name = _type_name(x)
    stream.write(f"type {type_name}\n")
    for name in _public_methods(x):
        signature = _signature(getattr(x, name))
        stream.write(f"func ({type_name}) {name}{signature}\n")