"""Populate dataclass fields from HTTP request parameters."""

from __future__ import annotations

import dataclasses
import re
import typing
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import unquote

_INT_SYNTAX = re.compile(r"[+-]?[0-9]+")
_BAD_ESCAPE = re.compile(r"%(?![0-9a-fA-F]{2})")
_LIST_HINT = re.compile(r"(?:list|List|typing\.List)\[(.+)\]")
_SIMPLE_HINTS = {"str": str, "int": int, "bool": bool, "float": float, "bytes": bytes}
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}


class ParamError(ValueError):
    """A request parameter could not be parsed or stored."""


def _unescape(s: str) -> str:
    bad = _BAD_ESCAPE.search(s)
    if bad:
        start = bad.start()
        raise ParamError(f'invalid URL escape "{s[start:start + 3]}"')
    return unquote(s.replace("+", " "), errors="replace")


def _parse_query(query: str) -> dict[str, list[str]]:
    form: dict[str, list[str]] = {}
    first_error: ParamError | None = None
    for part in query.split("&"):
        if not part:
            continue
        if ";" in part:
            first_error = first_error or ParamError(
                "invalid semicolon separator in query"
            )
            continue
        key, _, value = part.partition("=")
        try:
            key, value = _unescape(key), _unescape(value)
        except ParamError as err:
            first_error = first_error or err
            continue
        form.setdefault(key, []).append(value)
    if first_error is not None:
        raise first_error
    return form


def _normalize(form: str | Mapping[str, str | Iterable[str]]) -> dict[str, list[str]]:
    if isinstance(form, str):
        return _parse_query(form)
    return {
        name: [values] if isinstance(values, str) else list(values)
        for name, values in form.items()
    }


def _resolve(hint: Any) -> Any:
    """Turn a field annotation written as text into the type it names."""
    if not isinstance(hint, str):
        return hint
    text = hint.strip()
    match = _LIST_HINT.fullmatch(text)
    if match:
        return list[_resolve(match.group(1))]
    return _SIMPLE_HINTS.get(text, text)


def _kind_name(kind: Any) -> str:
    return getattr(kind, "__name__", str(kind))


def _populate(kind: Any, value: str) -> Any:
    if kind is str:
        return value
    if kind is bool:
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
        raise ValueError(f'strconv.ParseBool: parsing "{value}": invalid syntax')
    if kind is int:
        if not _INT_SYNTAX.fullmatch(value):
            raise ValueError(f'strconv.ParseInt: parsing "{value}": invalid syntax')
        number = int(value)
        if not _INT64_MIN <= number <= _INT64_MAX:
            raise ValueError(
                f'strconv.ParseInt: parsing "{value}": value out of range'
            )
        return number
    raise ValueError(f"unsupported kind {_kind_name(kind)}")


def unpack(form: str | Mapping[str, str | Iterable[str]], target: Any) -> Any:
    """Set the fields of dataclass instance ``target`` from request parameters.

    ``form`` is a query string or a mapping of names to values. A field is
    matched by its ``http`` metadata entry or else its lower-cased name;
    unknown parameters are ignored. List fields collect every value.
    """
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        raise TypeError("unpack target must be a dataclass instance")
    values_by_name = _normalize(form)

    fields = {
        f.metadata.get("http") or f.name.lower(): f
        for f in dataclasses.fields(target)
    }

    for name, values in values_by_name.items():
        f = fields.get(name)
        if f is None:
            continue
        hint = _resolve(f.type)
        is_list = typing.get_origin(hint) is list
        elem_kind = (typing.get_args(hint) or (str,))[0] if is_list else hint
        for value in values:
            try:
                item = _populate(elem_kind, value)
            except ValueError as err:
                raise ParamError(f"{name}: {err}") from None
            if is_list:
                current = getattr(target, f.name) or []
                setattr(target, f.name, [*current, item])
            else:
                setattr(target, f.name, item)
    return target