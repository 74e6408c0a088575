"""Search the GitHub issue tracker."""

from __future__ import annotations

import json
import re
import urllib.parse
import urllib.request
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any
from urllib.error import HTTPError

ISSUES_URL = "https://api.github.com/search/issues"
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_TIMESTAMP = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(\.\d+)?([Zz]|[+-]\d{2}:\d{2})"
)


@dataclass
class User:
    """A GitHub account."""

    login: str = ""
    html_url: str = ""


@dataclass
class Issue:
    """One issue from a search result; ``body`` is in Markdown."""

    number: int = 0
    html_url: str = ""
    title: str = ""
    state: str = ""
    user: User | None = None
    created_at: datetime = ZERO_TIME
    body: str = ""


@dataclass
class IssuesSearchResult:
    """The total number of matches and the issues returned."""

    total_count: int = 0
    items: list[Issue | None] = field(default_factory=list)


class SearchError(Exception):
    """The search query was answered with an unsuccessful status."""


def _lookup(obj: Mapping[str, Any], name: str) -> Any:
    """Value of the last key matching ``name`` without regard to case."""
    wanted = name.lower()
    found = None
    for key, value in obj.items():
        if key.lower() == wanted:
            found = value
    return found


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {type(value).__name__} into string field {name}")
    return value


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {type(value).__name__} into int field {name}")
    return value


def _as_object(value: Any, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"cannot decode {type(value).__name__} into object {name}")
    return value


def _parse_time(value: Any) -> datetime:
    if value is None:
        return ZERO_TIME
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {type(value).__name__} into time")
    m = _TIMESTAMP.fullmatch(value)
    if m is None:
        raise ValueError(f"invalid RFC 3339 time {value!r}")
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    fraction, zone = m.group(7), m.group(8)
    micros = int((fraction[1:] + "000000")[:6]) if fraction else 0
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6])))
    return datetime(year, month, day, hour, minute, second, micros, tzinfo=tz)


def _parse_user(value: Any) -> User | None:
    if value is None:
        return None
    obj = _as_object(value, "user")
    return User(
        login=_as_str(_lookup(obj, "login"), "login"),
        html_url=_as_str(_lookup(obj, "html_url"), "html_url"),
    )


def _parse_issue(value: Any) -> Issue | None:
    if value is None:
        return None
    obj = _as_object(value, "issue")
    return Issue(
        number=_as_int(_lookup(obj, "number"), "number"),
        html_url=_as_str(_lookup(obj, "html_url"), "html_url"),
        title=_as_str(_lookup(obj, "title"), "title"),
        state=_as_str(_lookup(obj, "state"), "state"),
        user=_parse_user(_lookup(obj, "user")),
        created_at=_parse_time(_lookup(obj, "created_at")),
        body=_as_str(_lookup(obj, "body"), "body"),
    )


def parse_search_result(payload: Mapping[str, Any] | str | bytes) -> IssuesSearchResult:
    """Build a search result from decoded JSON or from JSON text.

    Keys are matched without regard to case; missing keys keep zero values.
    Raises :class:`ValueError` on malformed input.
    """
    if isinstance(payload, (str, bytes, bytearray)):
        payload = json.loads(payload)
    obj = _as_object(payload, "search result")
    items = _lookup(obj, "items")
    if items is None:
        items = []
    elif not isinstance(items, list):
        raise ValueError(f"cannot decode {type(items).__name__} into items")
    return IssuesSearchResult(
        total_count=_as_int(_lookup(obj, "total_count"), "total_count"),
        items=[_parse_issue(item) for item in items],
    )


def search_issues(terms: Iterable[str]) -> IssuesSearchResult:
    """Query the GitHub issue tracker for issues matching ``terms``.

    Raises :class:`SearchError` for a non-200 status, :class:`OSError` if the
    request fails and :class:`ValueError` if the answer cannot be decoded.
    """
    q = urllib.parse.quote_plus(" ".join(terms))
    try:
        resp = urllib.request.urlopen(ISSUES_URL + "?q=" + q)
    except HTTPError as err:
        raise SearchError(f"search query failed: {err.code} {err.reason}") from None
    with resp:
        status = getattr(resp, "status", 200)
        if status != 200:
            raise SearchError(f"search query failed: {status} {resp.reason}")
        payload = json.load(resp)
    return parse_search_result(payload)