"""Movies as JSON."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from kitbag.github import _lookup

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


@dataclass
class Movie:
    """A film, its release year, whether it is in colour and its actors."""

    title: str
    year: int
    color: bool = False
    actors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """The JSON object for this movie; ``color`` appears only when true."""
        data: dict[str, Any] = {"Title": self.title, "released": self.year}
        if self.color:
            data["color"] = True
        data["Actors"] = list(self.actors)
        return data


MOVIES = [
    Movie("Casablanca", 1942, False, ["Humphrey Bogart", "Ingrid Bergman"]),
    Movie("Cool Hand Luke", 1967, True, ["Paul Newman"]),
    Movie("Bullitt", 1968, True, ["Steve McQueen", "Jacqueline Bisset"]),
]


def movies_to_json(movies: Iterable[Movie], indent: str | int | None = None) -> str:
    """Encode ``movies`` as a JSON array, compact unless ``indent`` is given.

    HTML-sensitive characters are written as ``\\u`` escapes.
    """
    data = [m.to_dict() for m in movies]
    if indent is None:
        text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(data, ensure_ascii=False, indent=indent)
    return "".join(_JSON_ESCAPES.get(ch, ch) for ch in text)


def titles_from_json(data: str | bytes) -> list[str]:
    """Decode a JSON array of objects and return each object's title.

    Keys are matched without regard to case; a missing title is ``""``.
    Raises :class:`ValueError` on malformed input.
    """
    decoded = json.loads(data)
    if decoded is None:
        return []
    if not isinstance(decoded, list):
        raise ValueError(f"cannot decode {type(decoded).__name__} into a list of movies")
    titles = []
    for element in decoded:
        if element is None:
            titles.append("")
            continue
        if not isinstance(element, dict):
            raise ValueError(f"cannot decode {type(element).__name__} into a movie")
        title = _lookup(element, "title")
        if title is None:
            title = ""
        elif not isinstance(title, str):
            raise ValueError(f"cannot decode {type(title).__name__} into Title")
        titles.append(title)
    return titles