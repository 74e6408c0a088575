"""A directed graph stored as a map of edge sets."""

from __future__ import annotations


class Graph:
    """A directed graph whose nodes are strings."""

    def __init__(self) -> None:
        self._edges: dict[str, set[str]] = {}

    def add_edge(self, source: str, target: str) -> None:
        """Add an edge from ``source`` to ``target``."""
        self._edges.setdefault(source, set()).add(target)

    def has_edge(self, source: str, target: str) -> bool:
        """Report whether there is an edge from ``source`` to ``target``."""
        return target in self._edges.get(source, ())