import pytest

from kitbag.graph import Graph


@pytest.fixture
def graph():
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("c", "d")
    g.add_edge("a", "d")
    g.add_edge("d", "a")
    return g


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("a", "b", True),
        ("c", "d", True),
        ("a", "d", True),
        ("d", "a", True),
        ("x", "b", False),
        ("x", "d", False),
        ("d", "x", False),
    ],
)
def test_has_edge(graph, source, target, expected):
    assert graph.has_edge(source, target) is expected


def test_edges_are_directed(graph):
    assert graph.has_edge("a", "b")
    assert not graph.has_edge("b", "a")


def test_adding_twice_is_harmless():
    g = Graph()
    g.add_edge("p", "q")
    g.add_edge("p", "q")
    assert g.has_edge("p", "q")
    assert not g.has_edge("q", "p")