from dataclasses import dataclass

import pytest

from kitbag.equal import equal


class MyString(str):
    pass


@dataclass(eq=False)
class Box:
    value: int


@dataclass(eq=False)
class Link:
    value: str
    tail: object = None


def _f():
    return None


ONE, ONE_AGAIN, TWO = Box(1), Box(1), Box(2)

CYCLE_LIST = []
CYCLE_LIST.append(CYCLE_LIST)
CYCLE_PTR1 = []
CYCLE_PTR1.append(CYCLE_PTR1)
CYCLE_PTR2 = []
CYCLE_PTR2.append(CYCLE_PTR2)


@pytest.mark.parametrize(
    "x, y, want",
    [
        (1, 1, True),
        (1, 2, False),
        (1, 1.0, False),
        ("foo", "foo", True),
        ("foo", "bar", False),
        (MyString("foo"), "foo", False),
        (["foo"], ["foo"], True),
        (["foo"], ["bar"], False),
        ([], [], True),
        (CYCLE_LIST, CYCLE_LIST, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3]}, True),
        ({"foo": [1, 2, 3]}, {"foo": [1, 2, 3, 4]}, False),
        ({}, {}, True),
        (ONE, ONE, True),
        (ONE, TWO, False),
        (ONE, ONE_AGAIN, True),
        (CYCLE_PTR1, CYCLE_PTR1, True),
        (CYCLE_PTR2, CYCLE_PTR2, True),
        (CYCLE_PTR1, CYCLE_PTR2, True),
        (None, None, True),
        (None, _f, False),
        (_f, _f, True),
        (lambda: None, lambda: None, False),
        ((1, 2, 3), (1, 2, 3), True),
        ((1, 2, 3), (1, 2, 4), False),
        ([ONE], [ONE], True),
        ([ONE], [TWO], False),
        ([ONE_AGAIN], [ONE], True),
    ],
)
def test_equal(x, y, want):
    assert equal(x, y) is want


def test_equal_examples():
    assert equal([1, 2, 3], [1, 2, 3]) is True
    assert equal(["foo"], ["bar"]) is False
    assert equal({}, {}) is True


def test_equal_cycle():
    a, b, c = Link("a"), Link("b"), Link("c")
    a.tail, b.tail, c.tail = b, a, c
    assert equal(a, a) is True
    assert equal(b, b) is True
    assert equal(c, c) is True
    assert equal(a, b) is False
    assert equal(a, c) is False


def test_nan_is_not_equal():
    nan = float("nan")
    assert equal(nan, nan) is False


def test_missing_key():
    assert equal({"a": 1}, {"b": 1}) is False


def test_none_and_empty_differ():
    assert equal(None, []) is False