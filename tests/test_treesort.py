import random

from kitbag.treesort import tree_sort


def test_sort_random():
    rng = random.Random(7)
    data = [rng.randrange(1 << 62) % 50 for _ in range(50)]
    original = list(data)
    tree_sort(data)
    assert all(a <= b for a, b in zip(data, data[1:]))
    assert data == sorted(original)


def test_sort_in_place():
    data = [3, 1, 2]
    alias = data
    tree_sort(data)
    assert alias == [1, 2, 3]


def test_sort_empty_and_single():
    empty: list[int] = []
    tree_sort(empty)
    assert empty == []
    one = [5]
    tree_sort(one)
    assert one == [5]


def test_sort_keeps_duplicates():
    data = [2, 2, 1, 1, 2]
    tree_sort(data)
    assert data == [1, 1, 2, 2, 2]


def test_sort_degenerate_tree():
    data = list(range(3000, 0, -1))
    tree_sort(data)
    assert data == list(range(1, 3001))