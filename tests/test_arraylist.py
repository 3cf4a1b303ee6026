import pytest

from lifeparent.arraylist import ArrayList


def int_cmp(a, b):
    return (a > b) - (a < b)


def test_append_returns_index_and_grows():
    arr = ArrayList()
    indices = [arr.append(v) for v in ["a", "b", "c"]]
    assert indices == [0, 1, 2]
    assert list(arr) == ["a", "b", "c"]
    assert len(arr) == 3


def test_pop_returns_last_and_none_when_empty():
    arr = ArrayList([1, 2])
    assert arr.pop() == 2
    assert arr.pop() == 1
    assert arr.pop() is None
    assert len(arr) == 0


def test_pop_front_returns_first_and_none_when_empty():
    arr = ArrayList([4, 5, 6])
    assert arr.pop_front() == 4
    assert list(arr) == [5, 6]
    arr.pop_front()
    arr.pop_front()
    assert arr.pop_front() is None


def test_remove_shifts_items():
    arr = ArrayList([10, 20, 30, 40])
    assert arr.remove(1) == 20
    assert list(arr) == [10, 30, 40]


@pytest.mark.parametrize("index", [4, 100, -1])
def test_remove_out_of_range_returns_none(index):
    arr = ArrayList([10, 20, 30, 40])
    assert arr.remove(index) is None
    assert list(arr) == [10, 20, 30, 40]


def test_contains_uses_comparator():
    arr = ArrayList([3, 7, 9], comparator=int_cmp)
    assert arr.contains(7)
    assert not arr.contains(8)


def test_contains_without_comparator_raises():
    arr = ArrayList([3])
    with pytest.raises(TypeError):
        arr.contains(3)


def test_swap_exchanges_and_notifies():
    seen = []
    arr = ArrayList(["x", "y", "z"], swap_updater=lambda item, idx: seen.append((item, idx)))
    arr.swap(0, 2)
    assert list(arr) == ["z", "y", "x"]
    assert sorted(seen) == [("x", 2), ("z", 0)]


def test_getitem_and_setitem():
    arr = ArrayList([1, 2, 3])
    arr[1] = 9
    assert arr[1] == 9
    assert arr[-1] == 3