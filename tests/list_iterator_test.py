import pytest

from pylist.datastructures import ArrayList, ListIterator


def test_begin_equals_end_on_empty_list():
    lst = ArrayList()
    assert lst.begin() == lst.end()


def test_walk_from_begin_to_end():
    lst = ArrayList([1, 2, 3])
    it, end = lst.begin(), lst.end()
    seen = []
    while it != end:
        seen.append(it.value)
        it.advance()
    assert seen == [1, 2, 3]


def test_advance_and_post_advance():
    lst = ArrayList(["a", "b", "c"])
    it = lst.begin()
    assert it.advance() is it
    assert it.value == "b"

    old = it.post_advance()
    assert old.value == "b"
    assert it.value == "c"
    assert old.position == 1 and it.position == 2


def test_value_setter_writes_through_to_the_list():
    lst = ArrayList([1, 2, 3])
    it = lst.begin().advance()
    it.value = 20
    assert lst.to_py() == [1, 20, 3]


def test_cursors_compare_by_buffer_and_position():
    a = ArrayList([1, 2])
    b = ArrayList([1, 2])
    assert a.begin() == a.begin()
    assert a.begin() != a.end()
    assert a.begin() != b.begin()
    assert a.begin() != 0


def test_python_iteration_stops_at_size():
    lst = ArrayList([4, 5])
    it = iter(lst)
    assert isinstance(it, ListIterator)
    assert next(it) == 4
    assert next(it) == 5
    with pytest.raises(StopIteration):
        next(it)
    assert list(ArrayList()) == []
