import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.lists import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_push_back_keeps_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in ("a", "b", "c"):
        lst.push_front(item)
    assert list(lst) == ["c", "b", "a"]


def test_last_node():
    lst = LinkedList(["x", "y"])
    last = lst.last()
    assert isinstance(last, Node)
    assert last.content == "y"
    assert last.next is None


def test_last_after_push_front_on_empty():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last().content == "only"
    lst.push_back("tail")
    assert lst.last().content == "tail"
    assert list(lst) == ["only", "tail"]


def test_clear_releases_each_item_in_order():
    released = []
    lst = LinkedList([1, 2, 3])
    lst.clear(released.append)
    assert released == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_clear_without_release_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0
    assert lst.last() is None


def test_iterate_visits_all():
    seen = []
    LinkedList(["p", "q"]).iterate(seen.append)
    assert seen == ["p", "q"]


def test_map_builds_new_list():
    source = LinkedList([1, 2, 3])
    mapped = source.map(lambda x: x * 10)
    assert list(mapped) == [10, 20, 30]
    assert list(source) == [1, 2, 3]


def test_map_failure_releases_and_raises():
    released = []
    source = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        source.map(lambda x: None if x == 3 else x, released.append)
    assert released == [1, 2]
    assert list(source) == [1, 2, 3]


def test_map_empty_list():
    assert len(LinkedList().map(lambda x: x)) == 0


@given(st.lists(st.integers()))
def test_len_matches_iteration(items):
    lst = LinkedList(items)
    assert len(lst) == len(items)
    assert list(lst) == items


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_front_and_back_pushes(front, back):
    lst = LinkedList()
    for item in back:
        lst.push_back(item)
    for item in front:
        lst.push_front(item)
    assert list(lst) == list(reversed(front)) + back
    assert len(lst) == len(front) + len(back)