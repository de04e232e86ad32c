import pytest

from pushswap.libft.linked_list import LinkedList


def test_items_round_trip():
    items = ["a", "b", "c"]
    assert list(LinkedList(items)) == items


def test_empty_list_has_no_length_and_no_last():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.last() is None
    assert list(lst) == []


def test_push_front_and_back_order():
    lst = LinkedList([2])
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_last_follows_push_back():
    lst = LinkedList()
    for value in ("x", "y", "z"):
        lst.push_back(value)
        assert lst.last() == value


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("only")
    assert lst.last() == "only"
    assert list(lst) == ["only"]


def test_pop_front_calls_delete_and_returns_content():
    deleted = []
    lst = LinkedList([10, 20])
    assert lst.pop_front(deleted.append) == 10
    assert deleted == [10]
    assert list(lst) == [20]
    assert lst.last() == 20


def test_pop_front_last_element_empties_list():
    lst = LinkedList(["one"])
    lst.pop_front()
    assert len(lst) == 0
    assert lst.last() is None
    lst.push_back("two")
    assert list(lst) == ["two"]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    deleted = []
    items = [1, 2, 3, 4]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0


def test_iterate_visits_all():
    seen = []
    items = ["p", "q"]
    LinkedList(items).iterate(seen.append)
    assert seen == items


def test_map_builds_new_list_and_leaves_original():
    items = [1, 2, 3]
    original = LinkedList(items)
    mapped = original.map(lambda v: v * 2)
    assert list(mapped) == [v * 2 for v in items]
    assert list(original) == items


def test_map_failure_releases_produced_contents():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value + 100

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [101, 102]