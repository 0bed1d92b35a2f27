import pytest

from tinkerbox.linked_list import LinkedList


def _numbers():
    lst = LinkedList()
    for n in [10, 20, 30, 40]:
        lst.insert_end(n)
    return lst


def test_traverse_visits_in_order():
    seen = []
    _numbers().traverse(seen.append)
    assert seen == [10, 20, 30, 40]


def test_search_finds_position():
    assert _numbers().search(30) == 2


def test_search_missing_raises():
    with pytest.raises(ValueError):
        _numbers().search(99)


def test_search_with_key():
    lst = LinkedList(["Apple", "Banana"])
    assert lst.search("banana", key=str.lower) == 1


def test_insert_front_and_at():
    lst = _numbers()
    lst.insert_front(5)
    lst.insert_at(25, 3)
    lst.insert_at(50, len(lst))
    assert list(lst) == [5, 10, 20, 25, 30, 40, 50]
    assert len(lst) == 7


def test_insert_at_out_of_range():
    lst = _numbers()
    with pytest.raises(IndexError):
        lst.insert_at(1, 5)
    with pytest.raises(IndexError):
        lst.insert_at(1, -1)


def test_delete_operations():
    lst = _numbers()
    assert lst.delete_front() == 10
    assert lst.delete_end() == 40
    assert lst.delete_at(1) == 30
    assert list(lst) == [20]
    assert lst.delete_end() == 20
    assert len(lst) == 0


def test_delete_on_empty_and_out_of_range():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.delete_front()
    with pytest.raises(IndexError):
        lst.delete_end()
    with pytest.raises(IndexError):
        _numbers().delete_at(4)


def test_clear_calls_on_free():
    freed = []
    lst = _numbers()
    lst.clear(freed.append)
    assert freed == [10, 20, 30, 40]
    assert list(lst) == []


def test_describe_format():
    assert LinkedList([1, 2, 3]).describe() == "head->1->2->3->(NULL)"
    assert LinkedList().describe() == "head->(NULL)"