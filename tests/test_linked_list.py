import pytest

from algokit.linked_list import LinkedList


def test_append_preserves_order():
    items = LinkedList()
    for value in (10, 20, 30, 40):
        items.append(value)
    assert list(items) == [10, 20, 30, 40]
    assert len(items) == 4


def test_constructor_accepts_iterable():
    items = LinkedList(range(5))
    assert list(items) == list(range(5))
    assert len(items) == 5


def test_render_source_example():
    assert LinkedList([10, 20, 30, 40]).render() == "10 ->20 ->30 ->40 ->NULL"


def test_render_empty():
    assert LinkedList().render() == "NULL"


@pytest.mark.parametrize("values", [[], [1], [1, 2], [10, 20, 30, 40], list(range(50))])
def test_reverse(values):
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    assert len(items) == len(values)


def test_append_after_reverse_uses_new_tail():
    items = LinkedList([1, 2, 3])
    items.reverse()
    items.append(4)
    assert list(items) == [3, 2, 1, 4]


def test_reverse_twice_restores():
    items = LinkedList([5, 6, 7])
    items.reverse()
    items.reverse()
    assert list(items) == [5, 6, 7]