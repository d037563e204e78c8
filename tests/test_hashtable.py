import pytest

from algokit.hashtable import HashTable


@pytest.fixture
def table():
    ht = HashTable(10)
    ht.put(1, "a")
    ht.put(11, "b")
    ht.put(2, "c")
    return ht


def test_put_and_get_round_trip():
    ht = HashTable(7)
    for key in range(-5, 20):
        ht.put(key, f"v{key}")
    for key in range(-5, 20):
        assert ht.get(key) == f"v{key}"
    assert len(ht) == 25


def test_get_missing_returns_none():
    ht = HashTable(5)
    ht.put(3, "x")
    assert ht.get(8) is None
    assert ht.contains_key(8) is False


def test_put_overwrites_existing_key():
    ht = HashTable(5)
    ht.put(4, "old")
    ht.put(4, "new")
    assert ht.get(4) == "new"
    assert len(ht) == 1


@pytest.mark.parametrize("capacity", [0, -3])
def test_non_positive_capacity_uses_default(capacity):
    ht = HashTable(capacity)
    assert ht.capacity == 10


def test_negative_keys_are_stored():
    ht = HashTable(4)
    ht.put(-1, "neg")
    ht.put(3, "pos")
    assert ht.get(-1) == "neg"
    assert ht.get(3) == "pos"
    assert sorted(ht.keys()) == [-1, 3]


def test_new_keys_go_to_front_of_bucket(table):
    assert table.keys() == [11, 1, 2]
    assert table.entries() == [(11, "b"), (1, "a"), (2, "c")]


def test_contains_key_and_value(table):
    assert table.contains_key(11)
    assert table.contains_value("c")
    assert not table.contains_value("z")
    assert not table.contains_value(None)


def test_remove_head_and_middle_of_chain(table):
    table.remove(11)
    assert table.get(11) is None
    assert table.get(1) == "a"
    table.put(21, "d")
    table.put(31, "e")
    table.remove(21)
    assert table.keys() == [31, 1, 2]
    assert len(table) == 3


def test_remove_missing_key_leaves_table_unchanged(table):
    before = table.entries()
    table.remove(99)
    assert table.entries() == before


def test_render_entries(table):
    assert table.render_entries() == "HashTable: \nBucket[1] 11 = b1 = a\nBucket[2] 2 = c"


def test_render_keys(table):
    assert table.render_keys() == "Keys: \n11 1 2 "


def test_most_frequent_value():
    ht = HashTable(10)
    ht.put(1, "x")
    ht.put(2, "y")
    ht.put(3, "y")
    ht.put(4, "x")
    ht.put(5, "y")
    assert ht.most_frequent_value() == "y"


def test_most_frequent_value_tie_goes_to_first_seen():
    ht = HashTable(10)
    ht.put(1, "p")
    ht.put(2, "q")
    assert ht.most_frequent_value() == ht.entries()[0][1]


def test_most_frequent_value_empty():
    assert HashTable(3).most_frequent_value() is None


def test_pairs_with_diff():
    ht = HashTable(10)
    for key in [1, 3, 5, 8]:
        ht.put(key, "1")
    pairs = ht.pairs_with_diff(2)
    assert sorted(pairs) == [(1, 3), (3, 5)]
    assert all(ht.contains_key(y) and y - x == 2 for x, y in pairs)


def test_render_pairs_with_diff():
    ht = HashTable(10)
    ht.put(1, "1")
    ht.put(3, "1")
    assert ht.render_pairs_with_diff(2) == "Pairs with different 2(1:3)"
    assert ht.render_pairs_with_diff(5) == "Pairs with different 5"