import pytest

from estl.algorithm import greater
from estl.errors import CapacityError
from estl.fixed_map import FixedMap


def make_map(pairs, capacity=8, **kwargs):
    m = FixedMap(capacity, **kwargs)
    for key, value in pairs:
        m.insert(key, value)
    return m


def test_default_capacity_is_sixteen():
    m = FixedMap()
    assert m.max_size() == 16
    assert m.empty()
    assert len(m) == 0


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FixedMap(-1)


def test_insert_keeps_keys_sorted():
    m = make_map([(3, "c"), (1, "a"), (2, "b")])
    assert list(m) == [1, 2, 3]
    assert m.values() == ["a", "b", "c"]
    assert m.items() == [(1, "a"), (2, "b"), (3, "c")]


def test_insert_returns_position_and_flag():
    m = make_map([(10, "x"), (30, "z")])
    index, inserted = m.insert(20, "y")
    assert inserted is True
    assert m.keys()[index] == 20


def test_insert_duplicate_keeps_existing_value():
    m = make_map([(1, "a")])
    index, inserted = m.insert(1, "other")
    assert inserted is False
    assert m.keys()[index] == 1
    assert m.at(1) == "a"
    assert len(m) == 1


def test_insert_into_full_map_raises():
    m = make_map([(1, "a"), (2, "b")], capacity=2)
    with pytest.raises(CapacityError):
        m.insert(3, "c")
    assert m.keys() == [1, 2]


def test_insert_existing_key_into_full_map_is_allowed():
    m = make_map([(1, "a"), (2, "b")], capacity=2)
    assert m.insert(2, "z") == (m.find(2), False)


def test_at_missing_key_raises_key_error():
    m = make_map([(1, "a")])
    with pytest.raises(KeyError):
        m.at(2)


def test_getitem_with_default_factory_inserts():
    m = FixedMap(8, default_factory=list)
    m[5].append("x")
    assert m[5] == ["x"]
    assert 5 in m
    assert len(m) == 1


def test_getitem_without_factory_raises():
    m = FixedMap(8)
    with pytest.raises(KeyError):
        m[1]
    assert m.empty()


def test_getitem_default_on_full_map_raises():
    m = make_map([(1, "a")], capacity=1, default_factory=str)
    with pytest.raises(CapacityError):
        m[2]
    assert m.items() == [(1, "a")]
    assert m.count(2) == 0


def test_setitem_inserts_and_replaces():
    m = FixedMap(4)
    m[2] = "b"
    m[1] = "a"
    m[2] = "bb"
    assert m.items() == [(1, "a"), (2, "bb")]


def test_erase_by_key_returns_count():
    m = make_map([(1, "a"), (2, "b"), (3, "c")])
    assert m.erase(2) == 1
    assert m.erase(2) == 0
    assert m.keys() == [1, 3]


def test_erase_at_index():
    m = make_map([(1, "a"), (2, "b"), (3, "c")])
    assert m.erase_at(0) == 0
    assert m.keys() == [2, 3]
    with pytest.raises(IndexError):
        m.erase_at(2)


def test_delitem():
    m = make_map([(1, "a")])
    del m[1]
    assert m.empty()
    with pytest.raises(KeyError):
        del m[1]


def test_find_and_count():
    m = make_map([(1, "a"), (4, "d"), (9, "i")])
    for key in m:
        assert m.keys()[m.find(key)] == key
        assert m.count(key) == 1
    assert m.find(5) == len(m)
    assert m.count(5) == 0
    assert 5 not in m


def test_bounds_and_equal_range():
    m = make_map([(10, "a"), (20, "b"), (30, "c")])
    lo, hi = m.equal_range(20)
    assert (lo, hi) == (m.lower_bound(20), m.upper_bound(20))
    assert hi - lo == 1
    assert m.keys()[lo] == 20
    lo, hi = m.equal_range(25)
    assert lo == hi
    assert m.keys()[lo] == 30
    assert m.lower_bound(99) == len(m)
    assert m.upper_bound(5) == 0


def test_greater_comparator_orders_descending():
    m = make_map([(1, "a"), (3, "c"), (2, "b")], compare=greater)
    assert list(m) == [3, 2, 1]
    assert m.key_comp() is greater
    assert m.at(2) == "b"


def test_value_comp_compares_by_key():
    m = FixedMap(4)
    comp = m.value_comp()
    assert comp((1, "z"), (2, "a")) is True
    assert comp((2, "a"), (1, "z")) is False
    assert comp((1, "a"), (1, "b")) is False


def test_reversed_iteration():
    m = make_map([(1, "a"), (2, "b"), (3, "c")])
    assert list(reversed(m)) == list(reversed(list(m)))


def test_clear():
    m = make_map([(1, "a"), (2, "b")])
    m.clear()
    assert m.empty()
    assert m.items() == []


def test_swap_exchanges_contents():
    a = make_map([(1, "a"), (2, "b")])
    b = make_map([(5, "e")])
    a.swap(b)
    assert a.items() == [(5, "e")]
    assert b.items() == [(1, "a"), (2, "b")]


def test_swap_respects_capacity():
    small = make_map([(1, "a")], capacity=1)
    big = make_map([(1, "a"), (2, "b")], capacity=4)
    with pytest.raises(CapacityError):
        small.swap(big)
    assert small.keys() == [1]
    assert big.keys() == [1, 2]


def test_equality():
    a = make_map([(1, "a"), (2, "b")])
    b = make_map([(2, "b"), (1, "a")])
    c = make_map([(1, "a"), (2, "x")])
    assert a == b
    assert not (a == c)
    assert a != c


def test_ordering_is_lexicographic_over_items():
    a = make_map([(1, "a")])
    b = make_map([(1, "a"), (2, "b")])
    c = make_map([(1, "b")])
    assert a < b
    assert b < c
    assert c > a
    assert a <= b and a <= a
    assert c >= b and c >= c
    assert not (b < a)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(FixedMap())


def test_repr_shows_entries():
    m = make_map([(1, "a")], capacity=3)
    assert repr(m) == "FixedMap(3, {1: 'a'})"