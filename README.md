# estl

Fixed-capacity containers and small sequence algorithms for Python.

You give each container a maximum size when you create it. An operation
that adds a single element to a full container raises
`estl.errors.CapacityError`; the container does not grow. `CapacityError`
is a subclass of `OverflowError` and has `size` and `capacity` attributes.
Bulk fills, such as `FixedVector.assign`, `assign_fill`, `resize` and the
constructor, stop at the capacity without raising.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Containers

### `estl.vector.FixedVector`

A list-like sequence with a fixed upper bound.

```python
from estl.vector import FixedVector

readings = FixedVector(10, [25.5, 30.2, 15.7])
readings.append(22.3)
readings.insert(1, 19.0)
print(readings.front(), readings.back(), readings.capacity())
readings.pop()
for value in readings:
    print(value)
```

- `append(value)` and `insert(index, value)` raise `CapacityError` when the
  vector is full. `insert` raises `IndexError` when the position is outside
  `0..len`.
- `at(pos)` raises `IndexError` for a position that is out of range.
  `front()` and `back()` raise `IndexError` on an empty vector.
- `pop()` removes and returns the last element. On an empty vector it
  returns `None`.
- `erase(index)` removes the element at `index` if one exists there.
- `assign(iterable)`, `assign_fill(count, value)` and `resize(count[, value])`
  are all capped at the capacity. When `resize` adds elements and no value is
  given, it uses the `default_factory` passed to the constructor, or `None` if
  there is no factory.
- `swap(other)` exchanges contents. It raises `CapacityError` if either
  side's contents do not fit the other's capacity.
- Vectors support `len`, iteration, `reversed`, indexing and slicing on read,
  item assignment and deletion. They compare element by element for equality
  and lexicographically for `<`, `<=`, `>` and `>=`. They are not hashable.

### `estl.fixed_map.FixedMap`

A bounded mapping that keeps its keys sorted under a comparison function.
The default capacity is 16 and the default comparison is `estl.algorithm.less`.
Two keys count as the same key when neither orders before the other.

```python
from estl.fixed_map import FixedMap

devices = FixedMap(8)
devices.insert(1, "Temperature Sensor")
devices[2] = "Humidity Sensor"
print(devices.at(1), 2 in devices, devices.find(4))
del devices[2]
for key, name in devices.items():
    print(key, name)
```

- Iteration yields keys in sorted order. `keys()`, `values()` and `items()`
  return lists in key order.
- `insert(key, value)` returns `(index, inserted)`. An existing key keeps its
  old value. `map[key] = value` overwrites it.
- Adding a new key to a full map raises `CapacityError`.
- `find`, `lower_bound`, `upper_bound` and `equal_range` return positions in
  the sorted order. `len(map)` means "not found" or "past the end".
- `at(key)` raises `KeyError` for a missing key. `map[key]` also raises
  `KeyError`, unless the map was created with a `default_factory`. In that
  case a missing key is inserted with a freshly made default value, and that
  value is returned.
- `erase(key)` returns the number of entries removed (0 or 1).
  `erase_at(index)` removes by position. `del map[key]` raises `KeyError` for
  a missing key.
- `swap`, `clear`, `count`, `key_comp` and `value_comp` are also available.
  Maps compare by their `(key, value)` pairs.

## Algorithms

`estl.algorithm` provides the comparison helpers `less`, `greater` and
`equal_to`, along with these sequence operations:

- predicates over a sequence: `all_of`, `any_of`, `none_of`
- searching and counting: `find`, `find_if`, `find_if_not`, `count`, `count_if`
- in-place changes: `fill`, `fill_n`, `copy`, `copy_if`, `swap_ranges`,
  `replace`, `replace_if`
- sorting and sorted search: `sort` (stable, in place), `lower_bound`,
  `upper_bound`, `binary_search`
- extremes: `min_value`, `max_value`, `min_element`, `max_element`
- whole-sequence ordering: `lexicographical_compare`

Functions that look for an element return its index. When nothing is found
they return `len(seq)`. Functions that take an ordering accept any
two-argument `comp` that behaves as a strict "less than".

```python
from estl.algorithm import sort, lower_bound, greater

values = [5, 3, 8, 1]
sort(values)
print(values, lower_bound(values, 4))
sort(values, greater)
```

## Demo

```
estl-demo            # both walk-throughs
estl-demo vector     # FixedVector only
estl-demo map        # FixedMap only
```

The demo walks through each container using sensor and device records, and
prints what happens at each step.