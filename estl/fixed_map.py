"""A sorted associative container whose size can never exceed a fixed capacity."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from estl.algorithm import Compare, less, lexicographical_compare, lower_bound, upper_bound
from estl.errors import check_capacity

DEFAULT_CAPACITY = 16


class FixedMap:
    """A mapping kept sorted by key under a strict weak ordering.

    Keys are unique: two keys are the same key when neither orders before
    the other under ``compare``. Iteration yields keys in sorted order, as
    with :class:`dict`; :meth:`items` yields ``(key, value)`` pairs.

    Positions returned by :meth:`find`, :meth:`lower_bound`,
    :meth:`upper_bound` and :meth:`insert` are indices into the sorted
    order; ``len(self)`` stands for "past the end".

    Adding a key to a full map raises :class:`~estl.errors.CapacityError`.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        compare: Compare = less,
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._compare = compare
        self._default_factory = default_factory
        self._keys: list[Any] = []
        self._values: list[Any] = []

    # Capacity

    def max_size(self) -> int:
        """The maximum number of entries the map can hold."""
        return self._capacity

    def empty(self) -> bool:
        """True if the map holds no entries."""
        return not self._keys

    # Lookup

    def find(self, key: Any) -> int:
        """Index of the entry with ``key``, or ``len(self)`` if there is none."""
        index = lower_bound(self._keys, key, self._compare)
        if index < len(self._keys) and not self._compare(key, self._keys[index]):
            return index
        return len(self._keys)

    def count(self, key: Any) -> int:
        """1 if ``key`` is present, else 0."""
        return 1 if self.find(key) != len(self._keys) else 0

    def lower_bound(self, key: Any) -> int:
        """Index of the first entry whose key is not ordered before ``key``."""
        return lower_bound(self._keys, key, self._compare)

    def upper_bound(self, key: Any) -> int:
        """Index of the first entry whose key is ordered after ``key``."""
        return upper_bound(self._keys, key, self._compare)

    def equal_range(self, key: Any) -> tuple[int, int]:
        """The pair ``(lower_bound(key), upper_bound(key))``."""
        return self.lower_bound(key), self.upper_bound(key)

    def at(self, key: Any) -> Any:
        """The value stored under ``key``, raising KeyError if it is absent."""
        index = self.find(key)
        if index == len(self._keys):
            raise KeyError(key)
        return self._values[index]

    # Observers

    def key_comp(self) -> Compare:
        """The key ordering."""
        return self._compare

    def value_comp(self) -> Callable[[tuple[Any, Any], tuple[Any, Any]], bool]:
        """An ordering of ``(key, value)`` pairs by their keys."""
        compare = self._compare

        def compare_pairs(lhs: tuple[Any, Any], rhs: tuple[Any, Any]) -> bool:
            return compare(lhs[0], rhs[0])

        return compare_pairs

    # Modifiers

    def insert(self, key: Any, value: Any) -> tuple[int, bool]:
        """Add ``key`` with ``value`` unless the key is present.

        Returns the entry's index and whether it was newly inserted. An
        existing entry keeps its value.
        """
        index = self.find(key)
        if index != len(self._keys):
            return index, False
        check_capacity(len(self._keys), self._capacity)
        position = upper_bound(self._keys, key, self._compare)
        self._keys.insert(position, key)
        self._values.insert(position, value)
        return position, True

    def erase(self, key: Any) -> int:
        """Remove the entry with ``key``; return the number removed (0 or 1)."""
        index = self.find(key)
        if index == len(self._keys):
            return 0
        self.erase_at(index)
        return 1

    def erase_at(self, index: int) -> int:
        """Remove the entry at position ``index``; return ``index``."""
        if not 0 <= index < len(self._keys):
            raise IndexError(
                f"position {index} out of range for map of size {len(self._keys)}"
            )
        del self._keys[index]
        del self._values[index]
        return index

    def clear(self) -> None:
        """Remove every entry."""
        self._keys.clear()
        self._values.clear()

    def swap(self, other: FixedMap) -> None:
        """Exchange contents with ``other``; each side must fit the other's capacity."""
        if len(other._keys) > self._capacity:
            check_capacity(len(other._keys), self._capacity)
        if len(self._keys) > other._capacity:
            check_capacity(len(self._keys), other._capacity)
        self._keys, other._keys = other._keys, self._keys
        self._values, other._values = other._values, self._values

    # Views

    def keys(self) -> list[Any]:
        """The keys in sorted order."""
        return list(self._keys)

    def values(self) -> list[Any]:
        """The values in key order."""
        return list(self._values)

    def items(self) -> list[tuple[Any, Any]]:
        """The ``(key, value)`` pairs in key order."""
        return list(zip(self._keys, self._values))

    # Python protocols

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._keys))

    def __reversed__(self) -> Iterator[Any]:
        return reversed(list(self._keys))

    def __contains__(self, key: Any) -> bool:
        return self.count(key) == 1

    def __getitem__(self, key: Any) -> Any:
        """The value under ``key``; a missing key gets a default value when a factory is set."""
        index = self.find(key)
        if index != len(self._keys):
            return self._values[index]
        if self._default_factory is None:
            raise KeyError(key)
        value = self._default_factory()
        self.insert(key, value)
        return value

    def __setitem__(self, key: Any, value: Any) -> None:
        index, inserted = self.insert(key, value)
        if not inserted:
            self._values[index] = value

    def __delitem__(self, key: Any) -> None:
        if not self.erase(key):
            raise KeyError(key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedMap):
            return NotImplemented
        return self.items() == other.items()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedMap):
            return NotImplemented
        return lexicographical_compare(self.items(), other.items())

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedMap):
            return NotImplemented
        return not lexicographical_compare(other.items(), self.items())

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedMap):
            return NotImplemented
        return lexicographical_compare(other.items(), self.items())

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedMap):
            return NotImplemented
        return not lexicographical_compare(self.items(), other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"FixedMap({self._capacity}, {{{body}}})"