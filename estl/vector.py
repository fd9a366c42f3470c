"""A sequence container whose size can never exceed a fixed capacity."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

from estl.algorithm import lexicographical_compare
from estl.errors import check_capacity


class FixedVector:
    """A list-like container bounded by a capacity fixed at construction.

    Growing operations that add a single element (``append``, ``insert``)
    raise :class:`~estl.errors.CapacityError` when the vector is full.
    Bulk operations (``assign``, ``assign_fill``, ``resize`` and the
    constructor) silently stop at the capacity.
    """

    def __init__(
        self,
        capacity: int,
        items: Iterable[Any] = (),
        default_factory: Optional[Callable[[], Any]] = None,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        self._default_factory = default_factory
        self._items: list[Any] = []
        self.assign(items)

    # Capacity

    def capacity(self) -> int:
        """The maximum number of elements the vector can hold."""
        return self._capacity

    def max_size(self) -> int:
        """Same as :meth:`capacity`."""
        return self._capacity

    def empty(self) -> bool:
        """True if the vector holds no elements."""
        return not self._items

    # Element access

    def at(self, pos: int) -> Any:
        """Element at ``pos``, checked against ``0 <= pos < len(self)``."""
        if not 0 <= pos < len(self._items):
            raise IndexError(
                f"position {pos} out of range for vector of size {len(self._items)}"
            )
        return self._items[pos]

    def front(self) -> Any:
        """The first element."""
        if not self._items:
            raise IndexError("front() on an empty vector")
        return self._items[0]

    def back(self) -> Any:
        """The last element."""
        if not self._items:
            raise IndexError("back() on an empty vector")
        return self._items[-1]

    # Modifiers

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, raising CapacityError when full."""
        check_capacity(len(self._items), self._capacity)
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the last element; an empty vector is left as is and None returned."""
        if not self._items:
            return None
        return self._items.pop()

    def insert(self, index: int, value: Any) -> int:
        """Insert ``value`` before position ``index``; return ``index``."""
        if not 0 <= index <= len(self._items):
            raise IndexError(
                f"insert position {index} out of range for vector of size {len(self._items)}"
            )
        check_capacity(len(self._items), self._capacity)
        self._items.insert(index, value)
        return index

    def erase(self, index: int) -> int:
        """Remove the element at ``index`` if there is one; return ``index``."""
        if 0 <= index < len(self._items):
            del self._items[index]
        return index

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def resize(self, count: int, *args: Any) -> None:
        """Grow or shrink to ``count`` elements, capped at the capacity.

        New elements are the single optional extra argument, or else a value
        made by the default factory (None when no factory was given).
        """
        if len(args) > 1:
            raise TypeError(f"resize() takes at most 2 arguments ({1 + len(args)} given)")
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        count = min(count, self._capacity)
        if count < len(self._items):
            del self._items[count:]
            return
        missing = count - len(self._items)
        if args:
            self._items.extend([args[0]] * missing)
        else:
            self._items.extend(self._new_default() for _ in range(missing))

    def assign(self, iterable: Iterable[Any]) -> None:
        """Replace the contents with the leading elements of ``iterable`` that fit."""
        incoming = []
        for item in iterable:
            if len(incoming) >= self._capacity:
                break
            incoming.append(item)
        self._items = incoming

    def assign_fill(self, count: int, value: Any) -> None:
        """Replace the contents with ``count`` copies of ``value``, capped at the capacity."""
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        self._items = [value] * min(count, self._capacity)

    def swap(self, other: FixedVector) -> None:
        """Exchange contents with ``other``; each side must fit the other's capacity."""
        if len(other._items) > self._capacity:
            check_capacity(len(other._items), self._capacity)
        if len(self._items) > other._capacity:
            check_capacity(len(self._items), other._capacity)
        self._items, other._items = other._items, self._items

    def _new_default(self) -> Any:
        return self._default_factory() if self._default_factory is not None else None

    # Python protocols

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, slice):
            return self._items[index]
        return self._items[index]

    def __setitem__(self, index: int, value: Any) -> None:
        if isinstance(index, slice):
            raise TypeError("slice assignment is not supported")
        self._items[index] = value

    def __delitem__(self, index: int) -> None:
        if isinstance(index, slice):
            raise TypeError("slice deletion is not supported")
        del self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self._items == other._items

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return lexicographical_compare(self._items, other._items)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return not lexicographical_compare(other._items, self._items)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return lexicographical_compare(other._items, self._items)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return not lexicographical_compare(self._items, other._items)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FixedVector({self._capacity}, {self._items!r})"