"""Sequence algorithms with pluggable strict-weak-ordering comparators.

Functions that locate an element return its index; when nothing is found
they return ``len(seq)``, the position one past the last element.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterable, MutableSequence, Sequence

Compare = Callable[[Any, Any], bool]
Predicate = Callable[[Any], bool]


def less(lhs: Any, rhs: Any) -> bool:
    """Return ``lhs < rhs``."""
    return lhs < rhs


def greater(lhs: Any, rhs: Any) -> bool:
    """Return ``lhs > rhs``."""
    return lhs > rhs


def equal_to(lhs: Any, rhs: Any) -> bool:
    """Return ``lhs == rhs``."""
    return lhs == rhs


def all_of(iterable: Iterable[Any], pred: Predicate) -> bool:
    """True if ``pred`` holds for every element (and for an empty input)."""
    return all(pred(item) for item in iterable)


def any_of(iterable: Iterable[Any], pred: Predicate) -> bool:
    """True if ``pred`` holds for at least one element."""
    return any(pred(item) for item in iterable)


def none_of(iterable: Iterable[Any], pred: Predicate) -> bool:
    """True if ``pred`` holds for no element."""
    return not any_of(iterable, pred)


def find(seq: Sequence[Any], value: Any) -> int:
    """Index of the first element equal to ``value``, or ``len(seq)``."""
    return find_if(seq, lambda item: item == value)


def find_if(seq: Sequence[Any], pred: Predicate) -> int:
    """Index of the first element satisfying ``pred``, or ``len(seq)``."""
    for index, item in enumerate(seq):
        if pred(item):
            return index
    return len(seq)


def find_if_not(seq: Sequence[Any], pred: Predicate) -> int:
    """Index of the first element not satisfying ``pred``, or ``len(seq)``."""
    return find_if(seq, lambda item: not pred(item))


def count(iterable: Iterable[Any], value: Any) -> int:
    """Number of elements equal to ``value``."""
    return count_if(iterable, lambda item: item == value)


def count_if(iterable: Iterable[Any], pred: Predicate) -> int:
    """Number of elements satisfying ``pred``."""
    return sum(1 for item in iterable if pred(item))


def fill(seq: MutableSequence[Any], value: Any) -> None:
    """Set every element of ``seq`` to ``value``."""
    for index, _ in enumerate(seq):
        seq[index] = value


def fill_n(seq: MutableSequence[Any], n: int, value: Any) -> int:
    """Set the first ``n`` elements to ``value``; return the index after them."""
    written = max(n, 0)
    for index in range(written):
        seq[index] = value
    return written


def copy(src: Iterable[Any], dest: MutableSequence[Any], start: int = 0) -> int:
    """Write ``src`` into ``dest`` from ``start``; return the index after the last write."""
    position = start
    for item in src:
        dest[position] = item
        position += 1
    return position


def copy_if(
    src: Iterable[Any], dest: MutableSequence[Any], pred: Predicate, start: int = 0
) -> int:
    """Write the elements of ``src`` that satisfy ``pred`` into ``dest`` from ``start``."""
    return copy((item for item in src if pred(item)), dest, start)


def swap_ranges(seq1: MutableSequence[Any], seq2: MutableSequence[Any]) -> int:
    """Exchange ``seq1`` with the leading elements of ``seq2``; return ``len(seq1)``."""
    if len(seq2) < len(seq1):
        raise IndexError("second range is shorter than the first")
    for index, item in enumerate(list(seq1)):
        seq1[index], seq2[index] = seq2[index], item
    return len(seq1)


def replace(seq: MutableSequence[Any], old_value: Any, new_value: Any) -> None:
    """Replace every element equal to ``old_value`` with ``new_value``."""
    replace_if(seq, lambda item: item == old_value, new_value)


def replace_if(seq: MutableSequence[Any], pred: Predicate, new_value: Any) -> None:
    """Replace every element satisfying ``pred`` with ``new_value``."""
    for index, item in enumerate(seq):
        if pred(item):
            seq[index] = new_value


def _three_way(comp: Compare) -> Callable[[Any, Any], int]:
    def compare(lhs: Any, rhs: Any) -> int:
        if comp(lhs, rhs):
            return -1
        if comp(rhs, lhs):
            return 1
        return 0

    return compare


def sort(seq: MutableSequence[Any], comp: Compare = less) -> None:
    """Stably sort ``seq`` in place by ``comp``."""
    ordered = sorted(seq, key=cmp_to_key(_three_way(comp)))
    for index, item in enumerate(ordered):
        seq[index] = item


def lower_bound(seq: Sequence[Any], value: Any, comp: Compare = less) -> int:
    """First index whose element is not ordered before ``value``."""
    first, remaining = 0, len(seq)
    while remaining > 0:
        step = remaining // 2
        middle = first + step
        if comp(seq[middle], value):
            first = middle + 1
            remaining -= step + 1
        else:
            remaining = step
    return first


def upper_bound(seq: Sequence[Any], value: Any, comp: Compare = less) -> int:
    """First index whose element is ordered after ``value``."""
    first, remaining = 0, len(seq)
    while remaining > 0:
        step = remaining // 2
        middle = first + step
        if not comp(value, seq[middle]):
            first = middle + 1
            remaining -= step + 1
        else:
            remaining = step
    return first


def binary_search(seq: Sequence[Any], value: Any, comp: Compare = less) -> bool:
    """True if a sorted ``seq`` holds an element equivalent to ``value``."""
    index = lower_bound(seq, value, comp)
    return index != len(seq) and not comp(value, seq[index])


def min_value(a: Any, b: Any, comp: Compare = less) -> Any:
    """The smaller of ``a`` and ``b``; ``a`` when they are equivalent."""
    return b if comp(b, a) else a


def max_value(a: Any, b: Any, comp: Compare = less) -> Any:
    """The larger of ``a`` and ``b``; ``a`` when they are equivalent."""
    return b if comp(a, b) else a


def min_element(seq: Sequence[Any], comp: Compare = less) -> int:
    """Index of the first smallest element, or ``len(seq)`` if empty."""
    best = len(seq)
    for index, item in enumerate(seq):
        if best == len(seq) or comp(item, seq[best]):
            best = index
    return best


def max_element(seq: Sequence[Any], comp: Compare = less) -> int:
    """Index of the first largest element, or ``len(seq)`` if empty."""
    best = len(seq)
    for index, item in enumerate(seq):
        if best == len(seq) or comp(seq[best], item):
            best = index
    return best


def lexicographical_compare(
    seq1: Iterable[Any], seq2: Iterable[Any], comp: Compare = less
) -> bool:
    """True if ``seq1`` orders strictly before ``seq2``."""
    it1, it2 = iter(seq1), iter(seq2)
    sentinel = object()
    while True:
        a = next(it1, sentinel)
        b = next(it2, sentinel)
        if a is sentinel:
            return b is not sentinel
        if b is sentinel:
            return False
        if comp(a, b):
            return True
        if comp(b, a):
            return False