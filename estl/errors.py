"""Errors raised by the fixed-capacity containers."""

from __future__ import annotations

VERSION = (0, 1, 0)


class CapacityError(OverflowError):
    """Raised when an operation would grow a container beyond its capacity."""

    def __init__(self, size: int, capacity: int) -> None:
        super().__init__(f"container is full: {size} of {capacity} slots in use")
        self.size = size
        self.capacity = capacity


def check_capacity(size: int, capacity: int) -> int:
    """Return the number of free slots, raising CapacityError if there are none."""
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size >= capacity:
        raise CapacityError(size, capacity)
    return capacity - size