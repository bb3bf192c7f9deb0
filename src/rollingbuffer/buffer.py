from collections.abc import Iterable, Iterator, Sized
from typing import Any, Final, Generic, TypeVar

from loguru import logger

T = TypeVar("T")

# Marks slots that have never been written. Validity is tracked by `_count`,
# so this object is never handed out to callers.
_EMPTY: Final[Any] = object()


class InvalidCapacityError(ValueError):
    """Raised when a buffer is constructed with a non-positive capacity."""


class RollingBuffer(Sized, Generic[T]):
    """A fixed-capacity, lossy FIFO buffer.

    The buffer fills up to `capacity` elements and then starts overwriting
    the oldest element first, so it always holds the most recent values in
    the order they were added. Storage is allocated once at construction and
    never grows, which makes it a suitable data source for live plots that
    only show the latest N samples.

    The buffer is not thread-safe. Callers sharing it between threads must
    serialize access themselves.
    """

    def __init__(self, capacity: int) -> None:
        """Initializes the RollingBuffer.

        Args:
            capacity: The maximum number of elements the buffer retains.

        Raises:
            InvalidCapacityError: If the capacity is not a positive integer.
        """
        if (
            not isinstance(capacity, int)
            or isinstance(capacity, bool)
            or capacity <= 0
        ):
            err_msg = "Capacity must be a positive integer."
            raise InvalidCapacityError(err_msg)
        self._capacity = capacity
        self._storage: list[T] = [_EMPTY] * capacity
        self._write_cursor = 0
        self._count = 0
        logger.debug(f"RollingBuffer allocated with capacity {capacity}.")

    @property
    def capacity(self) -> int:
        """The maximum number of elements the buffer can hold."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """Returns True once the buffer has started overwriting old data."""
        return self._count == self._capacity

    def add(self, value: T) -> None:
        """Adds a value, overwriting the oldest one if the buffer is full.

        Args:
            value: The element to add.
        """
        self._storage[self._write_cursor] = value
        self._write_cursor = (self._write_cursor + 1) % self._capacity
        if self._count < self._capacity:
            self._count += 1
            if self._count == self._capacity:
                logger.debug(
                    f"RollingBuffer reached capacity {self._capacity}; "
                    "oldest values will now be overwritten."
                )

    def extend(self, values: Iterable[T]) -> None:
        """Adds each value from the iterable in order."""
        for value in values:
            self.add(value)

    def _start(self) -> int:
        # Index of the logically oldest element.
        if self._count < self._capacity:
            return 0
        return self._write_cursor

    def _slot(self, position: int) -> int:
        return (self._start() + position) % self._capacity

    def get(self, index: int) -> T:
        """Returns the value at a logical position, where 0 is the oldest.

        An index past the last valid position returns the newest value.

        Args:
            index: The logical position to read.

        Raises:
            IndexError: If the buffer is empty or the index is negative.
        """
        if self._count == 0:
            err_msg = "get from an empty RollingBuffer"
            raise IndexError(err_msg)
        if index < 0:
            err_msg = f"Negative index {index} is not supported by get()."
            raise IndexError(err_msg)
        return self._storage[self._slot(min(index, self._count - 1))]

    def values(self) -> list[T]:
        """Returns a new list of the retained values, oldest first.

        The list is a fresh copy on every call, so callers may modify or keep
        it without affecting the buffer.
        """
        if self._count < self._capacity:
            return self._storage[: self._count]
        cursor = self._write_cursor
        return self._storage[cursor:] + self._storage[:cursor]

    def values_iter(self) -> Iterator[T]:
        """Returns a lazy iterator over the retained values, oldest first.

        Each call starts a new traversal over the live storage without
        copying it. The start position and length are read on the first
        `next()`, not when `values_iter()` is called, so values added in
        between are included. The buffer must not be modified after that
        while the iterator is being consumed; doing so gives unspecified
        results.
        """
        start = self._start()
        remaining = self._count
        index = start
        while remaining:
            yield self._storage[index]
            index += 1
            if index == self._capacity:
                index = 0
            remaining -= 1

    def __len__(self) -> int:
        """Returns the number of valid elements in the buffer."""
        return self._count

    def __getitem__(self, index: int) -> T:
        """Returns the element at the specified logical index.

        Supports standard list-like indexing, including negative indices
        counting back from the newest element.

        Raises:
            IndexError: If the index is out of range.
        """
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            err_msg = "RollingBuffer index out of range"
            raise IndexError(err_msg)
        return self._storage[self._slot(index)]

    def __iter__(self) -> Iterator[T]:
        """Returns an iterator over the elements in the buffer."""
        return self.values_iter()

    def __repr__(self) -> str:
        """Returns a developer-friendly representation of the buffer."""
        return (
            f"RollingBuffer(capacity={self.capacity}, size={len(self)}, "
            f"data={self.values()})"
        )
