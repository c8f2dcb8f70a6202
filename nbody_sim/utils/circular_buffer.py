"""Fixed-capacity ring buffer.

Consumers of the snapshot stream use it to keep the most recent positions of
each body (e.g. for drawing trails) without unbounded growth.
"""

from typing import Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")


class CircularBuffer(Generic[T]):
    """Holds at most ``capacity`` items; adding to a full buffer overwrites the oldest.

    Index 0 is the oldest item and index ``len - 1`` the newest.
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"Capacity must be a positive number, got {capacity}")
        self._data: List[Optional[T]] = [None] * capacity
        self._end = 0  # next write position
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def is_full(self) -> bool:
        return self._count == self.capacity

    def __len__(self) -> int:
        return self._count

    def _head(self) -> int:
        if self._count == 0:
            return 0
        return (self._end - self._count) % self.capacity

    def _physical(self, index: int) -> int:
        if index < 0:
            index += self._count
        if index < 0 or index >= self._count:
            raise IndexError("Index is out of the valid range of the buffer")
        return (self._head() + index) % self.capacity

    def add(self, item: T):
        self._data[self._end] = item
        self._end = (self._end + 1) % self.capacity
        if self._count < self.capacity:
            self._count += 1

    def clear(self):
        self._data = [None] * self.capacity
        self._count = 0
        self._end = 0

    def __getitem__(self, index: int) -> T:
        return self._data[self._physical(index)]

    def __setitem__(self, index: int, value: T):
        self._data[self._physical(index)] = value

    @property
    def first(self) -> T:
        if self._count == 0:
            raise IndexError("Buffer is empty")
        return self._data[self._head()]

    @property
    def last(self) -> T:
        if self._count == 0:
            raise IndexError("Buffer is empty")
        return self._data[(self._end - 1) % self.capacity]

    def __iter__(self) -> Iterator[T]:
        head = self._head()
        for i in range(self._count):
            yield self._data[(head + i) % self.capacity]

    def __repr__(self) -> str:
        return f"CircularBuffer(capacity={self.capacity}, items={list(self)})"
