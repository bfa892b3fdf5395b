"""Array-backed binary min-heap.

The backing list doubles as a complete binary tree: the children of index i
live at 2i + 1 and 2i + 2, its parent at (i - 1) // 2. Every element compares
not-less-than its parent, so the minimum always sits at index 0.

Elements only need ``__lt__``. An element moves only when it is strictly less
than the one it would displace, so incomparable values (NaN, sets) keep
whatever relative order the sift operations leave them in.

The heap is not thread-safe; callers sharing one across threads must guard
it with their own lock.
"""

import logging
from typing import Any, Generic, Iterable, Iterator, List, Protocol, TypeVar

logger = logging.getLogger(__name__)


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any) -> bool: ...


T = TypeVar('T', bound=SupportsLessThan)
D = TypeVar('D')


class EmptyHeapError(IndexError):
    """Raised when the minimum of an empty heap is requested."""


class Reverse:
    """Wraps a value so that it orders in reverse.

    Pushing ``Reverse(x)`` into a ``BinaryHeap`` turns it into a max-heap
    over the wrapped values.
    """

    __slots__ = ('value',)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __lt__(self, other: 'Reverse') -> bool:
        return other.value < self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Reverse({self.value!r})"


class BinaryHeap(Generic[T]):
    def __init__(self) -> None:
        self._data: List[T] = []

    def push(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> T:
        if not self._data:
            raise EmptyHeapError("pop from empty heap")
        self._swap(0, len(self._data) - 1)
        result = self._data.pop()
        self._sift_down(0)
        return result

    def peek(self) -> T:
        if not self._data:
            raise EmptyHeapError("peek from empty heap")
        return self._data[0]

    def pop_or(self, default: D) -> 'T | D':
        if not self._data:
            return default
        return self.pop()

    def peek_or(self, default: D) -> 'T | D':
        if not self._data:
            return default
        return self._data[0]

    def push_pop(self, value: T) -> T:
        """Push ``value`` and pop the minimum with a single sift.

        If ``value`` is not greater than the current minimum it comes straight
        back and the heap is left untouched.
        """
        if self._data and self._data[0] < value:
            value, self._data[0] = self._data[0], value
            self._sift_down(0)
        return value

    def replace(self, value: T) -> T:
        """Pop the minimum, then push ``value``. The result may be larger than ``value``."""
        if not self._data:
            raise EmptyHeapError("replace on empty heap")
        result = self._data[0]
        self._data[0] = value
        self._sift_down(0)
        return result

    def extend(self, values: Iterable[T]) -> None:
        for value in values:
            self.push(value)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def clear(self) -> None:
        logger.debug("clearing heap of %d elements", len(self._data))
        self._data.clear()

    def iter(self) -> Iterator[T]:
        """Yield every element in internal array order, not sorted order.

        The heap must not be mutated while the iterator is live.
        """
        yield from self._data

    def into_sorted(self) -> List[T]:
        """Drain the heap and return its elements in ascending order."""
        result = []
        while self._data:
            result.append(self.pop())
        return result

    def copy(self) -> 'BinaryHeap[T]':
        clone: BinaryHeap[T] = BinaryHeap()
        clone._data = self._data.copy()
        return clone

    def is_valid(self) -> bool:
        """Check the heap-order property over the whole backing list."""
        return all(
            not self._data[i] < self._data[self._parent(i)]
            for i in range(1, len(self._data))
        )

    @staticmethod
    def from_unsorted(values: Iterable[T]) -> 'BinaryHeap[T]':
        """Build a heap from unordered values in linear time.

        Note: the values are copied into a new list, the input is left as is.
        """
        heap: BinaryHeap[T] = BinaryHeap()
        heap._data = list(values)
        size = len(heap._data)
        if size < 2:
            return heap
        # children must already be heaps before their parent is repaired
        for i in range((size - 2) // 2, -1, -1):
            heap._sift_down(i)
        logger.debug("heapified %d elements", size)
        return heap

    @staticmethod
    def _parent(index: int) -> int:
        assert index != 0, "root has no parent"
        return (index - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, index: int) -> None:
        while index > 0:
            parent = self._parent(index)
            if not self._data[index] < self._data[parent]:
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._data)
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            right = left + 1
            # only the smaller child may become parent of the other
            child = left
            if right < size and self._data[right] < self._data[left]:
                child = right
            if not self._data[child] < self._data[index]:
                break
            self._swap(index, child)
            index = child

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return len(self._data) > 0

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def __repr__(self) -> str:
        return f"BinaryHeap({self._data})"

    def __str__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"
