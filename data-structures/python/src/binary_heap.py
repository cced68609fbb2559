import copy
from enum import Enum
from typing import Iterator, List, Optional


class HeapOrder(Enum):
    MAX = "max"
    MIN = "min"

    def precedes(self, a: int, b: int) -> bool:
        """True when `a` must sit strictly above `b` in the heap."""
        if self is HeapOrder.MAX:
            return a > b
        return a < b

    def holds(self, parent: int, child: int) -> bool:
        return not self.precedes(child, parent)


class HeapError(Exception):
    pass


class HeapFullError(HeapError):
    pass


class HeapEmptyError(HeapError, IndexError):
    pass


class BinaryHeap:
    """Fixed-capacity binary heap over integer keys.

    The root is the maximum for HeapOrder.MAX and the minimum for
    HeapOrder.MIN. Storage is preallocated at construction and never grows.
    """

    def __init__(self, capacity: int, order: HeapOrder) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity <= 0:
            raise ValueError("capacity must be a positive integer")
        if not isinstance(order, HeapOrder):
            raise TypeError("order must be a HeapOrder")
        self._capacity = capacity
        self._order = order
        self._data: List[int] = [0] * capacity
        self._count = 0

    @property
    def order(self) -> HeapOrder:
        return self._order

    def insert(self, value: int) -> None:
        if self._count == self._capacity:
            raise HeapFullError(f"insert into full heap (capacity={self._capacity})")
        self._data[self._count] = value
        self._count += 1
        self._sift_up(self._count - 1)

    def extract(self) -> int:
        if self._count == 0:
            raise HeapEmptyError("extract from empty heap")
        result = self._data[0]
        self._count -= 1
        self._data[0] = self._data[self._count]
        self._sift_down(0)
        return result

    def peek(self) -> int:
        if self._count == 0:
            raise HeapEmptyError("peek from empty heap")
        return self._data[0]

    def size(self) -> int:
        return self._count

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self._capacity

    def clear(self) -> None:
        self._count = 0

    def copy(self) -> 'BinaryHeap':
        clone = copy.copy(self)
        clone._data = self._data.copy()
        return clone

    def describe(self) -> Optional[List[int]]:
        """Live elements in storage (level) order, not sorted order.

        Returns None for an empty heap.
        """
        if self._count == 0:
            return None
        return self._data[:self._count]

    def to_string(self) -> str:
        elements = self.describe()
        if elements is None:
            return "No elements"
        return "[" + ",".join(str(v) for v in elements) + "]"

    @staticmethod
    def from_array(values: List[int], order: HeapOrder,
                   capacity: Optional[int] = None) -> 'BinaryHeap':
        """Build a heap from an array in O(n).

        Note: Copies the input; capacity defaults to len(values).
        """
        heap = BinaryHeap(len(values) if capacity is None else capacity, order)
        heap._load(values)
        return heap

    def _load(self, values: List[int]) -> None:
        if len(values) > self._capacity:
            raise HeapFullError(
                f"{len(values)} values exceed capacity {self._capacity}")
        self._data[:len(values)] = values
        self._count = len(values)
        for i in range(self._count // 2 - 1, -1, -1):
            self._sift_down(i)

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if self._order.precedes(data[index], data[parent]):
                data[index], data[parent] = data[parent], data[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        data = self._data
        precedes = self._order.precedes
        while True:
            left = 2 * index + 1
            right = left + 1
            if left >= self._count:
                break
            # descend into the more extreme child; right wins ties
            child = left
            if right < self._count and not precedes(data[left], data[right]):
                child = right
            if not precedes(data[child], data[index]):
                break
            data[index], data[child] = data[child], data[index]
            index = child

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data[:self._count]}, capacity={self._capacity})"

    def __str__(self) -> str:
        return self.to_string()

    def __iter__(self) -> Iterator[int]:
        heap_copy = self.copy()
        while not heap_copy.is_empty():
            yield heap_copy.extract()


class MaxHeap(BinaryHeap):
    def __init__(self, capacity: int) -> None:
        super().__init__(capacity, HeapOrder.MAX)

    @staticmethod
    def from_array(values: List[int], capacity: Optional[int] = None) -> 'MaxHeap':
        heap = MaxHeap(len(values) if capacity is None else capacity)
        heap._load(values)
        return heap


class MinHeap(BinaryHeap):
    def __init__(self, capacity: int) -> None:
        super().__init__(capacity, HeapOrder.MIN)

    @staticmethod
    def from_array(values: List[int], capacity: Optional[int] = None) -> 'MinHeap':
        heap = MinHeap(len(values) if capacity is None else capacity)
        heap._load(values)
        return heap
