"""
Indexed storage of unique vertex values.

This module provides the slot array that assigns each vertex its integer
index. Indices are positions, not identifiers: removing a vertex shifts
every later vertex down by one.
"""

import logging
import numbers
from typing import Any, List

logger = logging.getLogger(__name__)

# Capacity used when none is given
DEFAULT_CAPACITY = 100

# Growth step applied when the store is full, in percent of the old capacity
ENLARGE_PERCENT = 25

# Returned by index_of for values that are not stored
NOT_FOUND = -1


class VertexStore:
    """
    Dynamic array of unique vertex values.

    This class provides:
    - Index assignment for new vertices
    - Linear equality lookup
    - Capacity growth without slot reuse
    - Compaction on removal
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty store.

        Args:
            capacity: Number of slots allocated up front

        Raises:
            TypeError: If capacity is not an integer
            ValueError: If capacity is negative
        """
        if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
            raise TypeError(f"Capacity must be an integer, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")

        self._slots: List[Any] = [None] * int(capacity)
        self._size = 0

    @property
    def capacity(self) -> int:
        """Number of allocated slots."""
        return len(self._slots)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def index_of(self, vertex: Any) -> int:
        """
        Find the index of a vertex by equality.

        Args:
            vertex: Value to look up

        Returns:
            Index of the vertex, or NOT_FOUND if it is not stored
        """
        for index in range(self._size):
            if vertex == self._slots[index]:
                return index
        return NOT_FOUND

    def contains(self, vertex: Any) -> bool:
        return self.index_of(vertex) != NOT_FOUND

    def value_at(self, index: int) -> Any:
        """
        Get the vertex stored at an occupied index.

        Raises:
            IndexError: If the index is not occupied
        """
        if not 0 <= index < self._size:
            raise IndexError(f"Vertex index {index} out of range for size {self._size}")
        return self._slots[index]

    def add(self, vertex: Any) -> int:
        """
        Append a vertex unless an equal value is already stored.

        Args:
            vertex: Value to add

        Returns:
            Index of the new vertex, or of the equal value already stored
        """
        existing = self.index_of(vertex)
        if existing != NOT_FOUND:
            return existing

        if self._size == len(self._slots):
            self._enlarge()

        self._slots[self._size] = vertex
        self._size += 1
        return self._size - 1

    def snapshot(self) -> List[Any]:
        """Return an independent ordered copy of the stored vertices."""
        return self._slots[:self._size]

    def remove_at(self, index: int) -> None:
        """
        Remove the vertex at an index, shifting later vertices down by one.

        The slot freed at the end is cleared so the store no longer holds
        a reference to the moved-out value.

        Raises:
            IndexError: If the index is not occupied
        """
        if not 0 <= index < self._size:
            raise IndexError(f"Vertex index {index} out of range for size {self._size}")

        for position in range(index + 1, self._size):
            self._slots[position - 1] = self._slots[position]

        self._size -= 1
        self._slots[self._size] = None

    def clear(self) -> None:
        """Release every stored vertex, keeping the current capacity."""
        for index in range(self._size):
            self._slots[index] = None
        self._size = 0

    def _enlarge(self) -> None:
        # old + 25% of old + 1, so an empty store can grow too
        old_capacity = len(self._slots)
        new_capacity = old_capacity + ENLARGE_PERCENT * old_capacity // 100 + 1
        self._slots.extend([None] * (new_capacity - old_capacity))
        logger.debug(f"Enlarged vertex store from {old_capacity} to {new_capacity} slots")
