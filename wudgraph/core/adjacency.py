"""
Weight-ordered adjacency sequences keyed by vertex index.

This module provides the per-vertex neighbour lists used by WeightedGraph.
It works purely on indices; keeping both mirror entries of an edge in
step is the caller's job.
"""

import logging
from typing import List, Optional

from ..classes.entry import AdjacencyEntry
from ..classes.exceptions import GraphError

logger = logging.getLogger(__name__)


class AdjacencyTable:
    """
    One ascending-weight sequence of AdjacencyEntry per owner index.

    All lookups are linear scans of a single sequence, O(degree).
    Entries of equal weight keep their insertion order.
    """

    def __init__(self):
        self._sequences: List[List[AdjacencyEntry]] = []

    def __len__(self) -> int:
        return len(self._sequences)

    # ========================================================================
    # OWNER MANAGEMENT
    # ========================================================================

    def add_owner(self) -> int:
        """
        Append an empty sequence for a new vertex.

        Returns:
            Index of the new owner
        """
        self._sequences.append([])
        return len(self._sequences) - 1

    def remove_owner(self, owner_index: int) -> None:
        """
        Delete the sequence of an owner, shifting later owners down by one.

        Neighbour indices are left untouched; see renumber_above.
        """
        self._check_owner(owner_index)
        del self._sequences[owner_index]

    def clear_owner(self, owner_index: int) -> None:
        """Drop every entry of one owner."""
        self._check_owner(owner_index)
        self._sequences[owner_index] = []

    def clear(self) -> None:
        self._sequences = []

    # ========================================================================
    # ENTRY OPERATIONS
    # ========================================================================

    def insert(self, owner_index: int, neighbour_index: int, weight: int) -> None:
        """
        Insert an entry keeping the sequence sorted by weight.

        The entry goes after any existing entries of the same weight.

        Args:
            owner_index: Index of the vertex owning the sequence
            neighbour_index: Index of the neighbour vertex
            weight: Edge weight
        """
        sequence = self._sequence(owner_index)
        position = 0
        # <= places the entry after equal weights, keeping ties in insertion order
        while position < len(sequence) and sequence[position].weight <= weight:
            position += 1
        sequence.insert(position, AdjacencyEntry(neighbour_index, weight))

    def remove_entry(self, owner_index: int, neighbour_index: int) -> None:
        """Remove the entry pointing at neighbour_index, if there is one."""
        sequence = self._sequence(owner_index)
        for position, entry in enumerate(sequence):
            if entry.neighbour_index == neighbour_index:
                del sequence[position]
                return

    def entries_of(self, owner_index: int) -> List[AdjacencyEntry]:
        """
        Get the entries of an owner in ascending weight order.

        Returns:
            Copies of the entries, so callers cannot alter the table
        """
        return [AdjacencyEntry(entry.neighbour_index, entry.weight)
                for entry in self._sequence(owner_index)]

    def has_entry(self, owner_index: int, neighbour_index: int) -> bool:
        return self._find(owner_index, neighbour_index) is not None

    def weight_of(self, owner_index: int, neighbour_index: int) -> Optional[int]:
        """
        Get the weight of the entry pointing at neighbour_index.

        Returns:
            The weight, or None if there is no such entry
        """
        entry = self._find(owner_index, neighbour_index)
        return None if entry is None else entry.weight

    def degree(self, owner_index: int) -> int:
        return len(self._sequence(owner_index))

    def entry_count(self) -> int:
        """Total number of stored entries, two per undirected edge."""
        return sum(len(sequence) for sequence in self._sequences)

    def renumber_above(self, removed_index: int) -> None:
        """
        Decrement every neighbour index greater than removed_index.

        Entries pointing at removed_index itself must already be gone.

        Raises:
            GraphError: If an entry still points at removed_index
        """
        renumbered = 0
        for owner_index, sequence in enumerate(self._sequences):
            for entry in sequence:
                if entry.neighbour_index == removed_index:
                    raise GraphError(
                        f"Owner {owner_index} still references removed index {removed_index}")
                if entry.neighbour_index > removed_index:
                    entry.neighbour_index -= 1
                    renumbered += 1

        logger.debug(f"Renumbered {renumbered} entries above index {removed_index}")

    # ========================================================================
    # INTERNAL HELPERS
    # ========================================================================

    def _check_owner(self, owner_index: int) -> None:
        if not 0 <= owner_index < len(self._sequences):
            raise IndexError(f"Owner index {owner_index} out of range for {len(self._sequences)} owners")

    def _sequence(self, owner_index: int) -> List[AdjacencyEntry]:
        self._check_owner(owner_index)
        return self._sequences[owner_index]

    def _find(self, owner_index: int, neighbour_index: int) -> Optional[AdjacencyEntry]:
        for entry in self._sequence(owner_index):
            if entry.neighbour_index == neighbour_index:
                return entry
        return None
