"""
Adjacency entry and edge value types.

An undirected edge is stored as two AdjacencyEntry records, one on the
sequence of each endpoint. Edge is the read-only triple handed out to
callers.
"""

from dataclasses import dataclass
from typing import Any, NamedTuple


@dataclass
class AdjacencyEntry:
    """
    One neighbour record on a vertex's adjacency sequence.

    The neighbour index is mutable because vertex removal renumbers it.
    """
    neighbour_index: int
    weight: int


class Edge(NamedTuple):
    """An undirected weighted edge between two vertex values."""
    u: Any
    v: Any
    weight: int

    def __str__(self) -> str:
        return f"({self.u}, {self.v}, {self.weight})"
