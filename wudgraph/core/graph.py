"""
Weighted undirected graph built on VertexStore and AdjacencyTable.

This module provides the public graph contract: vertex and edge CRUD,
neighbour queries and vertex removal with index renumbering.
"""

import logging
import numbers
from typing import Any, Callable, Iterable, List, Optional

from ..classes.entry import Edge
from ..classes.exceptions import UnknownVertexError
from ..classes.snapshot import MstSnapshot
from ..formats.text import format_graph
from .adjacency import AdjacencyTable
from .vertex_store import DEFAULT_CAPACITY, NOT_FOUND, VertexStore

logger = logging.getLogger(__name__)

# Result of edge_weight for two known vertices with no edge between them
NO_EDGE = None


class WeightedGraph:
    """
    Generic weighted, undirected graph.

    Vertex values must support equality and a total order. Every edge is
    stored as a mirror pair of adjacency entries, and each vertex's
    entries are kept in ascending weight order. Self-loops are not
    allowed and adding an edge between connected vertices replaces it.

    The graph is not thread-safe: callers sharing an instance must hold a
    lock around each public call, including remove_vertex and
    minimum_spanning_tree.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty graph.

        Args:
            capacity: Number of vertex slots allocated up front
        """
        self._store = VertexStore(capacity)
        self._table = AdjacencyTable()

    @classmethod
    def from_vertices(cls, vertices: Iterable[Any]) -> "WeightedGraph":
        """
        Create a graph holding the given vertices and no edges.

        Duplicate values are dropped, keeping the first occurrence.

        Args:
            vertices: Vertex values in the order they should be indexed

        Returns:
            A new graph with capacity equal to the number of values given
        """
        values = list(vertices)
        graph = cls(len(values))
        for value in values:
            graph.add_vertex(value)

        if graph.size() != len(values):
            logger.warning(f"Dropped {len(values) - graph.size()} duplicate vertices from initial values")

        return graph

    # ========================================================================
    # VERTEX OPERATIONS
    # ========================================================================

    @property
    def capacity(self) -> int:
        """Number of vertex slots currently allocated."""
        return self._store.capacity

    def size(self) -> int:
        return self._store.size()

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def contains_vertex(self, vertex: Any) -> bool:
        return self._store.contains(vertex)

    def add_vertex(self, vertex: Any) -> None:
        """Add a vertex; adding a value already in the graph does nothing."""
        size_before = self._store.size()
        self._store.add(vertex)
        if self._store.size() > size_before:
            self._table.add_owner()

    def remove_vertex(self, vertex: Any) -> None:
        """
        Remove a vertex and every edge incident to it.

        Vertices after the removed one move down one index and every
        adjacency entry is renumbered to match. Removing a vertex that is
        not in the graph does nothing.

        Args:
            vertex: Value to remove
        """
        index = self._store.index_of(vertex)
        if index == NOT_FOUND:
            return

        self._detach(index)
        self._store.remove_at(index)
        self._table.remove_owner(index)
        self._table.renumber_above(index)

        logger.debug(f"Removed vertex {vertex} at index {index}, {self.size()} vertices left")

    def vertices_view(self) -> List[Any]:
        """Get an independent copy of the vertices in index order."""
        return self._store.snapshot()

    def clear(self) -> None:
        """Remove every vertex and edge."""
        self._store.clear()
        self._table.clear()

    # ========================================================================
    # EDGE OPERATIONS
    # ========================================================================

    def get_neighbours(self, vertex: Any) -> List[Any]:
        """
        Get the neighbours of a vertex.

        Args:
            vertex: Value whose neighbours are wanted

        Returns:
            Neighbour values in ascending order of the connecting edge weight

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """
        index = self._require(vertex)
        return [self._store.value_at(entry.neighbour_index)
                for entry in self._table.entries_of(index)]

    def degree(self, vertex: Any) -> int:
        """Number of edges incident to a vertex."""
        return self._table.degree(self._require(vertex))

    def has_edge(self, vertex1: Any, vertex2: Any) -> bool:
        """
        Check whether an edge connects two vertices.

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        index1 = self._require(vertex1)
        index2 = self._require(vertex2)
        return self._table.has_entry(index1, index2)

    def edge_weight(self, vertex1: Any, vertex2: Any) -> Optional[int]:
        """
        Get the weight of the edge between two vertices.

        Returns:
            The weight, or NO_EDGE if the vertices are not connected

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        index1 = self._require(vertex1)
        index2 = self._require(vertex2)
        return self._table.weight_of(index1, index2)

    def add_edge(self, vertex1: Any, vertex2: Any, weight: int) -> None:
        """
        Add an edge, replacing any edge already between the two vertices.

        Equal vertex values are treated as a self-loop and ignored.

        Args:
            vertex1: First endpoint
            vertex2: Second endpoint
            weight: Integer edge weight

        Raises:
            UnknownVertexError: If either vertex is not in the graph
            TypeError: If weight is not an integer
        """
        if vertex1 == vertex2:
            return

        index1 = self._require(vertex1)
        index2 = self._require(vertex2)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise TypeError(f"Edge weight must be an integer, got {type(weight).__name__}")

        if self._table.has_entry(index1, index2):
            self._table.remove_entry(index1, index2)
            self._table.remove_entry(index2, index1)

        self._table.insert(index1, index2, int(weight))
        self._table.insert(index2, index1, int(weight))

    def remove_edge(self, vertex1: Any, vertex2: Any) -> None:
        """
        Remove the edge between two vertices, if there is one.

        Raises:
            UnknownVertexError: If either vertex is not in the graph
        """
        index1 = self._require(vertex1)
        index2 = self._require(vertex2)
        self._table.remove_entry(index1, index2)
        self._table.remove_entry(index2, index1)

    def remove_edges(self, vertex: Any) -> None:
        """
        Remove every edge incident to a vertex, keeping the vertex.

        Raises:
            UnknownVertexError: If the vertex is not in the graph
        """
        self._detach(self._require(vertex))

    def edges(self) -> List[Edge]:
        """
        Get every edge once, lower-ordered endpoint first.

        Returns:
            Edges in vertex-index order, then ascending weight per vertex
        """
        result = []
        for index in range(self._store.size()):
            value = self._store.value_at(index)
            for entry in self._table.entries_of(index):
                neighbour = self._store.value_at(entry.neighbour_index)
                if value <= neighbour:
                    result.append(Edge(value, neighbour, entry.weight))
        return result

    def edge_count(self) -> int:
        return self._table.entry_count() // 2

    def total_weight(self) -> int:
        return sum(edge.weight for edge in self.edges())

    # ========================================================================
    # ALGORITHMS
    # ========================================================================

    def minimum_spanning_tree(
            self, trace_sink: Optional[Callable[[MstSnapshot], Any]] = None) -> "WeightedGraph":
        """
        Compute a minimum spanning tree, or forest for a disconnected graph.

        Args:
            trace_sink: Optional callable receiving an MstSnapshot after
                initialisation and after every iteration

        Returns:
            A new graph with the same vertices and only the tree edges
        """
        from ..analysis.spanning_tree import SpanningTreeBuilder

        return SpanningTreeBuilder(self).build(trace_sink)

    # ========================================================================
    # DUNDER METHODS
    # ========================================================================

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, vertex: Any) -> bool:
        return self.contains_vertex(vertex)

    def __str__(self) -> str:
        return format_graph(self.vertices_view(), self.edges())

    def __repr__(self) -> str:
        return f"WeightedGraph(vertices={self.size()}, edges={self.edge_count()})"

    # ========================================================================
    # INTERNAL HELPERS
    # ========================================================================

    def _require(self, vertex: Any) -> int:
        index = self._store.index_of(vertex)
        if index == NOT_FOUND:
            raise UnknownVertexError(vertex)
        return index

    def _detach(self, index: int) -> None:
        # Drop the mirror entries first, then the owner's own sequence
        for entry in self._table.entries_of(index):
            self._table.remove_entry(entry.neighbour_index, index)
        self._table.clear_owner(index)
