"""
wudgraph - Weighted Undirected Graph Library

A generic weighted, undirected graph container with weight-ordered
adjacency sequences, and a Kruskal minimum spanning tree built on it.

Main Classes:
    WeightedGraph: The graph (vertex and edge operations, MST)
    SpanningTreeBuilder: Kruskal's algorithm over a WeightedGraph
    GraphValidator: Internal consistency checks

Example:
    >>> from wudgraph import WeightedGraph
    >>> graph = WeightedGraph.from_vertices("ABC")
    >>> graph.add_edge("A", "B", 1)
    >>> graph.add_edge("B", "C", 2)
    >>> print(graph.minimum_spanning_tree())
    Vertices: {A, B, C}, Edges: {(A, B, 1), (B, C, 2)}
"""

__version__ = "0.1.0"

from wudgraph.classes.entry import AdjacencyEntry, Edge
from wudgraph.classes.exceptions import GraphError, UnknownVertexError
from wudgraph.classes.snapshot import MstSnapshot
from wudgraph.core.vertex_store import VertexStore
from wudgraph.core.adjacency import AdjacencyTable
from wudgraph.core.graph import NO_EDGE, WeightedGraph
from wudgraph.analysis.spanning_tree import SpanningTreeBuilder
from wudgraph.analysis.trace import LoggingTraceSink, RecordingTraceSink
from wudgraph.analysis.validation import GraphValidator
from wudgraph.formats.text import format_graph, format_snapshot

__all__ = [
    'WeightedGraph',
    'VertexStore',
    'AdjacencyTable',
    'AdjacencyEntry',
    'Edge',
    'MstSnapshot',
    'SpanningTreeBuilder',
    'LoggingTraceSink',
    'RecordingTraceSink',
    'GraphValidator',
    'GraphError',
    'UnknownVertexError',
    'NO_EDGE',
    'format_graph',
    'format_snapshot',
]
