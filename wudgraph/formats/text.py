"""
Canonical text rendering of graphs and MST trace snapshots.

The graph format is used by WeightedGraph.__str__ and is stable enough
for snapshot-style tests:

    Vertices: {A, B, C}, Edges: {(A, B, 1), (B, C, 2)}
"""

from typing import Any, Iterable, Sequence

from ..classes.entry import Edge
from ..classes.snapshot import MstSnapshot

# Number of edge tuples written before the edge list wraps to a new line
EDGES_PER_LINE = 5


def format_graph(vertices: Sequence[Any], edges: Iterable[Edge]) -> str:
    """
    Render vertices and canonical edges in the graph text format.

    Args:
        vertices: Vertex values in index order
        edges: Canonical edges in vertex-index then adjacency order

    Returns:
        The text representation
    """
    vertices_text = ", ".join(str(vertex) for vertex in vertices)

    parts = []
    for counter, edge in enumerate(edges):
        if counter > 0 and counter % EDGES_PER_LINE == 0:
            parts.append("\n   ")
        parts.append(str(edge))
        parts.append(", ")
    if parts:
        parts.pop()

    return f"Vertices: {{{vertices_text}}}, Edges: {{{''.join(parts)}}}"


def format_snapshot(snapshot: MstSnapshot) -> str:
    """
    Render one MST trace snapshot as a multi-line progress report.

    Args:
        snapshot: State captured by the spanning tree builder

    Returns:
        Lines describing the phase, the examined edge and the labels
    """
    labels_text = ", ".join(str(label) for label in snapshot.labels)

    if snapshot.is_initial:
        candidates_text = ", ".join(str(edge) for edge in snapshot.candidates)
        lines = [
            "Initial phase:",
            f"CV: {snapshot.vertex_count}",
            f"MST: {snapshot.tree}",
            f"Edges: [{candidates_text}]",
            f"Sets: {labels_text}",
            f"CIE: {snapshot.included_edges}",
        ]
    else:
        lines = [
            f"Iteration: {snapshot.iteration}",
            f"Edge: {snapshot.edge}",
            f"set1: {snapshot.set1}, set2: {snapshot.set2}",
            f"MST: {snapshot.tree}",
            f"CIE: {snapshot.included_edges}",
            f"Sets: {labels_text}",
        ]

    return "\n".join(lines)
