"""
Minimum spanning tree construction for weighted graphs.

This module implements Kruskal's algorithm over the adjacency table of a
WeightedGraph, using a plain label array as the disjoint set.
"""

import logging
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple

import numpy as np

from ..classes.entry import Edge
from ..classes.snapshot import MstSnapshot
from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)

TraceSink = Callable[[MstSnapshot], Any]


class SpanningTreeBuilder:
    """
    Builds a minimum spanning tree (or forest) of a graph.

    This class provides:
    - Harvesting each undirected edge once from the symmetric storage
    - Stable weight ordering of the candidate edges
    - Component merging by relabeling, without path compression
    - Optional state snapshots for tracing
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the builder.

        Args:
            graph: Graph to span; it is only read
        """
        self.graph = graph

    def build(self, trace_sink: Optional[TraceSink] = None) -> WeightedGraph:
        """
        Run Kruskal's algorithm.

        The run stops once the tree has size - 1 edges or the candidates
        run out. A disconnected graph therefore yields a minimum spanning
        forest with one tree per connected component.

        Args:
            trace_sink: Optional callable receiving an MstSnapshot after
                initialisation and after every iteration

        Returns:
            A new graph with the input's vertices, in the same order, and
            the selected edges
        """
        vertices = self.graph.vertices_view()
        vertex_count = len(vertices)

        candidates = deque(self._harvest_candidates(vertices))
        labels = np.arange(vertex_count, dtype=np.intp)
        tree = WeightedGraph.from_vertices(vertices)
        included_edges = 0

        logger.debug(f"Building spanning tree over {vertex_count} vertices and {len(candidates)} edges")

        if trace_sink is not None:
            trace_sink(self._snapshot(0, vertices, candidates, labels, included_edges, tree))

        iteration = 0
        while included_edges < vertex_count - 1 and candidates:
            iteration += 1
            index1, index2, weight = candidates.popleft()
            set1 = int(labels[index1])
            set2 = int(labels[index2])

            accepted = set1 != set2
            if accepted:
                tree.add_edge(vertices[index1], vertices[index2], weight)
                labels[labels == set2] = set1
                included_edges += 1

            if trace_sink is not None:
                edge = Edge(vertices[index1], vertices[index2], weight)
                trace_sink(self._snapshot(iteration, vertices, candidates, labels, included_edges,
                                          tree, edge, set1, set2, accepted))

        if vertex_count > 0 and included_edges < vertex_count - 1:
            components = vertex_count - included_edges
            logger.warning(f"Graph is disconnected, returning a spanning forest of {components} trees")

        logger.debug(f"Spanning tree has {included_edges} edges after {iteration} iterations")
        return tree

    def _harvest_candidates(self, vertices: List[Any]) -> List[Tuple[int, int, int]]:
        """
        Collect each undirected edge once, as index pairs sorted by weight.

        Only the direction whose first endpoint is not greater than the
        second is kept. The sort is stable, so equal weights stay in scan
        order.
        """
        adjacency = self.graph._table
        candidates = []
        for index, value in enumerate(vertices):
            for entry in adjacency.entries_of(index):
                if value <= vertices[entry.neighbour_index]:
                    candidates.append((index, entry.neighbour_index, entry.weight))

        candidates.sort(key=lambda candidate: candidate[2])
        return candidates

    @staticmethod
    def _snapshot(iteration: int, vertices: List[Any], candidates: Deque[Tuple[int, int, int]],
                  labels: np.ndarray, included_edges: int, tree: WeightedGraph,
                  edge: Optional[Edge] = None, set1: Optional[int] = None,
                  set2: Optional[int] = None, accepted: bool = False) -> MstSnapshot:
        return MstSnapshot(
            iteration=iteration,
            vertex_count=len(vertices),
            included_edges=included_edges,
            candidates=tuple(Edge(vertices[i], vertices[j], w) for i, j, w in candidates),
            labels=tuple(int(label) for label in labels),
            tree=str(tree),
            edge=edge,
            set1=set1,
            set2=set2,
            accepted=accepted,
        )
