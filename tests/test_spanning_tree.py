"""Tests for the Kruskal minimum spanning tree."""
import itertools
import logging
import random
from typing import List, Tuple

import networkx as nx
import pytest

from wudgraph import GraphValidator, RecordingTraceSink, LoggingTraceSink, WeightedGraph


def _build_fixture_graph() -> WeightedGraph:
    graph = WeightedGraph.from_vertices(["A", "B", "C", "D"])
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("C", "D", 3)
    graph.add_edge("A", "D", 4)
    graph.add_edge("A", "C", 5)
    return graph


def _build_disconnected_graph() -> WeightedGraph:
    graph = WeightedGraph.from_vertices(["A", "B", "C", "D", "E", "F"])
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 3)
    graph.add_edge("D", "E", 4)
    return graph


def _build_random_graph(seed: int, vertex_count: int) -> WeightedGraph:
    rng = random.Random(seed)
    graph = WeightedGraph.from_vertices(range(vertex_count))
    # a path keeps the graph connected
    for vertex in range(1, vertex_count):
        graph.add_edge(vertex - 1, vertex, rng.randint(1, 10))
    for u, v in itertools.combinations(range(vertex_count), 2):
        if rng.random() < 0.5:
            graph.add_edge(u, v, rng.randint(1, 10))
    return graph


def _is_spanning_tree(vertices: List[int], edges: List[Tuple[int, int, int]]) -> bool:
    labels = {vertex: vertex for vertex in vertices}
    for u, v, _ in edges:
        if labels[u] == labels[v]:
            return False
        old = labels[v]
        for vertex in vertices:
            if labels[vertex] == old:
                labels[vertex] = labels[u]
    return len(set(labels.values())) == 1


def _brute_force_weight(graph: WeightedGraph) -> int:
    vertices = graph.vertices_view()
    edges = [tuple(edge) for edge in graph.edges()]
    best = None
    for subset in itertools.combinations(edges, len(vertices) - 1):
        if _is_spanning_tree(vertices, list(subset)):
            weight = sum(w for _, _, w in subset)
            if best is None or weight < best:
                best = weight
    return best


def test_fixture_mst() -> None:
    graph = _build_fixture_graph()
    mst = graph.minimum_spanning_tree()

    assert {tuple(edge) for edge in mst.edges()} == {("A", "B", 1), ("B", "C", 2), ("C", "D", 3)}
    assert mst.total_weight() == 6
    assert mst.vertices_view() == graph.vertices_view()
    assert str(mst) == "Vertices: {A, B, C, D}, Edges: {(A, B, 1), (B, C, 2), (C, D, 3)}"


def test_mst_does_not_mutate_input() -> None:
    graph = _build_fixture_graph()
    before = str(graph)
    mst = graph.minimum_spanning_tree()
    assert str(graph) == before
    assert mst is not graph


@pytest.mark.parametrize("seed,vertex_count", [(1, 4), (2, 5), (3, 5), (4, 6), (5, 6)])
def test_mst_is_minimum(seed: int, vertex_count: int) -> None:
    graph = _build_random_graph(seed, vertex_count)
    mst = graph.minimum_spanning_tree()

    assert mst.edge_count() == vertex_count - 1
    assert mst.vertices_view() == graph.vertices_view()
    assert _is_spanning_tree(mst.vertices_view(), [tuple(edge) for edge in mst.edges()])
    assert mst.total_weight() == _brute_force_weight(graph)
    for u, v, weight in mst.edges():
        assert graph.edge_weight(u, v) == weight
    assert GraphValidator(mst).validate()['is_valid']


@pytest.mark.parametrize("seed", range(10, 15))
def test_mst_weight_matches_networkx(seed: int) -> None:
    graph = _build_random_graph(seed, 12)
    reference = nx.Graph()
    reference.add_weighted_edges_from(tuple(edge) for edge in graph.edges())

    mst = graph.minimum_spanning_tree()
    expected = nx.minimum_spanning_tree(reference).size(weight="weight")
    assert mst.total_weight() == expected


def test_equal_weights_follow_scan_order() -> None:
    graph = WeightedGraph.from_vertices(["A", "B", "C", "D"])
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("C", "D", 1)
    graph.add_edge("D", "A", 1)

    mst = graph.minimum_spanning_tree()
    assert [tuple(edge) for edge in mst.edges()] == [("A", "B", 1), ("A", "D", 1), ("B", "C", 1)]


def test_disconnected_graph_yields_forest(caplog) -> None:
    graph = _build_disconnected_graph()
    with caplog.at_level(logging.WARNING, logger="wudgraph"):
        forest = graph.minimum_spanning_tree()

    assert {tuple(edge) for edge in forest.edges()} == {("A", "B", 1), ("B", "C", 2), ("D", "E", 4)}
    # six vertices in three components
    assert forest.edge_count() == graph.size() - 3
    assert forest.contains_vertex("F")
    assert "disconnected" in caplog.text


def test_graph_without_edges() -> None:
    graph = WeightedGraph.from_vertices(["A", "B", "C"])
    forest = graph.minimum_spanning_tree()
    assert forest.size() == 3
    assert forest.edge_count() == 0


def test_empty_and_single_vertex_graphs() -> None:
    assert WeightedGraph().minimum_spanning_tree().is_empty()

    single = WeightedGraph.from_vertices(["A"])
    mst = single.minimum_spanning_tree()
    assert mst.vertices_view() == ["A"]
    assert mst.edge_count() == 0


def test_trace_sink_receives_snapshots() -> None:
    sink = RecordingTraceSink()
    _build_fixture_graph().minimum_spanning_tree(sink)

    assert len(sink) == 4
    initial = sink.snapshots[0]
    assert initial.is_initial
    assert initial.labels == (0, 1, 2, 3)
    assert [tuple(edge) for edge in initial.candidates] == [
        ("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("A", "D", 4), ("A", "C", 5),
    ]
    assert initial.tree == "Vertices: {A, B, C, D}, Edges: {}"

    first = sink.snapshots[1]
    assert tuple(first.edge) == ("A", "B", 1)
    assert (first.set1, first.set2) == (0, 1)
    assert first.labels == (0, 0, 2, 3)
    assert first.included_edges == 1

    last = sink.snapshots[-1]
    assert last.labels == (0, 0, 0, 0)
    assert last.included_edges == 3
    assert len(last.candidates) == 2
    assert [tuple(edge) for edge in sink.accepted_edges] == [
        ("A", "B", 1), ("B", "C", 2), ("C", "D", 3),
    ]


def test_trace_reports_rejected_edges() -> None:
    graph = WeightedGraph.from_vertices(["A", "B", "C", "D"])
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 3)
    graph.add_edge("C", "D", 4)

    sink = RecordingTraceSink()
    graph.minimum_spanning_tree(sink)

    rejected = [snapshot for snapshot in sink.snapshots[1:] if not snapshot.accepted]
    assert [tuple(snapshot.edge) for snapshot in rejected] == [("A", "C", 3)]
    assert rejected[0].set1 == rejected[0].set2


def test_trace_sink_does_not_change_result() -> None:
    graph = _build_random_graph(7, 6)
    assert str(graph.minimum_spanning_tree(RecordingTraceSink())) == str(graph.minimum_spanning_tree())


def test_logging_trace_sink(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="wudgraph"):
        _build_fixture_graph().minimum_spanning_tree(LoggingTraceSink())

    assert "Initial phase:" in caplog.text
    assert "Iteration: 3" in caplog.text
    assert "Sets: 0, 0, 0, 0" in caplog.text


def test_candidates_follow_value_order_not_index_order() -> None:
    graph = WeightedGraph.from_vertices(["D", "C", "B", "A"])
    graph.add_edge("D", "C", 3)
    graph.add_edge("C", "B", 2)
    graph.add_edge("B", "A", 1)
    graph.add_edge("A", "D", 4)

    sink = RecordingTraceSink()
    mst = graph.minimum_spanning_tree(sink)

    assert [tuple(edge) for edge in sink.snapshots[0].candidates] == [
        ("A", "B", 1), ("B", "C", 2), ("C", "D", 3), ("A", "D", 4),
    ]
    assert [tuple(edge) for edge in mst.edges()] == [("C", "D", 3), ("B", "C", 2), ("A", "B", 1)]
    assert mst.total_weight() == 6
    assert str(mst) == "Vertices: {D, C, B, A}, Edges: {(C, D, 3), (B, C, 2), (A, B, 1)}"
