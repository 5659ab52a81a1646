import io
import math

import pytest

from wgraph.graph import Edge, WeightedGraph


@pytest.fixture
def graph() -> WeightedGraph:
    #     A ---4--- B
    #     |  \      |
    #     6   3     5
    #     |    \    |
    #     C ---2--- D
    g = WeightedGraph()
    g.add_edge("A", "B", 4)
    g.add_edge("A", "C", 6)
    g.add_edge("A", "D", 3)
    g.add_edge("B", "D", 5)
    g.add_edge("C", "D", 2)
    return g


def test_empty_graph():
    g = WeightedGraph()
    assert g.vertex_count() == 0
    assert g.edge_count() == 0


def test_edge_creates_vertices():
    g = WeightedGraph()
    g.add_edge("X", "Y", 10)
    assert g.has_vertex("X")
    assert g.has_vertex("Y")
    assert "X" in g
    assert g.vertex_count() == 2
    assert g.edge_count() == 1


def test_full_graph(graph):
    assert graph.vertex_count() == 4
    assert graph.edge_count() == 5


def test_add_vertex_is_idempotent():
    g = WeightedGraph()
    g.add_edge("X", "Y", 1)
    g.add_vertex("X")
    assert g.vertex_count() == 2
    assert g.edge_count() == 1


def test_has_vertex_false_for_unknown(graph):
    assert not graph.has_vertex("Z")
    assert "Z" not in graph


def test_dijkstra_source_distance_zero(graph):
    assert graph.dijkstra("A")["A"] == 0


def test_dijkstra_direct_edge(graph):
    dist = graph.dijkstra("A")
    assert dist["B"] == 4
    assert dist["D"] == 3


def test_dijkstra_shorter_indirect_path(graph):
    assert graph.dijkstra("A")["C"] == 5


def test_dijkstra_all_vertices_reachable(graph):
    assert len(graph.dijkstra("A")) == 4


def test_dijkstra_single_vertex():
    g = WeightedGraph()
    g.add_vertex("X")
    dist = g.dijkstra("X")
    assert dist == {"X": 0}


def test_dijkstra_unreachable_is_infinite(graph):
    graph.add_vertex("Z")
    dist = graph.dijkstra("A")
    assert dist["Z"] == math.inf


def test_dijkstra_unknown_source(graph):
    dist = graph.dijkstra("Q")
    assert set(dist) == {"A", "B", "C", "D"}
    assert all(d == math.inf for d in dist.values())


def test_dijkstra_is_symmetric(graph):
    for u in "ABCD":
        for v in "ABCD":
            assert graph.dijkstra(u)[v] == graph.dijkstra(v)[u]


def test_prims_edge_count(graph):
    edges, _ = graph.prims_mst("A")
    assert len(edges) == 3


def test_prims_minimum_total_weight(graph):
    _, total = graph.prims_mst("A")
    assert total == 9


def test_prims_all_vertices_connected(graph):
    edges, _ = graph.prims_mst("A")
    vertices = {v for source, target, _ in edges for v in (source, target)}
    assert len(vertices) == 4


def test_prims_total_matches_edges(graph):
    edges, total = graph.prims_mst("A")
    assert sum(w for _, _, w in edges) == total


def test_prims_single_vertex():
    g = WeightedGraph()
    g.add_vertex("X")
    edges, total = g.prims_mst("X")
    assert edges == []
    assert total == 0


def test_prims_unknown_start(graph):
    assert graph.prims_mst("Q") == ([], 0)


def test_prims_same_total_from_any_start(graph):
    assert {graph.prims_mst(v)[1] for v in "ABCD"} == {9}


def test_prims_disconnected_covers_component_only(graph):
    graph.add_edge("Y", "Z", 1)
    edges, total = graph.prims_mst("A")
    assert len(edges) == 3
    assert total == 9


def test_format_lists_adjacency():
    g = WeightedGraph()
    g.add_edge("X", "Y", 10)
    g.add_vertex("Z")
    assert g.format() == "X: Y(10)\nY: X(10)\nZ: \n"


def test_print_writes_format(graph):
    out = io.StringIO()
    graph.print(out)
    assert out.getvalue() == graph.format()


def test_edge_fields():
    edge = Edge("B", 7)
    assert (edge.to, edge.weight) == ("B", 7)