# tests/domain/test_graph.py
import math
from itertools import permutations

import pytest

from campus_nav.domain.entities.route import PathResult
from campus_nav.domain.graph.frontier import HeapFrontier, SortedFrontier
from campus_nav.domain.graph.graph import Edge, Graph


@pytest.fixture(params=[SortedFrontier, HeapFrontier], ids=["sorted", "heap"])
def make_graph(request):
    return lambda: Graph(frontier_factory=request.param)


@pytest.fixture
def triangle(make_graph) -> Graph:
    g = make_graph()
    g.add_edge("A", "B", 3.0)
    g.add_edge("B", "C", 4.0)
    g.add_edge("A", "C", 10.0)
    return g


@pytest.fixture
def campus(make_graph) -> Graph:
    #  gate --2-- road_1 --2-- road_2 --1-- library
    #               \_____________6___________/
    #  pond --1-- bench            (separate component)
    g = make_graph()
    g.add_edge("gate", "road_1", 2.0)
    g.add_edge("road_1", "road_2", 2.0)
    g.add_edge("road_2", "library", 1.0)
    g.add_edge("road_1", "library", 6.0)
    g.add_edge("pond", "bench", 1.0)
    return g


# ---------- structure


def test_add_edge_is_symmetric(make_graph):
    g = make_graph()
    g.add_edge("u", "v", 2.5)
    assert g.neighbors("u") == [Edge("v", 2.5)]
    assert g.neighbors("v") == [Edge("u", 2.5)]
    assert "u" in g and "v" in g
    assert len(g) == 2
    assert g.edge_count == 1


def test_duplicate_edges_accumulate(make_graph):
    g = make_graph()
    g.add_edge("u", "v", 2.0)
    g.add_edge("u", "v", 1.0)
    assert len(g.neighbors("u")) == 2
    assert g.edge_count == 2
    assert g.edge_weight("v", "u") == 1.0
    assert list(g.iter_edges()) == [("u", "v", 2.0), ("u", "v", 1.0)]


def test_missing_edge_weight_is_inf(triangle):
    assert triangle.edge_weight("A", "Z") == math.inf
    assert not triangle.has_edge("A", "Z")
    assert triangle.neighbors("Z") == []


def test_iter_edges_yields_each_edge_once(campus):
    edges = list(campus.iter_edges())
    assert len(edges) == campus.edge_count == 5
    assert ("gate", "road_1", 2.0) in edges


# ---------- shortest path


def test_triangle_prefers_two_hops(triangle):
    assert triangle.shortest_path("A", "C") == PathResult(("A", "B", "C"), 7.0)


def test_identity_path(campus):
    for v in campus.vertices:
        assert campus.shortest_path(v, v) == PathResult((v,), 0.0)


def test_isolated_vertex_identity(make_graph):
    g = make_graph()
    g.add_vertex("alone")
    assert g.shortest_path("alone", "alone") == PathResult(("alone",), 0.0)


def test_disconnected_is_unreachable(campus):
    r = campus.shortest_path("gate", "pond")
    assert r == PathResult.unreachable()
    assert r.path == () and math.isinf(r.distance)
    assert not r.found


def test_unknown_vertices_are_unreachable(campus):
    assert campus.shortest_path("nowhere", "gate") == PathResult.unreachable()
    assert campus.shortest_path("gate", "nowhere") == PathResult.unreachable()


def test_path_distance_matches_edge_sum(campus):
    r = campus.shortest_path("gate", "library")
    assert r.path == ("gate", "road_1", "road_2", "library")
    assert r.distance == pytest.approx(5.0)
    total = sum(campus.edge_weight(a, b) for a, b in zip(r.path, r.path[1:]))
    assert total == pytest.approx(r.distance)
    assert r.path[0] == "gate" and r.path[-1] == "library"
    assert r.hops == 3


def test_distance_is_symmetric(campus):
    reachable = ["gate", "road_1", "road_2", "library"]
    for u, v in permutations(reachable, 2):
        assert campus.shortest_path(u, v).distance == pytest.approx(
            campus.shortest_path(v, u).distance
        )


def test_relaxation_after_stale_entries(make_graph):
    # s reaches t cheaply only through a long chain discovered late
    g = make_graph()
    g.add_edge("s", "t", 100.0)
    g.add_edge("s", "a", 1.0)
    g.add_edge("a", "b", 1.0)
    g.add_edge("b", "c", 1.0)
    g.add_edge("c", "t", 1.0)
    assert g.shortest_path("s", "t") == PathResult(("s", "a", "b", "c", "t"), 4.0)


def test_zero_weight_edges(make_graph):
    g = make_graph()
    g.add_edge("a", "b", 0.0)
    g.add_edge("b", "c", 0.0)
    assert g.shortest_path("a", "c") == PathResult(("a", "b", "c"), 0.0)
