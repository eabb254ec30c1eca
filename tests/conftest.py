"""
Pytest configuration for eulergraph tests.
"""
import pytest

from eulergraph import pygraph


def build_graph(nVertex, aPair):
    """Build a graph with nVertex vertices and an edge per (i, j) pair."""
    graph = pygraph(nVertex)
    for i, j in aPair:
        graph.add_edge(graph.aVertex[i], graph.aVertex[j])
    return graph


def check_eulerian_path(graph, path):
    """Assert that path uses every edge once and forms one continuous walk."""
    assert path is not None
    assert len(path) == len(graph.aEdge)
    assert set(map(id, path)) == set(map(id, graph.aEdge)), \
        "Eulerian path should contain all the graph edges"

    if len(path) < 2:
        return

    pEdge_head = path[0]
    assert _walks(path, pEdge_head.pVertex_first) or _walks(path, pEdge_head.pVertex_second), \
        "Edge sequence should form correct path"


def _walks(path, pVertex_start):
    pVertex = pVertex_start
    for pEdge in path:
        if not pEdge.is_incident_to(pVertex):
            return False
        pVertex = pEdge.get_adjacent_vertex_to(pVertex)
    return True


@pytest.fixture
def euler_graph():
    """Six vertices, eleven edges, every degree even."""
    return build_graph(6, [
        (0, 1), (0, 2), (0, 4), (0, 5), (1, 2), (1, 3),
        (1, 4), (2, 3), (2, 4), (3, 4), (3, 5),
    ])


@pytest.fixture
def two_odd_graph():
    """Four vertices, five edges, vertices 0 and 1 have odd degree."""
    return build_graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3)])


@pytest.fixture
def complete_graph_k4():
    """Complete graph on four vertices, every degree is three."""
    return build_graph(4, [(0, 1), (0, 2), (0, 3), (1, 2), (1, 3), (2, 3)])


@pytest.fixture
def two_triangles():
    """Two disjoint triangles."""
    return build_graph(6, [(0, 1), (0, 2), (1, 2), (3, 4), (3, 5), (4, 5)])
