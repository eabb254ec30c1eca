"""Tests for graph construction, vertex and edge handles."""
import time

import numpy as np
import pytest

from eulergraph import pygraph, pyedge, pyvertex


class TestConstruction:
    """Tests for pygraph construction."""

    def test_empty_graph(self):
        """Default graph has no vertices and no edges."""
        graph = pygraph()
        assert graph.aVertex == ()
        assert graph.aEdge == ()
        assert graph.get_vertex_count() == 0

    def test_isolated_vertices(self):
        """Vertices are created isolated with stable indices."""
        graph = pygraph(3)
        assert len(graph.aVertex) == 3
        assert [v.lVertexID for v in graph.aVertex] == [0, 1, 2]
        assert all(graph.get_degree(v) == 0 for v in graph.aVertex)
        assert graph.get_vertex_by_id(2) is graph.aVertex[2]
        assert graph.get_vertex_by_id(3) is None

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            pygraph(-1)

    def test_non_integer_count_rejected(self):
        with pytest.raises(TypeError):
            pygraph(2.5)

    def test_add_vertex(self):
        """add_vertex appends with the next index."""
        graph = pygraph(2)
        pVertex = graph.add_vertex()
        assert isinstance(pVertex, pyvertex)
        assert pVertex.lVertexID == 2
        assert graph.aVertex[2] is pVertex

    def test_views_are_read_only(self):
        graph = pygraph(2)
        with pytest.raises(TypeError):
            graph.aVertex[0] = None
        with pytest.raises(AttributeError):
            graph.aEdge.append(None)


class TestAddEdge:
    """Tests for add_edge."""

    def test_add_edge_returns_edge(self):
        graph = pygraph(2)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[1])
        assert isinstance(pEdge, pyedge)
        assert pEdge.pVertex_first is v[0]
        assert pEdge.pVertex_second is v[1]
        assert graph.aEdge == (pEdge,)

    def test_edges_keep_insertion_order(self):
        graph = pygraph(3)
        v = graph.aVertex
        e1 = graph.add_edge(v[1], v[2])
        e2 = graph.add_edge(v[0], v[1])
        e3 = graph.add_edge(v[2], v[0])
        assert graph.aEdge == (e1, e2, e3)

    def test_incidence_and_degree(self):
        graph = pygraph(3)
        v = graph.aVertex
        e1 = graph.add_edge(v[0], v[1])
        e2 = graph.add_edge(v[0], v[2])
        assert v[0].aEdge_incident == (e1, e2)
        assert v[1].aEdge_incident == (e1,)
        assert graph.get_degree(v[0]) == 2
        assert v[2].nDegree == 1

    def test_vertex_of_other_graph_rejected(self):
        """Edges may only join vertices of the same graph."""
        graph = pygraph(2)
        other = pygraph(2)
        with pytest.raises(ValueError):
            graph.add_edge(graph.aVertex[0], other.aVertex[1])
        assert graph.aEdge == ()
        assert graph.get_degree(graph.aVertex[0]) == 0

    def test_none_vertex_rejected(self):
        graph = pygraph(1)
        with pytest.raises(ValueError):
            graph.add_edge(graph.aVertex[0], None)

    def test_parallel_edges_are_distinct(self):
        graph = pygraph(2)
        v = graph.aVertex
        e1 = graph.add_edge(v[0], v[1])
        e2 = graph.add_edge(v[0], v[1])
        assert e1 is not e2
        assert e1 != e2
        assert len({e1, e2}) == 2
        assert graph.get_degree(v[0]) == 2
        assert graph.get_neighbors(v[0]) == [v[1]]
        assert v[1].aEdge_incident == (e1, e2)

    def test_self_loop_counts_twice(self):
        """A self-loop adds two to the degree and is listed once."""
        graph = pygraph(1)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[0])
        assert graph.get_degree(v[0]) == 2
        assert v[0].aEdge_incident == (pEdge,)
        assert graph.get_neighbors(v[0]) == [v[0]]

    def test_degree_array(self):
        graph = pygraph(4)
        v = graph.aVertex
        graph.add_edge(v[0], v[1])
        graph.add_edge(v[1], v[2])
        graph.add_edge(v[2], v[2])
        np.testing.assert_array_equal(graph.get_degree_array(), [1, 2, 3, 0])

    def test_degree_array_empty(self):
        assert len(pygraph().get_degree_array()) == 0
        np.testing.assert_array_equal(pygraph(3).get_degree_array(), [0, 0, 0])

    def test_queries_reject_foreign_vertex(self):
        graph = pygraph(1)
        other = pygraph(1)
        with pytest.raises(ValueError):
            graph.get_degree(other.aVertex[0])
        with pytest.raises(ValueError):
            graph.get_neighbors(other.aVertex[0])


class TestEdge:
    """Tests for pyedge queries."""

    def test_is_incident_to(self):
        graph = pygraph(3)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[1])
        assert pEdge.is_incident_to(v[0])
        assert pEdge.is_incident_to(v[1])
        assert not pEdge.is_incident_to(v[2])

    def test_is_incident_to_other_graph(self):
        graph = pygraph(2)
        other = pygraph(2)
        pEdge = graph.add_edge(graph.aVertex[0], graph.aVertex[1])
        assert not pEdge.is_incident_to(other.aVertex[0])

    def test_get_adjacent_vertex(self):
        graph = pygraph(2)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[1])
        assert pEdge.get_adjacent_vertex_to(v[0]) is v[1]
        assert pEdge.get_adjacent_vertex_to(v[1]) is v[0]

    def test_get_adjacent_vertex_not_incident(self):
        graph = pygraph(3)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[1])
        with pytest.raises(ValueError):
            pEdge.get_adjacent_vertex_to(v[2])

    def test_self_loop_adjacent_vertex(self):
        graph = pygraph(1)
        v = graph.aVertex
        pEdge = graph.add_edge(v[0], v[0])
        assert pEdge.is_self_loop()
        assert pEdge.is_incident_to(v[0])
        assert pEdge.get_adjacent_vertex_to(v[0]) is v[0]


class TestViews:
    """Tests for the aVertex and aEdge views."""

    def test_indexed_build_scales_linearly(self):
        """Building a long path through aVertex[i] stays fast."""
        nVertex = 50000
        graph = pygraph(nVertex)
        start = time.perf_counter()
        for i in range(nVertex - 1):
            graph.add_edge(graph.aVertex[i], graph.aVertex[i + 1])
        elapsed = time.perf_counter() - start
        assert graph.get_edge_count() == nVertex - 1
        assert elapsed < 10.0

    def test_views_follow_mutation(self):
        """The views reflect vertices and edges added after a read."""
        graph = pygraph(2)
        assert len(graph.aVertex) == 2
        assert graph.aEdge == ()

        pEdge = graph.add_edge(graph.aVertex[0], graph.aVertex[1])
        assert graph.aEdge == (pEdge,)

        pVertex = graph.add_vertex()
        assert graph.aVertex[2] is pVertex
        assert graph.aVertex is graph.aVertex

    def test_failed_add_edge_keeps_views(self):
        graph = pygraph(2)
        other = pygraph(1)
        with pytest.raises(ValueError):
            graph.add_edge(graph.aVertex[0], other.aVertex[0])
        assert graph.aEdge == ()


class TestQueriesLeaveGraphUnchanged:
    """Read-only queries never touch the adjacency or degree tables."""

    def test_isolated_vertices_not_inserted(self):
        graph = pygraph(4)
        v = graph.aVertex
        graph.add_edge(v[0], v[1])
        core = graph._graph

        graph.connected_components_count()
        graph.get_incident_edges(v[2])
        graph.get_neighbors(v[3])
        graph.get_degree(v[2])
        v[3].aEdge_incident
        v[3].nDegree
        graph.eulerian_path()

        assert set(core.adjacency_list) == {0, 1}
        assert set(core.degree) == {0, 1}
