"""
Main facade class for undirected graph analysis.

This module provides the pygraph class that exposes graph construction and
the graph algorithms while delegating to specialized modules.
"""

from typing import List, Optional, Tuple

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge
from .graph import UndirectedGraph
from ..analysis.connectivity import ComponentAnalyzer
from ..analysis.eulerian import EulerianPathFinder


class pygraph:
    """
    Main facade class for undirected graph analysis.

    Vertices are created by the graph and addressed through aVertex; edges
    are added with add_edge and listed in insertion order through aEdge.
    """

    def __init__(self, nVertex: int = 0):
        """
        Initialize a graph with isolated vertices.

        Args:
            nVertex: Number of isolated vertices to create
        """
        # Initialize core graph
        self._graph = UndirectedGraph(nVertex)

        # Initialize analysis components
        self._analyzer = ComponentAnalyzer(self._graph)
        self._pathfinder = EulerianPathFinder(self._graph, self._analyzer)

        # Read-only views, rebuilt lazily after structural changes
        self._aVertex_view: Optional[Tuple[pyvertex, ...]] = None
        self._aEdge_view: Optional[Tuple[pyedge, ...]] = None

    def _sync_state(self, iFlag_vertex: bool = False):
        """Drop the cached views after an operation that modifies the graph."""
        if iFlag_vertex:
            self._aVertex_view = None
        self._aEdge_view = None

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    @property
    def aVertex(self) -> Tuple[pyvertex, ...]:
        """Read-only view of the vertices, indexable by vertex ID."""
        if self._aVertex_view is None:
            self._aVertex_view = tuple(self._graph.aVertex)
        return self._aVertex_view

    @property
    def aEdge(self) -> Tuple[pyedge, ...]:
        """Read-only view of the edges, in insertion order."""
        if self._aEdge_view is None:
            self._aEdge_view = tuple(self._graph.aEdge)
        return self._aEdge_view

    def add_vertex(self) -> pyvertex:
        """Append a new isolated vertex."""
        result = self._graph.add_vertex()
        self._sync_state(iFlag_vertex=True)
        return result

    def add_edge(self, pVertex_first: pyvertex, pVertex_second: pyvertex) -> pyedge:
        """Add an undirected edge between two vertices of this graph."""
        result = self._graph.add_edge(pVertex_first, pVertex_second)
        self._sync_state()
        return result

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        """Get a vertex by its internal graph ID."""
        return self._graph.get_vertex_by_id(vertex_id)

    def get_vertex_count(self) -> int:
        """Get the number of vertices."""
        return self._graph.get_vertex_count()

    def get_edge_count(self) -> int:
        """Get the number of edges."""
        return self._graph.get_edge_count()

    def get_degree(self, pVertex: pyvertex) -> int:
        """Get the degree of a vertex; a self-loop counts twice."""
        return self._graph.degree.get(self._graph.get_vertex_id(pVertex), 0)

    def get_neighbors(self, pVertex: pyvertex) -> List[pyvertex]:
        """Get the distinct neighbors of a vertex."""
        vertex_id = self._graph.get_vertex_id(pVertex)
        return [self._graph.aVertex[neighbor_id] for neighbor_id in self._graph.get_neighbor_ids(vertex_id)]

    def get_incident_edges(self, pVertex: pyvertex) -> List[pyedge]:
        """Get the distinct edges touching a vertex."""
        return self._graph.get_incident_edges(self._graph.get_vertex_id(pVertex))

    def get_degree_array(self):
        """Get the degree of every vertex as a numpy array."""
        return self._graph.get_degree_array()

    # ========================================================================
    # CONNECTIVITY
    # ========================================================================

    def connected_components_count(self) -> int:
        """Count connected components; isolated vertices count as singletons."""
        return self._analyzer.connected_components_count()

    def get_connected_components(self) -> List[List[int]]:
        """Partition the vertices into connected components of vertex IDs."""
        return self._analyzer.get_connected_components()

    def count_edge_components(self) -> int:
        """Count components containing at least one edge."""
        return self._analyzer.count_edge_components()

    def is_connected(self) -> bool:
        """Check whether the graph has at most one component."""
        return self._analyzer.is_connected()

    # ========================================================================
    # EULERIAN PATH
    # ========================================================================

    def eulerian_path(self) -> Optional[List[pyedge]]:
        """Build a walk using every edge exactly once, or None if none exists."""
        return self._pathfinder.eulerian_path()

    def eulerian_path_vertices(self) -> Optional[List[pyvertex]]:
        """Get the vertices visited by the Eulerian path, in walk order."""
        return self._pathfinder.eulerian_path_vertices()

    def get_odd_degree_vertices(self) -> List[pyvertex]:
        """Get the vertices with odd degree."""
        return [self._graph.aVertex[vertex_id] for vertex_id in self._pathfinder.get_odd_degree_vertices()]

    def has_eulerian_path(self) -> bool:
        """Check whether an Eulerian path exists."""
        return self._pathfinder.has_eulerian_path()

    def has_eulerian_circuit(self) -> bool:
        """Check whether an Eulerian circuit exists."""
        return self._pathfinder.has_eulerian_circuit()

    def is_eulerian_path(self, aEdge: List[pyedge]) -> bool:
        """Check whether an edge sequence is an Eulerian path of this graph."""
        return self._pathfinder.is_eulerian_path(aEdge)
