"""
Core graph data structure for undirected graphs.

This module provides the fundamental graph structure without algorithms.
"""

import logging
from typing import List, Dict, Tuple, Optional, DefaultDict
from collections import defaultdict

import numpy as np

from ..classes.vertex import pyvertex
from ..classes.edge import pyedge

logger = logging.getLogger(__name__)


class UndirectedGraph:
    """
    Core graph data structure for undirected graphs.

    Vertices and edges live in two flat, index-addressable arenas. Edge
    endpoints and adjacency entries store indices into these arenas. It
    provides:
    - Vertex and edge ID management
    - Adjacency list maintenance (one entry per edge end)
    - Degree tracking
    - Basic graph queries (neighbors, incident edges)
    """

    def __init__(self, nVertex: int = 0):
        """
        Initialize a graph with isolated vertices and no edges.

        Args:
            nVertex: Number of isolated vertices to create

        Raises:
            TypeError: If nVertex is not an integer
            ValueError: If nVertex is negative
        """
        if isinstance(nVertex, bool) or not isinstance(nVertex, (int, np.integer)):
            raise TypeError(f"Vertex count must be an integer, got {type(nVertex).__name__}")
        if nVertex < 0:
            raise ValueError(f"Vertex count must be non-negative, got {nVertex}")

        # Arenas
        self.aVertex: List[pyvertex] = []
        self.aEdge: List[pyedge] = []

        # Edge mappings
        self.aEdge_vertex: Dict[int, Tuple[int, int]] = {}

        # Graph structure
        self.adjacency_list: DefaultDict[int, List[Tuple[int, int]]] = defaultdict(list)
        self.degree: DefaultDict[int, int] = defaultdict(int)

        for _ in range(int(nVertex)):
            self.add_vertex()

        logger.debug(f"Initialized UndirectedGraph with {len(self.aVertex)} vertices")

    def add_vertex(self) -> pyvertex:
        """
        Append a new isolated vertex.

        Returns:
            The new vertex
        """
        pVertex = pyvertex(self, len(self.aVertex))
        self.aVertex.append(pVertex)
        return pVertex

    def add_edge(self, pVertex_first: pyvertex, pVertex_second: pyvertex) -> pyedge:
        """
        Add an undirected edge between two vertices of this graph.

        A self-loop is recorded twice in the vertex's adjacency list and
        therefore adds 2 to its degree. Parallel edges are allowed.

        Args:
            pVertex_first: First endpoint
            pVertex_second: Second endpoint

        Returns:
            The new edge

        Raises:
            ValueError: If either vertex does not belong to this graph
        """
        first_id = self.get_vertex_id(pVertex_first)
        second_id = self.get_vertex_id(pVertex_second)

        edge_id = len(self.aEdge)
        pEdge = pyedge(self, edge_id, first_id, second_id)
        self.aEdge.append(pEdge)

        # Store edge mapping
        self.aEdge_vertex[edge_id] = (first_id, second_id)

        # Add to adjacency list, both ends
        self.adjacency_list[first_id].append((second_id, edge_id))
        self.adjacency_list[second_id].append((first_id, edge_id))

        # Update degrees
        self.degree[first_id] += 1
        self.degree[second_id] += 1

        logger.debug(f"Added edge {edge_id} between vertices {first_id} and {second_id}")
        return pEdge

    def owns_vertex(self, pVertex: pyvertex) -> bool:
        """Check whether a vertex handle belongs to this graph."""
        if not isinstance(pVertex, pyvertex) or pVertex.pGraph is not self:
            return False
        return 0 <= pVertex.lVertexID < len(self.aVertex) and self.aVertex[pVertex.lVertexID] is pVertex

    def get_vertex_id(self, pVertex: pyvertex) -> int:
        """
        Get the internal graph ID for a vertex.

        Args:
            pVertex: The vertex to look up

        Returns:
            Internal vertex ID (0-based)

        Raises:
            ValueError: If the vertex does not belong to this graph
        """
        if not self.owns_vertex(pVertex):
            raise ValueError(f"Vertex {pVertex!r} does not belong to this graph")
        return pVertex.lVertexID

    def get_vertex_by_id(self, vertex_id: int) -> Optional[pyvertex]:
        """
        Get a vertex by its internal graph ID.

        Args:
            vertex_id: Internal vertex ID (0-based)

        Returns:
            The vertex object, or None if not found
        """
        if 0 <= vertex_id < len(self.aVertex):
            return self.aVertex[vertex_id]
        return None

    def get_vertex_count(self) -> int:
        return len(self.aVertex)

    def get_edge_count(self) -> int:
        return len(self.aEdge)

    def get_incident_edges(self, vertex_id: int) -> List[pyedge]:
        """
        Get the distinct edges touching a vertex, in insertion order.

        Args:
            vertex_id: Internal vertex ID

        Returns:
            List of edges, a self-loop listed once
        """
        seen = set()
        aEdge_incident = []
        for _, edge_id in self.adjacency_list.get(vertex_id, ()):
            if edge_id not in seen:
                seen.add(edge_id)
                aEdge_incident.append(self.aEdge[edge_id])
        return aEdge_incident

    def get_neighbor_ids(self, vertex_id: int) -> List[int]:
        """
        Get the distinct neighbor IDs of a vertex, in first-seen order.

        A vertex with a self-loop is its own neighbor.
        """
        return list(dict.fromkeys(neighbor_id for neighbor_id, _ in self.adjacency_list.get(vertex_id, ())))

    def get_degree_array(self) -> np.ndarray:
        """
        Get the degree of every vertex as an array indexed by vertex ID.

        Returns:
            Integer array of length get_vertex_count()
        """
        nVertex = len(self.aVertex)
        aDegree = np.zeros(nVertex, dtype=np.int64)
        if self.aEdge_vertex:
            aEndpoint = np.fromiter(
                (vertex_id for pair in self.aEdge_vertex.values() for vertex_id in pair),
                dtype=np.int64,
                count=2 * len(self.aEdge_vertex),
            )
            aDegree += np.bincount(aEndpoint, minlength=nVertex)
        return aDegree
