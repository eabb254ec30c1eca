"""
Eulerian path construction for undirected graphs.

This module checks whether a walk using every edge exactly once exists and
builds one with Hierholzer's algorithm.
"""

import logging
from typing import List, Optional
from collections import deque

import numpy as np

from ..classes.edge import pyedge
from ..classes.utils import find_odd_degree_vertices, is_continuous_walk
from ..core.graph import UndirectedGraph
from .connectivity import ComponentAnalyzer

logger = logging.getLogger(__name__)


class EulerianPathFinder:
    """
    Eulerian path and circuit analysis.

    This class provides methods for:
    - Checking the existence conditions (edge connectivity, odd degrees)
    - Building an Eulerian path with Hierholzer's algorithm
    - Converting the path to the vertex sequence it visits

    All traversal state is local to each call; the graph is never modified.
    """

    def __init__(self, graph: UndirectedGraph, analyzer: ComponentAnalyzer):
        """
        Initialize the path finder.

        Args:
            graph: UndirectedGraph instance to analyze
            analyzer: ComponentAnalyzer for the connectivity check
        """
        self.graph = graph
        self.analyzer = analyzer

    def get_odd_degree_vertices(self) -> List[int]:
        """Get the IDs of the vertices with odd degree, in ascending order."""
        return find_odd_degree_vertices(self.graph.get_degree_array())

    def find_start_vertex(self) -> Optional[int]:
        """
        Find the vertex an Eulerian path has to start from.

        Returns:
            Vertex ID to start from, or None if no path exists or the graph
            has no edges
        """
        if self.graph.get_edge_count() == 0:
            return None

        nEdge_component = self.analyzer.count_edge_components()
        if nEdge_component > 1:
            logger.debug(f"No Eulerian path: edges span {nEdge_component} components")
            return None

        aVertex_odd = self.get_odd_degree_vertices()
        if len(aVertex_odd) not in (0, 2):
            logger.debug(f"No Eulerian path: {len(aVertex_odd)} vertices with odd degree")
            return None

        if aVertex_odd:
            return aVertex_odd[0]

        aDegree = self.graph.get_degree_array()
        return int(np.flatnonzero(aDegree > 0)[0])

    def has_eulerian_path(self) -> bool:
        if self.graph.get_edge_count() == 0:
            return True
        return self.find_start_vertex() is not None

    def has_eulerian_circuit(self) -> bool:
        return self.has_eulerian_path() and not self.get_odd_degree_vertices()

    def eulerian_path(self) -> Optional[List[pyedge]]:
        """
        Build a walk that uses every edge exactly once.

        Returns:
            List of edges in walk order, an empty list for a graph without
            edges, or None if no Eulerian path exists

        Raises:
            RuntimeError: If the walk misses edges although the existence
                conditions hold
        """
        nEdge = self.graph.get_edge_count()
        if nEdge == 0:
            return []

        start_id = self.find_start_vertex()
        if start_id is None:
            return None

        edge_ids = self._build_circuit(start_id)

        if len(edge_ids) != nEdge:
            logger.error(f"Eulerian walk from vertex {start_id} used {len(edge_ids)} of {nEdge} edges")
            raise RuntimeError(
                f"Eulerian path construction consumed {len(edge_ids)} of {nEdge} edges"
            )

        logger.debug(f"Built Eulerian path of {nEdge} edges starting at vertex {start_id}")
        return [self.graph.aEdge[edge_id] for edge_id in edge_ids]

    def eulerian_path_vertices(self):
        """
        Get the vertices visited by the Eulerian path, in walk order.

        Returns:
            List of len(path) + 1 vertices, an empty list for a graph without
            edges, or None if no Eulerian path exists
        """
        aEdge = self.eulerian_path()
        if aEdge is None:
            return None
        if not aEdge:
            return []

        # The walk leaves the start vertex, which fixes the direction for
        # a first edge that is a loop or has a parallel twin.
        pVertex_start = self.graph.aVertex[self.find_start_vertex()]
        aVertex = [pVertex_start]
        for pEdge in aEdge:
            aVertex.append(pEdge.get_adjacent_vertex_to(aVertex[-1]))
        return aVertex

    def is_eulerian_path(self, aEdge: List[pyedge]) -> bool:
        """
        Check whether an edge sequence is an Eulerian path of the graph.

        Args:
            aEdge: Candidate edge sequence

        Returns:
            True if every graph edge appears exactly once and the sequence
            forms one continuous walk
        """
        if len(aEdge) != self.graph.get_edge_count():
            return False
        if set(map(id, aEdge)) != set(map(id, self.graph.aEdge)):
            return False
        return is_continuous_walk(aEdge)

    def _build_circuit(self, start_id: int) -> List[int]:
        """
        Run Hierholzer's algorithm from a start vertex.

        The stack holds (vertex_id, edge_id) markers for the current greedy
        sub-walk. When the top vertex has no unused edge left, its marker is
        popped and the edge that led there is prepended to the result, which
        splices each closed sub-walk in at the vertex it branched from.

        Args:
            start_id: Vertex to start the walk from

        Returns:
            Edge IDs in walk order
        """
        nVertex = self.graph.get_vertex_count()
        nEdge = self.graph.get_edge_count()
        adjacency_list = self.graph.adjacency_list

        aCursor = np.zeros(nVertex, dtype=np.int64)
        aUsed = np.zeros(nEdge, dtype=bool)

        stack = [(start_id, -1)]
        circuit = deque()

        while stack:
            current_id, arrival_edge_id = stack[-1]
            neighbors = adjacency_list.get(current_id, ())

            # Skip edge ends already consumed from the other side
            cursor = aCursor[current_id]
            while cursor < len(neighbors) and aUsed[neighbors[cursor][1]]:
                cursor += 1
            aCursor[current_id] = cursor

            if cursor < len(neighbors):
                neighbor_id, edge_id = neighbors[cursor]
                aUsed[edge_id] = True
                aCursor[current_id] = cursor + 1
                stack.append((neighbor_id, edge_id))
            else:
                stack.pop()
                if arrival_edge_id >= 0:
                    circuit.appendleft(arrival_edge_id)

        return list(circuit)
