"""
Connectivity analysis for undirected graphs.

This module provides traversal-based partitioning of a graph into connected
components.
"""

import logging
from typing import List
from collections import deque

from ..core.graph import UndirectedGraph

logger = logging.getLogger(__name__)


class ComponentAnalyzer:
    """
    Connected component analysis.

    This class provides methods for:
    - Partitioning vertices into connected components
    - Counting components, with or without isolated vertices
    - Checking whether the graph is connected
    """

    def __init__(self, graph: UndirectedGraph):
        """
        Initialize the component analyzer.

        Args:
            graph: UndirectedGraph instance to analyze
        """
        self.graph = graph

    def get_connected_components(self) -> List[List[int]]:
        """
        Partition the vertices into connected components using BFS.

        Each unvisited vertex, taken in ID order, seeds a new component whose
        whole reachable set is then marked visited.

        Returns:
            List of components, each a list of vertex IDs in BFS order
        """
        nVertex = self.graph.get_vertex_count()
        visited = [False] * nVertex
        components = []

        for seed_id in range(nVertex):
            if visited[seed_id]:
                continue

            visited[seed_id] = True
            component = []
            queue = deque([seed_id])

            while queue:
                current_id = queue.popleft()
                component.append(current_id)

                for neighbor_id, _ in self.graph.adjacency_list.get(current_id, ()):
                    if not visited[neighbor_id]:
                        visited[neighbor_id] = True
                        queue.append(neighbor_id)

            components.append(component)

        logger.debug(f"Found {len(components)} connected components in {nVertex} vertices")
        return components

    def connected_components_count(self) -> int:
        """
        Count connected components; isolated vertices count as singletons.

        Returns:
            Number of components, 0 for a graph without vertices
        """
        return len(self.get_connected_components())

    def count_edge_components(self) -> int:
        """
        Count components containing at least one edge.

        Returns:
            Number of components that are not a single isolated vertex
        """
        return sum(
            1 for component in self.get_connected_components()
            if self.graph.degree.get(component[0], 0) > 0
        )

    def is_connected(self) -> bool:
        """Check whether the graph has at most one component."""
        return self.connected_components_count() <= 1
