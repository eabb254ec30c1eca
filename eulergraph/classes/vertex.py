"""
Vertex handle for the undirected graph.

A vertex carries no data of its own: it is an index into the vertex arena
of the graph that owns it.
"""

from typing import Tuple


class pyvertex:
    """
    Vertex of an undirected graph.

    Attributes:
        lVertexID: Index of the vertex in the owning graph (0-based)
        pGraph: The core graph that owns this vertex
    """

    def __init__(self, pGraph, lVertexID: int):
        """
        Initialize a vertex handle.

        Args:
            pGraph: UndirectedGraph instance owning the vertex
            lVertexID: Index of the vertex in the graph's vertex arena
        """
        self.pGraph = pGraph
        self.lVertexID = lVertexID

    @property
    def aEdge_incident(self) -> Tuple:
        """Distinct edges touching this vertex, in insertion order."""
        return tuple(self.pGraph.get_incident_edges(self.lVertexID))

    @property
    def nDegree(self) -> int:
        """Number of edge ends at this vertex (a self-loop counts twice)."""
        return self.pGraph.degree.get(self.lVertexID, 0)

    def __repr__(self):
        return f"pyvertex({self.lVertexID})"
