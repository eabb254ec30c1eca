"""
Edge handle for the undirected graph.

Endpoints are stored as vertex indices and resolved through the owning
graph, so edges and vertices never reference each other directly.
"""

from .vertex import pyvertex


class pyedge:
    """
    Undirected edge between two vertices.

    Two edges with the same endpoints are still distinct edges: equality and
    hashing are by identity.

    Attributes:
        lEdgeID: Index of the edge in the owning graph (0-based)
        lVertexID_first: Index of the first endpoint
        lVertexID_second: Index of the second endpoint
    """

    def __init__(self, pGraph, lEdgeID: int, lVertexID_first: int, lVertexID_second: int):
        """
        Initialize an edge handle.

        Args:
            pGraph: UndirectedGraph instance owning the edge
            lEdgeID: Index of the edge in the graph's edge arena
            lVertexID_first: Index of the first endpoint
            lVertexID_second: Index of the second endpoint
        """
        self.pGraph = pGraph
        self.lEdgeID = lEdgeID
        self.lVertexID_first = lVertexID_first
        self.lVertexID_second = lVertexID_second

    @property
    def pVertex_first(self) -> pyvertex:
        return self.pGraph.aVertex[self.lVertexID_first]

    @property
    def pVertex_second(self) -> pyvertex:
        return self.pGraph.aVertex[self.lVertexID_second]

    def is_self_loop(self) -> bool:
        return self.lVertexID_first == self.lVertexID_second

    def is_incident_to(self, pVertex: pyvertex) -> bool:
        """
        Check whether a vertex is one of the two endpoints of this edge.

        Args:
            pVertex: Vertex to test

        Returns:
            True if the vertex is an endpoint of this edge
        """
        if pVertex is None or pVertex.pGraph is not self.pGraph:
            return False
        return pVertex.lVertexID in (self.lVertexID_first, self.lVertexID_second)

    def get_adjacent_vertex_to(self, pVertex: pyvertex) -> pyvertex:
        """
        Get the endpoint opposite to the given one.

        For a self-loop the vertex itself is returned.

        Args:
            pVertex: One endpoint of this edge

        Returns:
            The other endpoint

        Raises:
            ValueError: If the vertex is not an endpoint of this edge
        """
        if not self.is_incident_to(pVertex):
            raise ValueError(f"{pVertex!r} is not incident to edge {self.lEdgeID}")

        if pVertex.lVertexID == self.lVertexID_first:
            return self.pVertex_second
        return self.pVertex_first

    def __repr__(self):
        return f"pyedge({self.lEdgeID}: {self.lVertexID_first}-{self.lVertexID_second})"
