"""
Utility functions for eulergraph.

This module provides shared helpers used across the eulergraph package for
degree parity checks and walk validation.
"""

import numpy as np
from typing import List, Optional, Sequence


def find_odd_degree_vertices(aDegree: np.ndarray) -> List[int]:
    """
    Find the vertices with odd degree.

    Args:
        aDegree: Degree array indexed by vertex ID

    Returns:
        Sorted list of vertex IDs with odd degree
    """
    return np.flatnonzero(np.asarray(aDegree) % 2 == 1).tolist()


def find_walk_vertices(aEdge: Sequence) -> Optional[List]:
    """
    Recover the vertex sequence traversed by a sequence of edges.

    Both endpoints of the first edge are tried as the start, so a single
    edge runs from its first vertex to its second.

    Args:
        aEdge: Sequence of pyedge objects

    Returns:
        List of len(aEdge) + 1 vertices, an empty list for no edges, or None
        if consecutive edges do not share an endpoint
    """
    if len(aEdge) == 0:
        return []

    pEdge_head = aEdge[0]
    for pVertex_start in (pEdge_head.pVertex_first, pEdge_head.pVertex_second):
        aVertex = _follow_walk(aEdge, pVertex_start)
        if aVertex is not None:
            return aVertex

    return None


def _follow_walk(aEdge: Sequence, pVertex_start) -> Optional[List]:
    pVertex_current = pVertex_start
    aVertex = [pVertex_current]
    for pEdge in aEdge:
        if not pEdge.is_incident_to(pVertex_current):
            return None
        pVertex_current = pEdge.get_adjacent_vertex_to(pVertex_current)
        aVertex.append(pVertex_current)
    return aVertex


def is_continuous_walk(aEdge: Sequence) -> bool:
    """Check whether consecutive edges share an endpoint along one walk."""
    return find_walk_vertices(aEdge) is not None
