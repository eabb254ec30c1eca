"""
eulergraph - Undirected Graph Analysis Library

A small in-memory library for undirected graphs: build a graph, count its
connected components and find an Eulerian path through it.

Main Classes:
    pygraph: Main class for graph construction and analysis (facade)
    pyvertex: Vertex representation in the graph
    pyedge: Edge representation between vertices

Example:
    >>> from eulergraph import pygraph
    >>> graph = pygraph(3)
    >>> edge = graph.add_edge(graph.aVertex[0], graph.aVertex[1])
    >>> graph.connected_components_count()
    2
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from eulergraph.classes.vertex import pyvertex
from eulergraph.classes.edge import pyedge
from eulergraph.core.eulergraph import pygraph

__all__ = [
    'pygraph',
    'pyvertex',
    'pyedge',
]
