"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
class built on top of it.
"""

from .graph import UndirectedGraph
from .eulergraph import pygraph

__all__ = ['UndirectedGraph', 'pygraph']
