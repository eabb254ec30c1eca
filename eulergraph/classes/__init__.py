"""
Core data classes for graph representation.

This module contains the vertex and edge handles used throughout the
eulergraph library.
"""

from .vertex import pyvertex
from .edge import pyedge

__all__ = [
    'pyvertex',
    'pyedge',
]
