"""
Graph analysis modules for connectivity and Eulerian paths.
"""

from .connectivity import ComponentAnalyzer
from .eulerian import EulerianPathFinder

__all__ = ['ComponentAnalyzer', 'EulerianPathFinder']
