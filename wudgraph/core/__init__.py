"""
Core graph data structures and management.

This module contains the vertex store, the adjacency table and the
WeightedGraph that composes them.
"""

from .vertex_store import VertexStore
from .adjacency import AdjacencyTable
from .graph import WeightedGraph

__all__ = ['VertexStore', 'AdjacencyTable', 'WeightedGraph']
