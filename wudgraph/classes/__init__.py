"""
Core data classes for graph representation.

This module contains the value types and exceptions shared across the
wudgraph package.
"""

from .entry import AdjacencyEntry, Edge
from .exceptions import GraphError, UnknownVertexError
from .snapshot import MstSnapshot

__all__ = [
    'AdjacencyEntry',
    'Edge',
    'GraphError',
    'UnknownVertexError',
    'MstSnapshot',
]
