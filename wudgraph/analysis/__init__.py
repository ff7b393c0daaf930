"""
Graph analysis modules.

This module contains the minimum spanning tree builder, its trace sinks
and structural validation.
"""

from .spanning_tree import SpanningTreeBuilder
from .trace import LoggingTraceSink, RecordingTraceSink
from .validation import GraphValidator

__all__ = ['SpanningTreeBuilder', 'LoggingTraceSink', 'RecordingTraceSink', 'GraphValidator']
