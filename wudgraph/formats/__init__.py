"""
Text formats for graphs and trace output.
"""

from .text import format_graph, format_snapshot

__all__ = ['format_graph', 'format_snapshot']
