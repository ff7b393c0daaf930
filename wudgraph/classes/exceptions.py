"""
Exception types raised by the wudgraph package.
"""


class GraphError(Exception):
    """Base class for errors raised by wudgraph."""


class UnknownVertexError(GraphError, KeyError):
    """
    Raised when an operation needs a vertex that is not in the graph.

    Attributes:
        vertex: The value that could not be found
    """

    def __init__(self, vertex):
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"{self.vertex} was not found!"
