"""
State snapshot emitted to MST trace sinks.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .entry import Edge


@dataclass(frozen=True)
class MstSnapshot:
    """
    Copy of the spanning tree builder's state at one point of the run.

    Iteration 0 is the state right after initialisation; ``edge``,
    ``set1`` and ``set2`` are None there. For later iterations ``set1``
    and ``set2`` hold the labels of the edge endpoints before merging.
    """
    iteration: int
    vertex_count: int
    included_edges: int
    candidates: Tuple[Edge, ...]
    labels: Tuple[int, ...]
    tree: str
    edge: Optional[Edge] = None
    set1: Optional[int] = None
    set2: Optional[int] = None
    accepted: bool = field(default=False)

    @property
    def is_initial(self) -> bool:
        return self.iteration == 0
