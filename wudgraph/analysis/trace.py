"""
Trace sinks for observing a minimum spanning tree run.

A trace sink is any callable taking an MstSnapshot. The classes here
cover the two common uses: writing progress to a logger and keeping the
snapshots for later inspection.
"""

import logging
from typing import List, Optional

from ..classes.snapshot import MstSnapshot
from ..formats.text import format_snapshot

logger = logging.getLogger(__name__)


class LoggingTraceSink:
    """Writes each snapshot to a logger as a formatted progress report."""

    def __init__(self, target: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        """
        Initialize the trace sink.

        Args:
            target: Logger to write to; this module's logger by default
            level: Logging level used for every report
        """
        self.target = target if target is not None else logger
        self.level = level

    def __call__(self, snapshot: MstSnapshot) -> None:
        if self.target.isEnabledFor(self.level):
            self.target.log(self.level, format_snapshot(snapshot))


class RecordingTraceSink:
    """Keeps every snapshot it receives, in order."""

    def __init__(self):
        self.snapshots: List[MstSnapshot] = []

    def __call__(self, snapshot: MstSnapshot) -> None:
        self.snapshots.append(snapshot)

    def __len__(self) -> int:
        return len(self.snapshots)

    @property
    def accepted_edges(self):
        """Edges added to the tree, in the order they were accepted."""
        return [snapshot.edge for snapshot in self.snapshots if snapshot.accepted]
