"""
Structural consistency checks for weighted graphs.

This module verifies the invariants WeightedGraph maintains internally:
index alignment, symmetric mirror entries and weight ordering.
"""

import logging
from typing import Any, Dict

from ..core.graph import WeightedGraph

logger = logging.getLogger(__name__)


class GraphValidator:
    """
    Checks the internal consistency of a WeightedGraph.

    This class reports:
    - Misaligned vertex store and adjacency table
    - Neighbour indices out of range, self entries and duplicates
    - Missing mirror entries or mirror weight mismatches
    - Sequences not in ascending weight order
    - Duplicate vertex values
    """

    def __init__(self, graph: WeightedGraph):
        """
        Initialize the validator.

        Args:
            graph: WeightedGraph instance to check
        """
        self.graph = graph

    def validate(self) -> Dict[str, Any]:
        """
        Validate the internal consistency of the graph structure.

        Returns:
            Dictionary containing validation results
        """
        validation_results = {
            'is_valid': True,
            'issues': [],
            'statistics': {}
        }

        store = self.graph._store
        table = self.graph._table
        size = store.size()

        if len(table) != size:
            validation_results['issues'].append(
                f"Adjacency table has {len(table)} owners for {size} vertices")
            validation_results['is_valid'] = False
            return validation_results

        vertices = store.snapshot()
        for index, vertex in enumerate(vertices):
            if store.index_of(vertex) != index:
                validation_results['issues'].append(f"Vertex {vertex} at index {index} is a duplicate")
                validation_results['is_valid'] = False

        for owner in range(size):
            entries = table.entries_of(owner)
            seen = set()
            previous_weight = None

            for entry in entries:
                neighbour = entry.neighbour_index

                if not 0 <= neighbour < size:
                    validation_results['issues'].append(
                        f"Owner {owner} references invalid neighbour index {neighbour}")
                    validation_results['is_valid'] = False
                    continue

                if neighbour == owner:
                    validation_results['issues'].append(f"Owner {owner} has a self entry")
                    validation_results['is_valid'] = False

                if neighbour in seen:
                    validation_results['issues'].append(
                        f"Owner {owner} lists neighbour {neighbour} more than once")
                    validation_results['is_valid'] = False
                seen.add(neighbour)

                if previous_weight is not None and entry.weight < previous_weight:
                    validation_results['issues'].append(f"Owner {owner} entries are not sorted by weight")
                    validation_results['is_valid'] = False
                previous_weight = entry.weight

                mirror_weight = table.weight_of(neighbour, owner)
                if mirror_weight is None:
                    validation_results['issues'].append(
                        f"Entry {owner} -> {neighbour} has no mirror entry")
                    validation_results['is_valid'] = False
                elif mirror_weight != entry.weight:
                    validation_results['issues'].append(
                        f"Entry {owner} -> {neighbour} weight {entry.weight} "
                        f"differs from mirror weight {mirror_weight}")
                    validation_results['is_valid'] = False

        validation_results['statistics'] = {
            'total_vertices': size,
            'total_edges': table.entry_count() // 2,
            'total_entries': table.entry_count(),
            'capacity': store.capacity,
        }

        if not validation_results['is_valid']:
            logger.warning(f"Graph validation found {len(validation_results['issues'])} issues")

        return validation_results
