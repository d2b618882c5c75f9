"""
Edge: a weighted relation between two distinct nodes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from socialnet.config import DEFAULT_EDGE_WEIGHT


def check_weight(weight: float) -> None:
    """Raise ValueError unless weight is positive and finite."""
    if not weight > 0 or math.isinf(weight):
        raise ValueError(f"Edge weight must be positive and finite, got {weight!r}")


@dataclass(frozen=True)
class Edge:
    """
    An immutable directed edge record.

    The Graph stores edges in mirrored pairs to realize an undirected
    relation; Edge itself only validates its own fields.

    Attributes:
        source_id: Source node id (> 0)
        target_id: Target node id (> 0, != source_id)
        weight: Positive finite weight

    Raises:
        ValueError: On non-positive ids, a self-loop, or an invalid weight
    """

    source_id: int
    target_id: int
    weight: float = DEFAULT_EDGE_WEIGHT

    def __post_init__(self) -> None:
        if self.source_id <= 0:
            raise ValueError(f"source_id must be positive, got {self.source_id}")
        if self.target_id <= 0:
            raise ValueError(f"target_id must be positive, got {self.target_id}")
        if self.source_id == self.target_id:
            raise ValueError("Self-loops are not allowed")
        check_weight(self.weight)

    def reversed(self) -> Edge:
        """Return the mirrored edge with the same weight."""
        return Edge(self.target_id, self.source_id, self.weight)

    def with_weight(self, weight: float) -> Edge:
        """Return a copy of this edge with a different weight."""
        return replace(self, weight=weight)

    def to_record(self) -> tuple[int, int, float]:
        return (self.source_id, self.target_id, self.weight)

    def __str__(self) -> str:
        return f"Edge: {self.source_id} <-> {self.target_id} (w={self.weight})"
