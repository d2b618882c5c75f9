"""
Heuristics module.

Provides heuristic functions for guiding A* search:
- euclidean_heuristic: Distance in (activity, interaction) space (default)
- zero_heuristic: Always 0, admissible; A* then behaves like Dijkstra

Any callable taking (node, goal) and returning a float can be passed to
a_star. Only a heuristic that never overestimates the remaining cost
under the edge weights in use guarantees an optimal path.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from socialnet.models import Node

Heuristic = Callable[["Node", "Node"], float]


def euclidean_heuristic(a: Node | None, b: Node | None) -> float:
    """Euclidean distance between two nodes' (activity, interaction) pairs."""
    if a is None or b is None:
        return 0.0
    return float(np.hypot(a.activity - b.activity, a.interaction - b.interaction))


def zero_heuristic(a: Node | None, b: Node | None) -> float:
    return 0.0


__all__ = [
    "Heuristic",
    "euclidean_heuristic",
    "zero_heuristic",
]
