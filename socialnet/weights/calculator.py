"""
Similarity-based edge weights.

Weight formula for two nodes:
    w = 1 / (1 + d_activity^2 + d_interaction^2 + d_degree^2)

Similar nodes get weights close to 1, dissimilar nodes weights close
to 0. None of the functions here depend on Graph, except
assign_similarity_weights which only uses its public read interface
and set_edge_weight.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

import numpy as np

from socialnet.config import (
    DEFAULT_FEATURE_WEIGHT,
    DEFAULT_NODE_PAIR_WEIGHT,
    DEGENERATE_NORMALIZED_VALUE,
    DISPLAY_SCALE_MAX,
    DISPLAY_SCALE_MIN,
    INVALID_NORMALIZED_VALUE,
    MIN_EDGE_WEIGHT,
)

if TYPE_CHECKING:
    from socialnet.models import Graph, Node

logger = logging.getLogger(__name__)


def calculate(a: Node, b: Node, degree_a: int = 0, degree_b: int = 0) -> float:
    """
    Similarity weight between two nodes.

    Args:
        a: First node
        b: Second node
        degree_a: Current neighbor count of a
        degree_b: Current neighbor count of b

    Returns:
        Weight in (0, 1]; 1.0 for identical attributes and degrees

    Raises:
        ValueError: If either node is None
    """
    if a is None:
        raise ValueError("Node 'a' must not be None")
    if b is None:
        raise ValueError("Node 'b' must not be None")

    d_activity = a.activity - b.activity
    d_interaction = a.interaction - b.interaction
    d_degree = degree_a - degree_b

    denominator = 1.0 + d_activity**2 + d_interaction**2 + d_degree**2
    return 1.0 / denominator


def calculate_from_features(
    features_a: Mapping[str, float] | None,
    features_b: Mapping[str, float] | None,
) -> float:
    """
    Similarity weight over arbitrary named numeric features.

    Iterates the keys of features_a and skips those missing from
    features_b, so only shared keys contribute.

    Returns:
        1 / (1 + sum of squared differences), or 1.0 if either mapping
        is None or empty
    """
    if not features_a or not features_b:
        return DEFAULT_FEATURE_WEIGHT

    sum_squared = 0.0
    for key, a_value in features_a.items():
        if key in features_b:
            sum_squared += (a_value - features_b[key]) ** 2

    return 1.0 / (1.0 + sum_squared)


def get_weight_for_edge(
    a: Node | None,
    b: Node | None,
    degree_a: int = 0,
    degree_b: int = 0,
) -> float:
    """Similarity weight usable as an Edge weight (floored at MIN_EDGE_WEIGHT)."""
    if a is None or b is None:
        return DEFAULT_NODE_PAIR_WEIGHT
    return max(MIN_EDGE_WEIGHT, calculate(a, b, degree_a, degree_b))


def normalize_to_01(weight: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """
    Clamp weight into [min_value, max_value] and rescale to [0, 1].

    Returns 0.5 for a degenerate range (max_value <= min_value).
    """
    if max_value <= min_value:
        return DEGENERATE_NORMALIZED_VALUE

    clamped = max(min_value, min(max_value, weight))
    return (clamped - min_value) / (max_value - min_value)


def normalize_to_1_10(weight: float, min_value: float = 0.0, max_value: float = 1.0) -> float:
    """Rescale weight to the [1, 10] display scale."""
    normalized = normalize_to_01(weight, min_value, max_value)
    return DISPLAY_SCALE_MIN + normalized * (DISPLAY_SCALE_MAX - DISPLAY_SCALE_MIN)


def is_valid_weight(weight: float) -> bool:
    """True if weight is positive and finite."""
    return weight > 0 and math.isfinite(weight)


def normalize_weights(weights: Sequence[float] | None) -> list[float]:
    """
    Min-max normalize a list of weights to [0, 1].

    Only valid weights (see is_valid_weight) define the range; invalid
    entries map to 0.0. If the valid weights have no spread, or there are
    none, every entry maps to 0.5.
    """
    if not weights:
        return []

    values = np.asarray(weights, dtype=np.float64)
    valid = np.isfinite(values) & (values > 0)

    if not valid.any():
        return [DEGENERATE_NORMALIZED_VALUE] * len(values)

    low = values[valid].min()
    high = values[valid].max()
    if high <= low:
        return [DEGENERATE_NORMALIZED_VALUE] * len(values)

    normalized = np.full(values.shape, INVALID_NORMALIZED_VALUE)
    normalized[valid] = (values[valid] - low) / (high - low)
    return normalized.tolist()


def assign_similarity_weights(graph: Graph) -> int:
    """
    Recompute every edge weight of a graph from node similarity.

    Degrees are read once before any weight is written.

    Returns:
        Number of undirected edges updated
    """
    degrees = {node.id: graph.degree(node.id) for node in graph.get_all_nodes()}

    updated = 0
    for edge in graph.unique_edges():
        a = graph.get_node(edge.source_id)
        b = graph.get_node(edge.target_id)
        weight = get_weight_for_edge(
            a, b, degrees[edge.source_id], degrees[edge.target_id]
        )
        if graph.set_edge_weight(edge.source_id, edge.target_id, weight):
            updated += 1

    logger.debug(f"Assigned similarity weights to {updated} edges")
    return updated
