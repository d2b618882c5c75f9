"""
Weight calculator module.

Derives edge weights from node attribute similarity and provides
normalization helpers for displaying or comparing weights.
"""

from socialnet.weights.calculator import (
    assign_similarity_weights,
    calculate,
    calculate_from_features,
    get_weight_for_edge,
    is_valid_weight,
    normalize_to_01,
    normalize_to_1_10,
    normalize_weights,
)

__all__ = [
    "calculate",
    "calculate_from_features",
    "get_weight_for_edge",
    "normalize_to_01",
    "normalize_to_1_10",
    "is_valid_weight",
    "normalize_weights",
    "assign_similarity_weights",
]
