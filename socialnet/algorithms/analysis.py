"""
Structural analysis: degree centrality and Welsh-Powell coloring.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from socialnet.algorithms.community import connected_components
from socialnet.config import DEFAULT_TOP_K

if TYPE_CHECKING:
    from socialnet.models import Graph

logger = logging.getLogger(__name__)


def degree_centrality(graph: Graph) -> dict[int, int]:
    """Map each node id to its number of neighbors, in graph order."""
    return {node.id: len(graph.get_neighbors(node.id)) for node in graph.get_all_nodes()}


def top_degree_nodes(graph: Graph, k: int = DEFAULT_TOP_K) -> list[tuple[int, int]]:
    """
    The k nodes with the highest degree.

    Returns:
        (node_id, degree) pairs sorted by degree descending, then id ascending
    """
    if k <= 0:
        return []
    ranked = sorted(degree_centrality(graph).items(), key=lambda kv: (-kv[1], kv[0]))
    return ranked[:k]


def welsh_powell(graph: Graph) -> dict[int, int]:
    """
    Greedy Welsh-Powell coloring of the whole graph.

    Nodes are ordered by degree descending, ties by id ascending. Each
    round takes the first uncolored node, gives it a new color, then
    walks the remaining uncolored nodes in the same order and reuses the
    color for every node with no neighbor already holding it.

    Adjacent nodes never share a color; the number of colors is not
    guaranteed to be minimal.

    Returns:
        Mapping of node id to 0-based color index
    """
    coloring = _color_greedily(graph, (node.id for node in graph.get_all_nodes()))
    logger.debug(f"Welsh-Powell used {color_count(coloring)} colors")
    return coloring


def welsh_powell_by_component(graph: Graph) -> dict[int, int]:
    """
    Welsh-Powell coloring run separately on each connected component.

    Each component's local colors are shifted by the running maximum + 1
    of the components before it, so no two components share a color index.

    Returns:
        Mapping of node id to global 0-based color index
    """
    global_colors: dict[int, int] = {}
    offset = 0

    for component in connected_components(graph):
        if not component:
            continue

        local = _color_greedily(graph, component)
        for node_id, color in local.items():
            global_colors[node_id] = color + offset

        offset += max(local.values()) + 1

    return global_colors


def color_count(coloring: dict[int, int]) -> int:
    """Number of distinct colors used by a coloring."""
    return len(set(coloring.values()))


def _color_greedily(graph: Graph, node_ids: Iterable[int]) -> dict[int, int]:
    order = sorted(node_ids, key=lambda node_id: (-graph.degree(node_id), node_id))
    color_of: dict[int, int] = {}
    color = 0

    for node_id in order:
        if node_id in color_of:
            continue

        color_of[node_id] = color

        for other in order:
            if other in color_of:
                continue
            if any(color_of.get(n) == color for n in graph.get_neighbors(other)):
                continue
            color_of[other] = color

        color += 1

    return color_of
