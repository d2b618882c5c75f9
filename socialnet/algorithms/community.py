"""
Connected component detection.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from socialnet.models import Graph

logger = logging.getLogger(__name__)


def connected_components(graph: Graph) -> list[list[int]]:
    """
    Partition the graph into connected components.

    Nodes are scanned in graph order; every unvisited node starts a new
    stack-based flood fill. Components are listed in the order their
    first node was met.

    Returns:
        List of components, each a list of node ids. Empty for an empty graph.
    """
    components: list[list[int]] = []
    visited: set[int] = set()

    for node in graph.get_all_nodes():
        if node.id in visited:
            continue

        component: list[int] = []
        stack = [node.id]
        visited.add(node.id)

        while stack:
            current = stack.pop()
            component.append(current)

            for neighbor in graph.get_neighbors(current):
                if neighbor not in visited:
                    visited.add(neighbor)
                    stack.append(neighbor)

        components.append(component)

    logger.debug(f"Found {len(components)} connected components")
    return components


def component_count(graph: Graph) -> int:
    return len(connected_components(graph))


def component_of(graph: Graph, node_id: int) -> list[int]:
    """Component containing node_id, or an empty list if it is not in the graph."""
    for component in connected_components(graph):
        if node_id in component:
            return component
    return []


def are_in_same_component(graph: Graph, first_id: int, second_id: int) -> bool:
    return second_id in component_of(graph, first_id)


def largest_component(graph: Graph) -> list[int]:
    """First component of maximal size, or an empty list for an empty graph."""
    components = connected_components(graph)
    if not components:
        return []
    return max(components, key=len)
