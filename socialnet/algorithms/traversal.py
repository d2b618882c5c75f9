"""
Breadth-first and depth-first traversal.

Both return the ids reachable from the start node, each exactly once.
A start id that is not a node of the graph yields an empty list.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from socialnet.models import Graph

logger = logging.getLogger(__name__)


def bfs(graph: Graph, start_id: int) -> list[int]:
    """
    Breadth-first traversal from start_id.

    Returns:
        Visited ids in non-decreasing distance from start_id
    """
    if not graph.has_node(start_id):
        logger.warning(f"BFS start {start_id} not in graph")
        return []

    visited = {start_id}
    queue = deque([start_id])
    order: list[int] = []

    while queue:
        current = queue.popleft()
        order.append(current)

        for neighbor in graph.get_neighbors(current):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order


def dfs(graph: Graph, start_id: int) -> list[int]:
    """
    Depth-first traversal from start_id.

    Stack based: neighbors are pushed in adjacency order, so the last
    neighbor is explored first.

    Returns:
        Visited ids in depth-first preorder
    """
    if not graph.has_node(start_id):
        logger.warning(f"DFS start {start_id} not in graph")
        return []

    visited: set[int] = set()
    stack = [start_id]
    order: list[int] = []

    while stack:
        current = stack.pop()
        if current in visited:
            continue

        visited.add(current)
        order.append(current)

        for neighbor in graph.get_neighbors(current):
            if neighbor not in visited:
                stack.append(neighbor)

    return order
