"""
Shortest-path search: Dijkstra and A*.

Both return (path, cost). The path includes start and goal. When either
endpoint is missing from the graph, or the goal is unreachable, the
result is ([], inf).

Frontiers are heaps keyed by (priority, node_id), so ties are broken by
ascending node id and results are reproducible.
"""

from __future__ import annotations

import heapq
import logging
import math
from typing import TYPE_CHECKING

from socialnet.heuristics import euclidean_heuristic

if TYPE_CHECKING:
    from socialnet.heuristics import Heuristic
    from socialnet.models import Graph

logger = logging.getLogger(__name__)


def dijkstra(graph: Graph, start_id: int, goal_id: int) -> tuple[list[int], float]:
    """
    Find the lowest-cost path from start_id to goal_id.

    Stops as soon as the goal is settled.

    Returns:
        (path, cost), or ([], inf) if there is no path
    """
    if not graph.has_node(start_id) or not graph.has_node(goal_id):
        logger.debug(f"Dijkstra: endpoint missing ({start_id} -> {goal_id})")
        return [], math.inf

    dist: dict[int, float] = {start_id: 0.0}
    prev: dict[int, int] = {}
    settled: set[int] = set()
    frontier = [(0.0, start_id)]

    while frontier:
        d, current = heapq.heappop(frontier)
        if current in settled:
            continue
        settled.add(current)

        if current == goal_id:
            break

        for neighbor in graph.get_neighbors(current):
            if neighbor in settled:
                continue
            found, weight = graph.try_get_edge_weight(current, neighbor)
            if not found:
                continue

            alt = d + weight
            if alt < dist.get(neighbor, math.inf):
                dist[neighbor] = alt
                prev[neighbor] = current
                heapq.heappush(frontier, (alt, neighbor))

    if goal_id not in settled:
        logger.debug(f"Dijkstra: {goal_id} unreachable from {start_id}")
        return [], math.inf

    return _reconstruct_path(prev, goal_id), dist[goal_id]


def a_star(
    graph: Graph,
    start_id: int,
    goal_id: int,
    heuristic: Heuristic | None = None,
) -> tuple[list[int], float]:
    """
    Find a path from start_id to goal_id guided by a heuristic.

    The open set is ordered by f = g + h. A neighbor whose tentative cost
    improves is re-inserted; outdated heap entries are skipped on pop.

    Args:
        graph: Graph to search
        start_id: Start node id
        goal_id: Goal node id
        heuristic: Estimate of remaining cost from a node to the goal.
            Defaults to euclidean_heuristic, which is not admissible in
            general, so the returned path may be suboptimal.

    Returns:
        (path, cost), or ([], inf) if there is no path
    """
    if not graph.has_node(start_id) or not graph.has_node(goal_id):
        logger.debug(f"A*: endpoint missing ({start_id} -> {goal_id})")
        return [], math.inf

    if heuristic is None:
        heuristic = euclidean_heuristic

    goal = graph.get_node(goal_id)
    g_score: dict[int, float] = {start_id: 0.0}
    f_score: dict[int, float] = {start_id: heuristic(graph.get_node(start_id), goal)}
    came_from: dict[int, int] = {}
    open_heap = [(f_score[start_id], start_id)]

    while open_heap:
        f, current = heapq.heappop(open_heap)
        if f > f_score[current]:
            continue

        if current == goal_id:
            return _reconstruct_path(came_from, current), g_score[current]

        for neighbor in graph.get_neighbors(current):
            found, weight = graph.try_get_edge_weight(current, neighbor)
            if not found:
                continue

            tentative = g_score[current] + weight
            if tentative < g_score.get(neighbor, math.inf):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(graph.get_node(neighbor), goal)
                heapq.heappush(open_heap, (f_score[neighbor], neighbor))

    logger.debug(f"A*: {goal_id} unreachable from {start_id}")
    return [], math.inf


def path_cost(graph: Graph, path: list[int]) -> float:
    """
    Sum of edge weights along a path.

    Returns 0.0 for paths with fewer than two nodes and inf if any hop
    is not an edge.
    """
    total = 0.0
    for u, v in zip(path, path[1:]):
        found, weight = graph.try_get_edge_weight(u, v)
        if not found:
            return math.inf
        total += weight
    return total


def _reconstruct_path(came_from: dict[int, int], goal_id: int) -> list[int]:
    path = [goal_id]
    current = goal_id
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path
