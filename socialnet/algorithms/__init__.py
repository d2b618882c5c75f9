"""
Graph algorithms module.

Provides the analysis suite over a Graph:
- bfs / dfs: Reachability traversal
- dijkstra / a_star: Shortest paths with deterministic tie-breaking
- connected_components: Component detection
- degree_centrality / top_degree_nodes: Degree ranking
- welsh_powell / welsh_powell_by_component: Greedy coloring

None of these mutate the graph.
"""

from socialnet.algorithms.analysis import (
    color_count,
    degree_centrality,
    top_degree_nodes,
    welsh_powell,
    welsh_powell_by_component,
)
from socialnet.algorithms.community import (
    are_in_same_component,
    component_count,
    component_of,
    connected_components,
    largest_component,
)
from socialnet.algorithms.pathfinding import a_star, dijkstra, path_cost
from socialnet.algorithms.traversal import bfs, dfs

__all__ = [
    "bfs",
    "dfs",
    "dijkstra",
    "a_star",
    "path_cost",
    "connected_components",
    "component_count",
    "component_of",
    "are_in_same_component",
    "largest_component",
    "degree_centrality",
    "top_degree_nodes",
    "welsh_powell",
    "welsh_powell_by_component",
    "color_count",
]
