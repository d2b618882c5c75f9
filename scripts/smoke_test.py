#!/usr/bin/env python3
"""
Smoke test: run the full analysis suite on a small sample network.

Prints traversal orders, shortest paths, components, top nodes and
colorings so every algorithm can be eyeballed in one go.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from socialnet.algorithms import (  # noqa: E402 - must be after sys.path modification
    a_star,
    bfs,
    color_count,
    connected_components,
    dfs,
    dijkstra,
    top_degree_nodes,
    welsh_powell,
    welsh_powell_by_component,
)
from socialnet.config import LOG_LEVEL  # noqa: E402
from socialnet.models import Graph  # noqa: E402
from socialnet.weights import assign_similarity_weights  # noqa: E402

# =============================================================================
# SAMPLE NETWORK
# =============================================================================

NODES = [
    (1, "Alice", 0.8, 12),
    (2, "Bob", 0.5, 3),
    (3, "Carol", 0.9, 10),
    (4, "Dave", 0.2, 1),
    (5, "Eve", 0.7, 8),
    (6, "Frank", 0.3, 2),
    (7, "Grace", 0.6, 5),
    (8, "Heidi", 0.1, 0),
]

EDGES = [
    (1, 2, 1.0),
    (1, 3, 1.0),
    (2, 3, 1.0),
    (3, 5, 1.0),
    (2, 4, 1.0),
    (5, 4, 1.0),
    (6, 7, 1.0),
]

# (start, goal) pairs to search
QUERIES = [
    (1, 4),
    (4, 3),
    (1, 7),
]


def main() -> int:
    parser = argparse.ArgumentParser(description="Run every analysis on a sample network")
    parser.add_argument("--start", type=int, default=1, help="Traversal start node id")
    parser.add_argument("--top", type=int, default=5, help="Number of top-degree nodes")
    parser.add_argument(
        "--raw-weights",
        action="store_true",
        help="Keep the given edge weights instead of deriving similarity weights",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper())

    graph = Graph.from_records(NODES, EDGES)
    if not args.raw_weights:
        assign_similarity_weights(graph)

    print("=" * 70)
    print(f"SMOKE TEST: {graph.node_count} nodes, {graph.edge_count} edges")
    print("=" * 70)

    names = {node.id: node.name for node in graph.get_all_nodes()}

    def label(path: list[int]) -> str:
        return " -> ".join(names[node_id] for node_id in path) if path else "(no path)"

    print("\nEdges:")
    for edge in graph.unique_edges():
        print(f"  {names[edge.source_id]:<8} {names[edge.target_id]:<8} w={edge.weight:.4f}")

    print(f"\nBFS from {args.start}: {bfs(graph, args.start)}")
    print(f"DFS from {args.start}: {dfs(graph, args.start)}")

    print(f"\n{'Query':<10} {'Dijkstra':>10} {'A*':>10}  Path")
    print("-" * 70)
    for start, goal in QUERIES:
        d_path, d_cost = dijkstra(graph, start, goal)
        _, a_cost = a_star(graph, start, goal)
        print(f"{start} -> {goal:<5} {d_cost:>10.4f} {a_cost:>10.4f}  {label(d_path)}")

    print("\nComponents:")
    for i, component in enumerate(connected_components(graph), 1):
        print(f"  Component-{i} ({len(component)} nodes): {sorted(component)}")

    print(f"\nTop {args.top} by degree:")
    for node_id, degree in top_degree_nodes(graph, args.top):
        print(f"  {names[node_id]:<8} {degree}")

    whole = welsh_powell(graph)
    per_component = welsh_powell_by_component(graph)
    print(f"\nWelsh-Powell: {color_count(whole)} colors {whole}")
    print(f"Per component: {color_count(per_component)} colors {per_component}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
