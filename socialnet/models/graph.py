"""
Graph container for the social network.

Usage:
    from socialnet.models import Edge, Graph, Node

    graph = Graph()
    graph.add_node(Node(1, "Alice", 0.8, 12))
    graph.add_node(Node(2, "Bob", 0.5, 3))
    graph.add_edge(Edge(1, 2, 0.5))
    graph.get_neighbors(1)          # [2]
    graph.try_get_edge_weight(2, 1) # (True, 0.5)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from socialnet.models.edge import Edge, check_weight
from socialnet.models.node import Node

logger = logging.getLogger(__name__)

NodeRecord = tuple[int, str, float, float]
EdgeRecord = tuple[int, int, float]


class Graph:
    """
    Weighted, undirected, simple graph.

    The graph exclusively owns adjacency. Each undirected relation is
    stored as a mirrored pair of Edge records with equal weight, one in
    each endpoint's adjacency list.

    Mutators return False for "already exists" / "not found" conditions
    instead of raising. Only a missing argument or an invalid value raises.

    Attributes:
        nodes: Read-only view of the node id -> Node mapping
    """

    def __init__(self) -> None:
        self._nodes: dict[int, Node] = {}
        self._adj: dict[int, list[Edge]] = {}

    # =========================================================================
    # Bulk construction / extraction
    # =========================================================================

    @classmethod
    def from_records(
        cls,
        nodes: Iterable[NodeRecord],
        edges: Iterable[EdgeRecord] = (),
    ) -> Graph:
        """
        Build a graph from node and edge records.

        Nodes are added first, then edges, both in the given order.
        Records the graph rejects (duplicate id, missing endpoint, duplicate
        pair) are logged and skipped.

        Args:
            nodes: (id, name, activity, interaction) records
            edges: (source_id, target_id, weight) records

        Raises:
            ValueError: If a record holds invalid values (blank name,
                non-positive id, self-loop, non-positive weight)
        """
        graph = cls()

        for node_id, name, activity, interaction in nodes:
            if not graph.add_node(Node(node_id, name, activity, interaction)):
                logger.warning(f"Skipping node record {node_id}: duplicate id")

        for source_id, target_id, weight in edges:
            if not graph.add_edge(Edge(source_id, target_id, weight)):
                logger.warning(
                    f"Skipping edge record {source_id} -> {target_id}: "
                    "missing endpoint or duplicate pair"
                )

        logger.debug(
            f"Built graph with {graph.node_count} nodes and {graph.edge_count} edges"
        )
        return graph

    def to_records(self) -> tuple[list[NodeRecord], list[EdgeRecord]]:
        """Return node records and one edge record per undirected pair."""
        node_records = [node.to_record() for node in self._nodes.values()]
        edge_records = [edge.to_record() for edge in self.unique_edges()]
        return node_records, edge_records

    # =========================================================================
    # Node management
    # =========================================================================

    @property
    def nodes(self) -> Mapping[int, Node]:
        return MappingProxyType(self._nodes)

    def add_node(self, node: Node) -> bool:
        """
        Add a node.

        Returns:
            True if added, False if the id is already present

        Raises:
            ValueError: If node is None
        """
        if node is None:
            raise ValueError("node must not be None")
        if node.id in self._nodes:
            return False

        self._nodes[node.id] = node
        return True

    def remove_node(self, node_id: int) -> bool:
        """Remove a node and every edge touching it, in both directions."""
        if node_id not in self._nodes:
            return False

        for edge in list(self._adj.get(node_id, [])):
            self.remove_edge(node_id, edge.target_id)
        self._adj.pop(node_id, None)

        del self._nodes[node_id]
        return True

    def update_node(
        self,
        node_id: int,
        name: str | None = None,
        activity: float | None = None,
        interaction: float | None = None,
    ) -> bool:
        """Update the supplied fields of a node. False if the id is unknown."""
        node = self._nodes.get(node_id)
        if node is None:
            return False
        node.update(name=name, activity=activity, interaction=interaction)
        return True

    def get_node(self, node_id: int) -> Node | None:
        return self._nodes.get(node_id)

    def has_node(self, node_id: int) -> bool:
        return node_id in self._nodes

    def get_all_nodes(self) -> list[Node]:
        """All nodes in insertion order."""
        return list(self._nodes.values())

    def get_neighbors(self, node_id: int) -> list[int]:
        """Neighbor ids in adjacency order. Empty for unknown ids."""
        return [edge.target_id for edge in self._adj.get(node_id, [])]

    def degree(self, node_id: int) -> int:
        return len(self._adj.get(node_id, []))

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    # =========================================================================
    # Edge management
    # =========================================================================

    def add_edge(self, edge: Edge) -> bool:
        """
        Add an undirected edge, stored as a mirrored pair.

        Both directions are recorded, or neither.

        Returns:
            False for a missing endpoint or an existing pair

        Raises:
            ValueError: If edge is None
        """
        if edge is None:
            raise ValueError("edge must not be None")
        if edge.source_id not in self._nodes or edge.target_id not in self._nodes:
            return False
        if self.has_edge(edge.source_id, edge.target_id) or self.has_edge(
            edge.target_id, edge.source_id
        ):
            return False

        self._adj.setdefault(edge.source_id, []).append(edge)
        self._adj.setdefault(edge.target_id, []).append(edge.reversed())
        return True

    def remove_edge(self, source_id: int, target_id: int) -> bool:
        """Remove both directions. True if at least one was removed."""
        removed = self._remove_directed(source_id, target_id)
        removed |= self._remove_directed(target_id, source_id)
        return removed

    def _remove_directed(self, source_id: int, target_id: int) -> bool:
        edges = self._adj.get(source_id)
        if not edges:
            return False
        kept = [e for e in edges if e.target_id != target_id]
        if len(kept) == len(edges):
            return False
        edges[:] = kept
        return True

    def _find_edge(self, source_id: int, target_id: int) -> Edge | None:
        for edge in self._adj.get(source_id, []):
            if edge.target_id == target_id:
                return edge
        return None

    def has_edge(self, source_id: int, target_id: int) -> bool:
        return self._find_edge(source_id, target_id) is not None

    def try_get_edge_weight(self, source_id: int, target_id: int) -> tuple[bool, float]:
        """
        Look up the weight of a directed entry.

        Returns:
            (True, weight) if present, (False, inf) otherwise
        """
        edge = self._find_edge(source_id, target_id)
        if edge is None:
            return False, math.inf
        return True, edge.weight

    def set_edge_weight(self, source_id: int, target_id: int, weight: float) -> bool:
        """
        Set the weight of an undirected edge in both directions.

        Returns:
            False if there is no such edge

        Raises:
            ValueError: If weight is not positive and finite
        """
        check_weight(weight)
        if not self.has_edge(source_id, target_id) or not self.has_edge(target_id, source_id):
            return False
        self._replace_weight(source_id, target_id, weight)
        self._replace_weight(target_id, source_id, weight)
        return True

    def _replace_weight(self, source_id: int, target_id: int, weight: float) -> None:
        edges = self._adj[source_id]
        for i, edge in enumerate(edges):
            if edge.target_id == target_id:
                edges[i] = edge.with_weight(weight)
                return

    def get_edges(self) -> list[Edge]:
        """
        Every stored edge record.

        Each undirected relation appears once per direction; use
        unique_edges() for one record per pair.
        """
        return [edge for edges in self._adj.values() for edge in edges]

    def unique_edges(self) -> list[Edge]:
        """One record per undirected pair, the one whose source is the smaller id."""
        return [edge for edge in self.get_edges() if edge.source_id < edge.target_id]

    @property
    def edge_count(self) -> int:
        """Number of undirected relations."""
        return sum(len(edges) for edges in self._adj.values()) // 2

    # =========================================================================
    # Dunder helpers
    # =========================================================================

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
