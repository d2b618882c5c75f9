"""
Graph data model.

Provides the core types of the social network:
- Node: An actor with a name and two numeric attributes
- Edge: A positively weighted relation between two distinct nodes
- Graph: Container owning nodes and undirected adjacency
"""

from socialnet.models.edge import Edge
from socialnet.models.graph import EdgeRecord, Graph, NodeRecord
from socialnet.models.node import Node

__all__ = [
    "Node",
    "Edge",
    "Graph",
    "NodeRecord",
    "EdgeRecord",
]
