"""
Social Network Analysis core.

An in-memory weighted undirected social graph with similarity-based
edge weights and a fixed suite of graph algorithms: traversal,
shortest paths, connected components, degree centrality and
Welsh-Powell coloring.
"""

__version__ = "0.1.0"
