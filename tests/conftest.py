"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from socialnet.models import Graph


@pytest.fixture
def star_graph() -> Graph:
    """Nodes 1-4 with edges 1-2, 2-3, 2-4."""
    return Graph.from_records(
        nodes=[
            (1, "A", 0.5, 1),
            (2, "B", 0.2, 0),
            (3, "C", 0.1, 0),
            (4, "D", 0.4, 2),
        ],
        edges=[(1, 2, 1.0), (2, 3, 1.0), (2, 4, 1.0)],
    )


@pytest.fixture
def ring_graph() -> Graph:
    """Five-node ring with weights chosen so 1 -> 4 is cheapest via 5."""
    return Graph.from_records(
        nodes=[(i, f"N{i}", 0.1 * i, i) for i in range(1, 6)],
        edges=[
            (1, 2, 0.5),
            (2, 3, 0.6),
            (3, 4, 0.7),
            (4, 5, 0.4),
            (1, 5, 0.8),
        ],
    )


@pytest.fixture
def two_triangles() -> Graph:
    """Two disjoint triangles: 1-2-3 and 4-5-6."""
    return Graph.from_records(
        nodes=[(i, f"N{i}", 0.5, 1) for i in range(1, 7)],
        edges=[
            (1, 2, 1.0),
            (2, 3, 1.0),
            (1, 3, 1.0),
            (4, 5, 1.0),
            (5, 6, 1.0),
            (4, 6, 1.0),
        ],
    )


@pytest.fixture
def sample_network() -> Graph:
    """A small social network with two components and an isolated node."""
    return Graph.from_records(
        nodes=[
            (1, "Alice", 0.8, 12),
            (2, "Bob", 0.5, 3),
            (3, "Carol", 0.9, 10),
            (4, "Dave", 0.2, 1),
            (5, "Eve", 0.7, 8),
            (6, "Frank", 0.3, 2),
            (7, "Grace", 0.6, 5),
            (8, "Heidi", 0.1, 0),
        ],
        edges=[
            (1, 2, 0.4),
            (1, 3, 0.9),
            (2, 3, 0.3),
            (3, 5, 0.8),
            (2, 4, 0.2),
            (5, 4, 0.6),
            (6, 7, 0.5),
        ],
    )
