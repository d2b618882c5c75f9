"""
Node: an actor in the social network.
"""

from __future__ import annotations


class Node:
    """
    A person in the social network.

    Holds only its own scalar attributes. Adjacency is owned by the Graph,
    so a Node never references other nodes.

    Attributes:
        id: Unique integer identifier
        name: Display name (non-blank, stripped)
        activity: Activity level, intended range [0, 1] (not enforced)
        interaction: Interaction count (not enforced)
    """

    def __init__(
        self,
        id: int,
        name: str,
        activity: float = 0.0,
        interaction: float = 0.0,
    ) -> None:
        self._id = id
        self.name = name
        self.activity = activity
        self.interaction = interaction

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        if value is None or not str(value).strip():
            raise ValueError("Node name must not be blank")
        self._name = str(value).strip()

    def update(
        self,
        name: str | None = None,
        activity: float | None = None,
        interaction: float | None = None,
    ) -> None:
        """
        Update attributes in place. Fields left as None are unchanged.

        A blank name counts as not supplied.
        """
        if name is not None and str(name).strip():
            self.name = name
        if activity is not None:
            self.activity = activity
        if interaction is not None:
            self.interaction = interaction

    def to_record(self) -> tuple[int, str, float, float]:
        """Return the (id, name, activity, interaction) record for this node."""
        return (self._id, self._name, self.activity, self.interaction)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other.id == self._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"{self._name} (#{self._id})"

    def __repr__(self) -> str:
        return (
            f"Node(id={self._id!r}, name={self._name!r}, "
            f"activity={self.activity!r}, interaction={self.interaction!r})"
        )
