"""
edge.py — Graph Edge
====================
Connects two nodes with a positive weight.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Directedness is carried by `kind`:  DEFAULT and PATH edges are
    one-way (source → target), UNDIRECTED edges work both ways.  PATH is
    only a cosmetic marker the presentation layer puts on solution edges.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Edge Kind Enum
# ---------------------------------------------------------------------------
class EdgeKind(Enum):
    DEFAULT    = "default"      # directed
    PATH       = "path"         # directed, highlighted as part of a solution
    UNDIRECTED = "undirected"


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        id     : Unique identifier.
        source : ID of the tail node.
        target : ID of the head node.
        weight : Numeric cost, expected > 0.
        kind   : EdgeKind.
    """

    __slots__ = ("id", "source", "target", "weight", "kind")

    def __init__(
        self,
        edge_id: str,
        source: str,
        target: str,
        weight: float = 1.0,
        kind: EdgeKind = EdgeKind.DEFAULT,
    ):
        self.id:     str      = edge_id
        self.source: str      = source
        self.target: str      = target
        self.weight: float    = weight
        self.kind:   EdgeKind = kind

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @property
    def directed(self) -> bool:
        return self.kind is not EdgeKind.UNDIRECTED

    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge can be walked node_a → node_b."""
        if self.source == node_a and self.target == node_b:
            return True
        return not self.directed and self.source == node_b and self.target == node_a

    def other_end(self, node_id: str) -> Optional[str]:
        """Given the node we're leaving from, return where the edge leads. None if it can't be walked from there."""
        if node_id == self.source:
            return self.target
        if node_id == self.target and not self.directed:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
            "type":   self.kind.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        return cls(
            edge_id=str(data["id"]),
            source=str(data["source"]),
            target=str(data["target"]),
            weight=data.get("weight", 1.0),
            kind=EdgeKind(data.get("type", EdgeKind.DEFAULT.value)),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        arrow = " → " if self.directed else " ↔ "
        return f"Edge({self.source}{arrow}{self.target}, w={self.weight}, kind={self.kind.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Edge) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
