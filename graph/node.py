"""
node.py — Graph Node
====================
A point on the canvas.  The engine reads only `id`, `x` and `y`; the
role tag and shape exist so a snapshot coming from the editor survives a
round-trip untouched.

Design decisions:
  - `role` is a write target for the presentation layer (start / goal /
    visited / path colouring).  Algorithms never read it; they receive
    start and goal as plain ids.
  - Nodes are compared by id only, mirroring Edge.
"""

from enum import Enum
from typing import Optional


# ---------------------------------------------------------------------------
# Role / Shape Enums — what the editor tags a node with
# ---------------------------------------------------------------------------
class NodeRole(Enum):
    DEFAULT = "default"
    START   = "start"
    GOAL    = "goal"
    VISITED = "visited"   # set by the playback layer while replaying
    PATH    = "path"      # on the final path


class NodeShape(Enum):
    CIRCLE = "circle"
    SQUARE = "square"


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id    : Unique identifier.
        x, y  : Canvas coordinates.
        label : Display name (falls back to the id).
        role  : NodeRole tag.
        shape : NodeShape, purely cosmetic.
    """

    __slots__ = ("id", "x", "y", "label", "role", "shape")

    def __init__(
        self,
        node_id: str,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        role: NodeRole = NodeRole.DEFAULT,
        shape: NodeShape = NodeShape.CIRCLE,
    ):
        self.id:    str       = node_id
        self.x:     float     = float(x)
        self.y:     float     = float(y)
        self.label: str       = label or node_id
        self.role:  NodeRole  = role
        self.shape: NodeShape = shape

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "x":     self.x,
            "y":     self.y,
            "label": self.label,
            "type":  self.role.value,
            "shape": self.shape.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            node_id=str(data["id"]),
            x=data.get("x", 0.0),
            y=data.get("y", 0.0),
            label=data.get("label"),
            role=NodeRole(data.get("type", NodeRole.DEFAULT.value)),
            shape=NodeShape(data.get("shape") or NodeShape.CIRCLE.value),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, role={self.role.value}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
