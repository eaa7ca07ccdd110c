"""
step.py — Step Protocol & Result Types
=======================================
Every search is a generator that yields StepResult objects and, when it
is exhausted, returns an AlgorithmResult.

A StepResult is a frozen-in-time picture taken right after a node is
settled:

    • Which node was just settled (None on an unreachable-goal finish)
    • Every node settled so far, in settlement order
    • The best-known path (nodes + edges) to that node
    • The nodes still waiting in the frontier
    • Whether this is the terminal step

Design decisions:
  - Plain frozen dataclasses holding tuples.  They are SNAPSHOTS; the
    search generator is the only writer, playback and the HTTP layer are
    pure readers.
  - QueueItem carries its whole path so no predecessor-map walk is
    needed to build the answer.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class StepResult:
    """
    Attributes:
        current_node_id : Node just settled, or the goal on a successful
                          finish.  None when the frontier ran dry.
        visited         : Settled node ids so far, in settlement order.
        path            : Best-known node path to current_node_id.
        path_edges      : Edge ids along `path`.
        frontier        : Discovered-but-unsettled node ids, in dequeue order.
        is_complete     : True on the single terminal step of a run.
    """

    current_node_id: Optional[str]
    visited:         Tuple[str, ...] = ()
    path:            Tuple[str, ...] = ()
    path_edges:      Tuple[str, ...] = ()
    frontier:        Tuple[str, ...] = ()
    is_complete:     bool            = False

    def to_dict(self) -> dict:
        return {
            "current_node_id": self.current_node_id,
            "visited":         list(self.visited),
            "path":            list(self.path),
            "path_edges":      list(self.path_edges),
            "frontier":        list(self.frontier),
            "is_complete":     self.is_complete,
        }


@dataclass(frozen=True)
class AlgorithmResult:
    """
    Attributes:
        path           : Node ids from start to goal (empty if unreachable).
        path_edges     : Edge ids along `path`.
        path_length    : Number of nodes on `path`.
        path_cost      : Sum of traversed edge weights.
        nodes_visited  : Nodes settled during the search.
        execution_time : Wall-clock milliseconds.
    """

    path:           Tuple[str, ...] = ()
    path_edges:     Tuple[str, ...] = ()
    path_length:    int             = 0
    path_cost:      float           = 0.0
    nodes_visited:  int             = 0
    execution_time: float           = 0.0

    @property
    def found(self) -> bool:
        return bool(self.path)

    @classmethod
    def empty(cls) -> "AlgorithmResult":
        """The zero result: returned for bad input instead of raising."""
        return cls()

    def to_dict(self) -> dict:
        return {
            "path":           list(self.path),
            "path_edges":     list(self.path_edges),
            "path_length":    self.path_length,
            "path_cost":      self.path_cost,
            "nodes_visited":  self.nodes_visited,
            "execution_time": self.execution_time,
        }


@dataclass(frozen=True)
class QueueItem:
    node_id:    str
    path:       Tuple[str, ...]
    path_edges: Tuple[str, ...]
    cost:       float
    priority:   float = 0.0

    def extend(self, node_id: str, edge_id: str, weight: float, priority: float = 0.0) -> "QueueItem":
        """The item reached by walking one more edge from this one."""
        return QueueItem(
            node_id=node_id,
            path=self.path + (node_id,),
            path_edges=self.path_edges + (edge_id,),
            cost=self.cost + weight,
            priority=priority,
        )
