"""
graph.py — Graph Snapshot
==========================
The ordered collection of nodes and edges handed to a search.

Responsibilities:
  1. Building a snapshot                    (add / create nodes & edges)
  2. Lookups returning Optional             (get_node, get_edge, find_edge)
  3. Adjacency queries                      (neighbours, adjacency)
  4. Serialisation round-trip               (to_dict / from_dict)
  5. The demo graph the editor starts with  (sample)

Design decisions:
  - Nodes & edges live in insertion-ordered dicts keyed by id: O(1)
    lookup, and iteration order is the order the editor added them in.
    That order is what breaks ties between otherwise equal choices.
  - No adjacency cache.  `neighbours()` scans the edge list every call so
    it can never go stale; the search driver calls `adjacency()` once per
    run and works from that.
  - Searches never mutate a Graph.  Only the building methods below do.
"""

import math
import uuid
from typing import Dict, List, NamedTuple, Optional

from graph.node import Node, NodeRole, NodeShape
from graph.edge import Edge, EdgeKind
from graph.labels import NodeLabeler


class InvalidGraphError(ValueError):
    """Raised when a snapshot breaks a structural invariant."""


class Neighbour(NamedTuple):
    node_id: str
    weight:  float
    edge_id: str


# positions / weights of the demo graph shown on first load
SAMPLE_POSITIONS = [(150, 150), (300, 100), (450, 150), (150, 300), (450, 300), (300, 400)]
SAMPLE_EDGES     = [(0, 1, 2), (1, 2, 3), (0, 3, 4), (2, 4, 5), (3, 5, 6), (4, 5, 7)]


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}   (insertion ordered)
        edges : {edge_id: Edge}   (insertion ordered)
    """

    def __init__(self):
        self.nodes: Dict[str, Node] = {}
        self.edges: Dict[str, Edge] = {}

    # ==================================================================
    # BUILDING
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise InvalidGraphError(f"Duplicate node id: {node.id}")
        if not (math.isfinite(node.x) and math.isfinite(node.y)):
            raise InvalidGraphError(f"Node {node.id} has a non-finite position: ({node.x}, {node.y})")
        self.nodes[node.id] = node
        return node

    def create_node(
        self,
        x: float,
        y: float,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
        role: NodeRole = NodeRole.DEFAULT,
        shape: NodeShape = NodeShape.CIRCLE,
    ) -> Node:
        """Convenience: create + add in one call."""
        node_id = node_id or f"node-{uuid.uuid4().hex[:8]}"
        return self.add_node(Node(node_id, x=x, y=y, label=label, role=role, shape=shape))

    def add_edge(self, edge: Edge) -> Edge:
        if edge.id in self.edges:
            raise InvalidGraphError(f"Duplicate edge id: {edge.id}")
        for end in (edge.source, edge.target):
            if end not in self.nodes:
                raise InvalidGraphError(f"Edge {edge.id} references unknown node '{end}'")
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, (int, float)) or math.isnan(edge.weight):
            raise InvalidGraphError(f"Edge {edge.id} has a non-numeric weight: {edge.weight!r}")
        if edge.weight < 0:
            raise InvalidGraphError(f"Edge {edge.id} has a negative weight: {edge.weight}")
        self.edges[edge.id] = edge
        return edge

    def create_edge(
        self,
        source: str,
        target: str,
        weight: float = 1.0,
        kind: EdgeKind = EdgeKind.DEFAULT,
        edge_id: Optional[str] = None,
    ) -> Edge:
        edge_id = edge_id or f"edge-{uuid.uuid4().hex[:8]}"
        return self.add_edge(Edge(edge_id, source, target, weight=weight, kind=kind))

    # ==================================================================
    # LOOKUPS
    # ==================================================================
    def get_node(self, node_id: str) -> Optional[Node]:
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[Edge]:
        return self.edges.get(edge_id)

    def find_edge(self, source_id: str, target_id: str) -> Optional[Edge]:
        """
        First edge (in edge order) that can be walked source_id → target_id:
        either a directed edge with exactly those endpoints, or an
        undirected edge stored the other way round.
        """
        for edge in self.edges.values():
            if edge.connects(source_id, target_id):
                return edge
        return None

    def start_node_id(self) -> Optional[str]:
        return self._first_with_role(NodeRole.START)

    def goal_node_id(self) -> Optional[str]:
        return self._first_with_role(NodeRole.GOAL)

    def _first_with_role(self, role: NodeRole) -> Optional[str]:
        for node in self.nodes.values():
            if node.role is role:
                return node.id
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: str) -> List[Neighbour]:
        """Every node reachable from node_id over one edge, in edge order."""
        result = []
        for edge in self.edges.values():
            nbr = edge.other_end(node_id)
            if nbr is not None:
                result.append(Neighbour(nbr, edge.weight, edge.id))
        return result

    def adjacency(self) -> Dict[str, List[Neighbour]]:
        """neighbours() for every node at once, in one pass over the edges."""
        adj: Dict[str, List[Neighbour]] = {nid: [] for nid in self.nodes}
        for edge in self.edges.values():
            adj[edge.source].append(Neighbour(edge.target, edge.weight, edge.id))
            if not edge.directed and edge.target != edge.source:
                adj[edge.target].append(Neighbour(edge.source, edge.weight, edge.id))
        return adj

    def path_cost(self, path: List[str]) -> float:
        """Sum of weights along a node path; hops with no edge contribute nothing."""
        cost = 0.0
        for a, b in zip(path, path[1:]):
            edge = self.find_edge(a, b)
            if edge:
                cost += edge.weight
        return cost

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges.values()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        """Build a snapshot from the editor's JSON shape.  Raises InvalidGraphError."""
        if not isinstance(data, dict):
            raise InvalidGraphError("Graph snapshot must be an object with 'nodes' and 'edges'")
        g = cls()
        try:
            for nd in data.get("nodes", []):
                g.add_node(Node.from_dict(nd))
            for ed in data.get("edges", []):
                g.add_edge(Edge.from_dict(ed))
        except (KeyError, TypeError) as e:
            raise InvalidGraphError(f"Malformed graph snapshot: {e!r}") from e
        except InvalidGraphError:
            raise
        except ValueError as e:
            # bad enum value or coordinate
            raise InvalidGraphError(f"Malformed graph snapshot: {e}") from e
        return g

    # ==================================================================
    # SAMPLE GRAPH
    # ==================================================================
    @classmethod
    def sample(cls, labeler: Optional[NodeLabeler] = None) -> "Graph":
        """
        Six nodes, six directed edges, first node START and last GOAL.
        The labeler is reset first so the sample always reads Node 1…6.
        """
        labeler = labeler or NodeLabeler()
        labeler.reset()

        g = cls()
        ids = []
        for x, y in SAMPLE_POSITIONS:
            ids.append(g.create_node(x, y, label=labeler.next_label()).id)
        for src, tgt, w in SAMPLE_EDGES:
            g.create_edge(ids[src], ids[tgt], weight=w)

        g.nodes[ids[0]].role  = NodeRole.START
        g.nodes[ids[-1]].role = NodeRole.GOAL
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __contains__(self, node_id: str) -> bool:
        return node_id in self.nodes

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"
