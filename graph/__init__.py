"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Node, Edge
    from graph import NodeRole, NodeShape, EdgeKind
    from graph import distance, manhattan, euclidean
"""

from graph.node     import Node, NodeRole, NodeShape
from graph.edge     import Edge, EdgeKind
from graph.graph    import Graph, Neighbour, InvalidGraphError
from graph.geometry import distance, manhattan, euclidean, METRICS
from graph.labels   import NodeLabeler

__all__ = [
    "Node",      "NodeRole",  "NodeShape",
    "Edge",      "EdgeKind",
    "Graph",     "Neighbour", "InvalidGraphError",
    "distance",  "manhattan", "euclidean", "METRICS",
    "NodeLabeler",
]
