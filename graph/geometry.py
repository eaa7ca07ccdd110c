"""
geometry.py — Distance Metrics
===============================
Canvas-space distances between two nodes.  A* uses these as its
heuristic; nothing else in the engine depends on node positions.

Both metrics are non-negative.  Whether they are *admissible* depends on
the caller: they only under-estimate the remaining cost when edge weights
are at least the spatial distance they span.
"""

import math
from typing import Callable, Dict

from graph.node import Node


def manhattan(a: Node, b: Node) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def euclidean(a: Node, b: Node) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


METRICS: Dict[str, Callable[[Node, Node], float]] = {
    "manhattan": manhattan,
    "euclidean": euclidean,
}


def distance(metric: str, a: Node, b: Node) -> float:
    """Distance between `a` and `b` under the named metric."""
    try:
        fn = METRICS[metric]
    except KeyError:
        raise ValueError(f"Unknown distance metric: {metric}") from None
    return fn(a, b)
