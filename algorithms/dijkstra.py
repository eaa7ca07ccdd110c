"""
dijkstra.py — Dijkstra's Algorithm
===================================
Priority frontier keyed on accumulated cost.  A neighbour is pushed only
when the new route is strictly cheaper than the best one pushed so far;
older, costlier entries for the same node are left in the heap and
skipped when they surface.

Correct for non-negative weights.  Negative weights are not rejected
here, the result is simply undefined.
"""

from typing import List, Optional

from graph import Graph
from algorithms.frontier import PriorityFrontier
from algorithms.search import StepGen, StepSink, drain, explore
from algorithms.step import AlgorithmResult


PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",             # 0
    "    best[source] ← 0",                             # 1
    "    pq ← [(0, source, [source])]",                 # 2
    "    while pq is not empty:",                       # 3
    "        (d, node, path) ← pq.pop_min()",           # 4
    "        if node in visited: continue   # stale",   # 5
    "        visited.add(node)",                        # 6
    "        if node == target: return path, d",        # 7
    "        for (nbr, w) in adj(node):",               # 8
    "            if d + w < best[nbr]:",                # 9
    "                best[nbr] ← d + w",                # 10
    "                pq.push((d + w, nbr, path + nbr))",# 11
    "    return NOT FOUND",                             # 12
]


def _cost(node_id: str, cost: float) -> float:
    return cost


def dijkstra(graph: Graph, source: str, target: str) -> StepGen:
    """
    Args:
        graph  : The graph.
        source : Start node id.
        target : Goal node id.

    Returns (via StopIteration.value):
        AlgorithmResult with the minimum-cost path.
    """
    return (yield from explore(graph, source, target, PriorityFrontier(), priority=_cost, relax=True))


def run(
    graph: Graph,
    source: str,
    target: str,
    step_sink: Optional[StepSink] = None,
) -> AlgorithmResult:
    return drain(dijkstra(graph, source, target), step_sink)
