"""
astar.py — A* Search
=====================
Dijkstra with a sense of direction: the frontier is ordered by

    f(n) = g(n) + h(n, goal)

where g is the accumulated edge cost and h is a straight-line estimate
from canvas coordinates.  Relaxation is the same lazy scheme as
Dijkstra (push on strictly lower g, skip stale entries at pop).

Built-in heuristics (both take two Node objects, return float):
  • euclidean   – √(Δx² + Δy²)     (default)
  • manhattan   – |Δx| + |Δy|

Optimality holds only when h never overestimates the remaining cost.
Canvas distances and edge weights are unrelated quantities, so that is
up to whoever draws the graph.
"""

import logging
from typing import Callable, Dict, List, Optional

from graph import Graph, Node, METRICS
from algorithms.frontier import PriorityFrontier
from algorithms.search import StepGen, StepSink, drain, explore
from algorithms.step import AlgorithmResult

logger = logging.getLogger(__name__)

DEFAULT_HEURISTIC = "euclidean"

HEURISTICS: Dict[str, Callable[[Node, Node], float]] = dict(METRICS)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def AStar(graph, source, target, h):",             # 0
    "    g[source] ← 0",                                # 1
    "    open ← [(h(source), source, [source])]",       # 2
    "    while open is not empty:",                     # 3
    "        (_, node, path) ← open.pop_min()",         # 4
    "        if node in closed: continue   # stale",    # 5
    "        closed.add(node)",                         # 6
    "        if node == target: return path, g[node]",  # 7
    "        for (nbr, w) in adj(node):",               # 8
    "            tentative ← g[node] + w",              # 9
    "            if tentative < g[nbr]:",               # 10
    "                g[nbr] ← tentative",               # 11
    "                f ← tentative + h(nbr, target)",   # 12
    "                open.push((f, nbr, path + nbr))",  # 13
    "    return NOT FOUND",                             # 14
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def astar(
    graph: Graph,
    source: str,
    target: str,
    heuristic: str = DEFAULT_HEURISTIC,
) -> StepGen:
    """
    Args:
        graph     : The graph.
        source    : Start node id.
        target    : Goal node id.
        heuristic : Key into HEURISTICS.  Unknown keys yield no steps and
                    return the empty result.
    """
    h_fn = HEURISTICS.get(heuristic)
    if h_fn is None:
        logger.warning("Unknown heuristic %r; expected one of %s", heuristic, sorted(HEURISTICS))
        return AlgorithmResult.empty()

    goal_node = graph.get_node(target)
    h_cache: Dict[str, float] = {}

    def f_score(node_id: str, cost: float) -> float:
        if node_id not in h_cache:
            h_cache[node_id] = h_fn(graph.nodes[node_id], goal_node)
        return cost + h_cache[node_id]

    return (yield from explore(graph, source, target, PriorityFrontier(), priority=f_score, relax=True))


def run(
    graph: Graph,
    source: str,
    target: str,
    heuristic: str = DEFAULT_HEURISTIC,
    step_sink: Optional[StepSink] = None,
) -> AlgorithmResult:
    return drain(astar(graph, source, target, heuristic), step_sink)
