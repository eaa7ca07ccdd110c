"""
bfs.py — Breadth-First Search
==============================
FIFO frontier: nodes are settled layer by layer, so the first time the
goal is popped its path has the fewest possible hops.  Edge weights are
ignored for ordering but still summed into path_cost.

Pseudocode lines match the PSEUDOCODE constant exported alongside the
generator so a front-end can show them next to the animation.
"""

from typing import List, Optional

from graph import Graph
from algorithms.frontier import FifoFrontier
from algorithms.search import StepGen, StepSink, drain, explore
from algorithms.step import AlgorithmResult


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS(graph, source, target):",              # 0
    "    queue ← [(source, [source])]",             # 1
    "    visited ← {}",                             # 2
    "    while queue is not empty:",                # 3
    "        (node, path) ← queue.dequeue()",       # 4
    "        if node in visited: continue",         # 5
    "        visited.add(node)",                    # 6
    "        if node == target: return path",       # 7
    "        for neighbour in adj(node):",          # 8
    "            if neighbour not in visited:",     # 9
    "                queue.enqueue(neighbour)",     # 10
    "    return NOT FOUND",                         # 11
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def bfs(graph: Graph, source: str, target: str) -> StepGen:
    """
    Yields a StepResult per settled node and a terminal step; returns the
    AlgorithmResult.
    """
    return (yield from explore(graph, source, target, FifoFrontier()))


def run(
    graph: Graph,
    source: str,
    target: str,
    step_sink: Optional[StepSink] = None,
) -> AlgorithmResult:
    return drain(bfs(graph, source, target), step_sink)
