"""
dfs.py — Depth-First Search
============================
LIFO frontier: the most recently discovered neighbour is expanded first,
so the search dives down one branch before backtracking.  Neighbours are
pushed in adjacency order, which means the LAST neighbour listed is
explored first.

The path returned is whichever route reached the goal first.  It is NOT
guaranteed to be the shortest by hops or by cost.
"""

from typing import List, Optional

from graph import Graph
from algorithms.frontier import LifoFrontier
from algorithms.search import StepGen, StepSink, drain, explore
from algorithms.step import AlgorithmResult


PSEUDOCODE: List[str] = [
    "def DFS(graph, source, target):",              # 0
    "    stack ← [(source, [source])]",             # 1
    "    visited ← {}",                             # 2
    "    while stack is not empty:",                # 3
    "        (node, path) ← stack.pop()",           # 4
    "        if node in visited: continue",         # 5
    "        visited.add(node)",                    # 6
    "        if node == target: return path",       # 7
    "        for neighbour in adj(node):",          # 8
    "            if neighbour not in visited:",     # 9
    "                stack.push(neighbour)",        # 10
    "    return NOT FOUND",                         # 11
]


def dfs(graph: Graph, source: str, target: str) -> StepGen:
    return (yield from explore(graph, source, target, LifoFrontier()))


def run(
    graph: Graph,
    source: str,
    target: str,
    step_sink: Optional[StepSink] = None,
) -> AlgorithmResult:
    return drain(dfs(graph, source, target), step_sink)
