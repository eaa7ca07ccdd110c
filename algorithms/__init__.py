"""
algorithms/__init__.py — Algorithm Registry & Dispatch
========================================================
Single source of truth for every search the engine knows about.

    from algorithms import REGISTRY, get_algorithm, dispatch

REGISTRY is a dict:
    {
        "bfs": AlgoInfo(key, label, fn, pseudocode, tags, has_heuristic, …),
        …
    }

Adding a search is: write the generator, add one entry here.  dispatch()
is the one front door callers need.  It never raises for a bad algorithm
or heuristic name; it logs a warning and hands back the empty result.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from graph import Graph
from algorithms.bfs      import bfs      as _bfs,      PSEUDOCODE as _bfs_pc
from algorithms.dfs      import dfs      as _dfs,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import dijkstra as _dijkstra, PSEUDOCODE as _dij_pc
from algorithms.astar    import astar    as _astar,    PSEUDOCODE as _ast_pc, HEURISTICS
from algorithms.search   import SearchRun, StepSink
from algorithms.step     import AlgorithmResult, QueueItem, StepResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                    # registry key, e.g. "bfs"
    label:            str                    # human label, e.g. "Breadth-First Search"
    fn:               Callable               # the generator function
    pseudocode:       List[str]              # lines for the side-panel
    tags:             List[str] = field(default_factory=list)
    has_heuristic:    bool      = False      # expose the heuristic selector?
    complexity_time:  str       = ""
    complexity_space: str       = ""
    description:      str       = ""

    def to_dict(self) -> dict:
        """JSON-safe card (everything except the callable)."""
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "tags":             list(self.tags),
            "has_heuristic":    self.has_heuristic,
            "heuristics":       sorted(HEURISTICS) if self.has_heuristic else [],
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "bfs": AlgoInfo(
        key="bfs", label="Breadth-First Search", fn=_bfs, pseudocode=_bfs_pc,
        tags=["unweighted", "shortest-path", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Explores layer-by-layer. Finds shortest path by hop count.",
    ),

    "dfs": AlgoInfo(
        key="dfs", label="Depth-First Search", fn=_dfs, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Dives deep before backtracking. Does NOT guarantee shortest path.",
    ),

    "dijkstra": AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", fn=_dijkstra, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        complexity_time="O((V + E) log E)", complexity_space="O(E)",
        description="Greedily expands the cheapest node. Optimal for non-negative weights.",
    ),

    "astar": AlgoInfo(
        key="astar", label="A* Search", fn=_astar, pseudocode=_ast_pc,
        tags=["weighted", "shortest-path", "heuristic"],
        has_heuristic=True,
        complexity_time="O((V + E) log E)", complexity_space="O(E)",
        description="Dijkstra + heuristic guidance. Optimal when h is admissible.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    """Filter registry by tag."""
    return [a for a in REGISTRY.values() if tag in a.tags]


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------
def search_steps(
    graph: Graph,
    start: str,
    goal: str,
    algorithm: str,
    heuristic: Optional[str] = None,
) -> Optional[SearchRun]:
    """
    A restartable step sequence for one request, or None when the
    algorithm name is unknown.  `heuristic` only reaches A*; None means
    the A* default (euclidean).
    """
    info = get_algorithm(algorithm)
    if info is None:
        logger.warning("Unknown algorithm %r; expected one of %s", algorithm, list(REGISTRY))
        return None

    kwargs = {"graph": graph, "source": start, "target": goal}
    if info.has_heuristic and heuristic is not None:
        kwargs["heuristic"] = heuristic

    logger.debug("Prepared %s run %r → %r (heuristic=%s)", info.key, start, goal, kwargs.get("heuristic"))
    return SearchRun(lambda: info.fn(**kwargs))


def dispatch(
    graph: Graph,
    start: str,
    goal: str,
    algorithm: str,
    heuristic: Optional[str] = None,
    step_sink: Optional[StepSink] = None,
) -> AlgorithmResult:
    """
    Run `algorithm` synchronously, feeding every step to `step_sink`.
    Unknown algorithm or heuristic → AlgorithmResult.empty(), sink untouched.
    """
    run = search_steps(graph, start, goal, algorithm, heuristic)
    if run is None:
        return AlgorithmResult.empty()
    return run.run(step_sink)


__all__ = [
    "AlgoInfo",
    "REGISTRY",
    "HEURISTICS",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
    "search_steps",
    "dispatch",
    "SearchRun",
    "AlgorithmResult",
    "StepResult",
    "QueueItem",
]
