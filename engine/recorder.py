"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete search (every StepResult plus the AlgorithmResult),
then derives the metrics card the analytics panel and comparison mode
show.

Usage:
    rec = Recorder()
    rec.start(algo_key="dijkstra", source="A", target="F", graph=g)
    metrics = rec.run_to_completion()
    rec.export()                     # JSON-safe snapshot for replay

Comparison Mode:
    Hold two Recorders (one per algorithm), run both on the SAME graph,
    then compare(rec1.metrics, rec2.metrics) → ComparisonResult.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from graph import Graph
from algorithms import AlgoInfo, SearchRun, get_algorithm, search_steps
from algorithms.step import AlgorithmResult, StepResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str   = ""
    algo_label:        str   = ""
    source:            str   = ""
    target:            str   = ""
    nodes_visited:     int   = 0
    path_length:       int   = 0          # nodes on the final path
    path_cost:         float = 0.0        # total weight of the final path
    path_found:        bool  = False
    total_steps:       int   = 0          # StepResults emitted, terminal included
    execution_time_ms: float = 0.0
    heuristic:         str   = ""         # A* only

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived: a label, or "tie"
    winner_nodes: str = ""   # fewer nodes settled
    winner_path:  str = ""   # cheaper path (a found path beats none)
    winner_time:  str = ""   # faster

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps   : Every StepResult from the run.
        result  : The AlgorithmResult (after run_to_completion).
        metrics : Computed RunMetrics (after run_to_completion).
    """

    def __init__(self):
        self.steps:   List[StepResult]          = []
        self.result:  Optional[AlgorithmResult] = None
        self.metrics: Optional[RunMetrics]      = None

        self._run:       Optional[SearchRun] = None
        self._algo_info: Optional[AlgoInfo]  = None
        self._source:    str                 = ""
        self._target:    str                 = ""
        self._graph:     Optional[Graph]     = None
        self._heuristic: str                 = ""

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(
        self,
        algo_key: str,
        source: str,
        target: str,
        graph: Graph,
        heuristic: str = "euclidean",
    ) -> None:
        """Prepare the run.  Raises ValueError for an unknown algorithm."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self._source    = source
        self._target    = target
        self._graph     = graph
        self._heuristic = heuristic if info.has_heuristic else ""
        self.steps      = []
        self.result     = None
        self.metrics    = None
        self._run       = search_steps(graph, source, target, algo_key, heuristic)

    def run_to_completion(self) -> RunMetrics:
        """Exhaust the search, record every step, compute metrics."""
        if self._run is None:
            raise RuntimeError("Call start() first.")

        self.steps   = []
        self.result  = self._run.run(self.steps.append)
        self.metrics = self._compute_metrics()
        logger.debug(
            "Recorded %s: %d steps, %d settled, found=%s",
            self.metrics.algo_key, self.metrics.total_steps,
            self.metrics.nodes_visited, self.metrics.path_found,
        )
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key":  self._algo_info.key if self._algo_info else "",
            "source":    self._source,
            "target":    self._target,
            "heuristic": self._heuristic,
            "graph":     self._graph.to_dict() if self._graph else {},
            "result":    self.result.to_dict() if self.result else {},
            "metrics":   self.metrics.to_dict() if self.metrics else {},
            "steps":     [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self) -> RunMetrics:
        info   = self._algo_info
        result = self.result or AlgorithmResult.empty()
        return RunMetrics(
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            source=self._source,
            target=self._target,
            nodes_visited=result.nodes_visited,
            path_length=result.path_length,
            path_cost=result.path_cost,
            path_found=result.found,
            total_steps=len(self.steps),
            execution_time_ms=round(result.execution_time, 3),
            heuristic=self._heuristic,
        )


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: RunMetrics, right: RunMetrics) -> ComparisonResult:
    """Given two completed runs' metrics, produce a ComparisonResult."""

    def winner(l_val, r_val):
        if l_val == r_val:
            return "tie"
        return left.algo_label if l_val < r_val else right.algo_label

    # an unreachable goal has cost 0; it must not beat a real path
    inf = float("inf")
    l_cost = left.path_cost  if left.path_found  else inf
    r_cost = right.path_cost if right.path_found else inf

    return ComparisonResult(
        left=left,
        right=right,
        winner_nodes=winner(left.nodes_visited, right.nodes_visited),
        winner_path=winner(l_cost, r_cost),
        winner_time=winner(left.execution_time_ms, right.execution_time_ms),
    )
