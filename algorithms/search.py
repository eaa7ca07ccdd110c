"""
search.py — Shared Search Driver
=================================
One traversal loop for every algorithm.  The caller decides the
frontier discipline and, for cost-based searches, how items are
prioritised; this module does the bookkeeping they all share:

  1. Pop an item.  Already settled?  Discard it (stale duplicate).
  2. Settle it: add to `visited`, count it, yield a StepResult.
  3. Goal?  Yield the terminal StepResult and return the answer.
     The goal is settled in step 2 like any other node before this
     check runs, so it counts towards nodes_visited and a run where
     start == goal reports one settled node.  A goal-first check (test
     the pop, return before counting) would report one fewer.
  4. Otherwise push one extended item per admissible neighbour.
  5. Frontier empty?  Yield a terminal StepResult with no current node
     and return an empty-path result.

Two revisit policies:
  - plain (BFS / DFS): push a neighbour unless it is already settled.
  - relaxing (Dijkstra / A*): push whenever the route is STRICTLY cheaper
    than the best one pushed so far.  Superseded entries stay in the
    frontier and are dropped when popped (lazy deletion), so the
    frontier can grow with the number of relaxations, not just nodes.

The generators here are single-use; SearchRun wraps a generator factory
into something that can be iterated any number of times.
"""

import logging
import time
from typing import Callable, Dict, Generator, Optional

from graph import Graph
from algorithms.frontier import Frontier
from algorithms.step import AlgorithmResult, QueueItem, StepResult

logger = logging.getLogger(__name__)

StepSink  = Callable[[StepResult], None]
Priority  = Callable[[str, float], float]        # (node_id, cost so far) → ordering key
StepGen   = Generator[StepResult, None, AlgorithmResult]


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------
def explore(
    graph: Graph,
    source: str,
    target: str,
    frontier: Frontier,
    priority: Optional[Priority] = None,
    relax: bool = False,
) -> StepGen:
    """
    Yields one StepResult per settled node plus one terminal step, then
    returns the AlgorithmResult.

    Args:
        graph    : Snapshot to search.  Never mutated.
        source   : Start node id.
        target   : Goal node id.
        frontier : Empty Frontier that fixes the expansion order.
        priority : Fills QueueItem.priority for pushed items (None → 0).
        relax    : Use the cost-relaxing revisit policy.
    """
    started = time.perf_counter()

    if source not in graph or target not in graph:
        logger.warning("Search skipped: start %r or goal %r not in graph", source, target)
        return AlgorithmResult.empty()

    adjacency = graph.adjacency()
    visited: Dict[str, None] = {}                  # ordered set, settlement order
    best_cost: Dict[str, float] = {source: 0.0}

    def key(node_id: str, cost: float) -> float:
        return priority(node_id, cost) if priority else 0.0

    frontier.push(QueueItem(source, (source,), (), 0.0, key(source, 0.0)))

    while frontier:
        item = frontier.pop()
        if item.node_id in visited:
            continue

        visited[item.node_id] = None
        yield _snapshot(item, visited, frontier, is_complete=False)

        if item.node_id == target:
            yield _snapshot(item, visited, frontier, is_complete=True)
            result = AlgorithmResult(
                path=item.path,
                path_edges=item.path_edges,
                path_length=len(item.path),
                path_cost=item.cost,
                nodes_visited=len(visited),
                execution_time=_elapsed_ms(started),
            )
            logger.debug("Reached %r: cost=%s settled=%d", target, result.path_cost, result.nodes_visited)
            return result

        for nbr in adjacency[item.node_id]:
            new_cost = item.cost + nbr.weight
            if relax:
                if nbr.node_id in best_cost and new_cost >= best_cost[nbr.node_id]:
                    continue
                best_cost[nbr.node_id] = new_cost
            elif nbr.node_id in visited:
                continue
            frontier.push(item.extend(nbr.node_id, nbr.edge_id, nbr.weight, key(nbr.node_id, new_cost)))

    yield StepResult(current_node_id=None, visited=tuple(visited), is_complete=True)
    logger.debug("Goal %r unreachable from %r: settled=%d", target, source, len(visited))
    return AlgorithmResult(nodes_visited=len(visited), execution_time=_elapsed_ms(started))


# ---------------------------------------------------------------------------
# Consumers
# ---------------------------------------------------------------------------
class SearchRun:
    """
    Restartable step sequence.  Every `iter()` starts a fresh search from
    the factory; `result` holds the AlgorithmResult of the last run that
    was iterated to the end.
    """

    def __init__(self, factory: Callable[[], StepGen]):
        self._factory = factory
        self.result: Optional[AlgorithmResult] = None

    def __iter__(self):
        self.result = None
        self.result = yield from self._factory()

    def run(self, step_sink: Optional[StepSink] = None) -> AlgorithmResult:
        """Run to completion, feeding each step to the sink."""
        self.result = drain(self._factory(), step_sink)
        return self.result


def drain(steps: StepGen, step_sink: Optional[StepSink] = None) -> AlgorithmResult:
    """Exhaust a step generator and hand back what it returned."""
    while True:
        try:
            step = next(steps)
        except StopIteration as stop:
            return stop.value if stop.value is not None else AlgorithmResult.empty()
        if step_sink is not None:
            step_sink(step)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _snapshot(item: QueueItem, visited: Dict[str, None], frontier: Frontier, is_complete: bool) -> StepResult:
    waiting: Dict[str, None] = {}
    for queued in frontier.items():
        if queued.node_id not in visited:
            waiting[queued.node_id] = None
    return StepResult(
        current_node_id=item.node_id,
        visited=tuple(visited),
        path=item.path,
        path_edges=item.path_edges,
        frontier=tuple(waiting),
        is_complete=is_complete,
    )


def _elapsed_ms(started: float) -> float:
    return (time.perf_counter() - started) * 1000
