"""
playback.py — Timed Step Replay
================================
A search runs to completion in one go; the PlaybackController replays
the collected StepResults afterwards, one every `delay_ms`, so the
viewer can watch the exploration unfold.

State machine:
    IDLE      →  start()          →  RUNNING
    RUNNING   →  pause()          →  PAUSED
    PAUSED    →  resume()         →  RUNNING   (next step fires at once)
    RUNNING   →  (last step fired) →  COMPLETED
    any       →  stop()           →  IDLE      (visuals left as they are)
    any       →  reset()          →  IDLE      (on_reset fired)

Timing is cooperative: nothing fires on its own.  Call tick() from your
event loop; when the next step is due it fires that step's callbacks and
schedules the following one `delay_ms` later.  A delay change takes
effect from the next schedule.  run_to_end() is a blocking loop over
tick() for scripts and tests.

This class is NOT thread-safe.  Drive it from one thread.
"""

import logging
import time
from enum import Enum
from typing import Callable, Iterable, List, Optional

import config
from graph import Graph
from algorithms import dispatch
from algorithms.step import AlgorithmResult, StepResult

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class PlaybackState(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    PAUSED    = "paused"
    COMPLETED = "completed"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        state         : Current PlaybackState.
        steps         : The sequence being replayed.
        current_index : Index of the last step fired (-1 before the first).
        delay_ms      : Milliseconds between steps.
        algorithm     : Algorithm key used by run().
        heuristic     : Heuristic key used by run() for A*.
        result        : AlgorithmResult of the last run(), if any.

    Callbacks (all optional):
        on_visit_node(node_id) : a step settled node_id.
        on_path_node(node_id)  : final step, once per path node.
        on_path_edge(edge_id)  : final step, once per path edge.
        on_reset()             : visual state should be cleared.
    """

    def __init__(
        self,
        on_visit_node: Optional[Callable[[str], None]] = None,
        on_path_node:  Optional[Callable[[str], None]] = None,
        on_path_edge:  Optional[Callable[[str], None]] = None,
        on_reset:      Optional[Callable[[], None]]    = None,
        delay_ms:      float = config.DEFAULT_STEP_DELAY_MS,
        clock:         Callable[[], float] = time.monotonic,
    ):
        self.on_visit_node = on_visit_node
        self.on_path_node  = on_path_node
        self.on_path_edge  = on_path_edge
        self.on_reset      = on_reset

        self.state:         PlaybackState    = PlaybackState.IDLE
        self.steps:         List[StepResult] = []
        self.current_index: int              = -1
        self.delay_ms:      float            = max(config.MIN_STEP_DELAY_MS, delay_ms)
        self.algorithm:     str              = config.DEFAULT_ALGORITHM
        self.heuristic:     str              = config.DEFAULT_HEURISTIC
        self.result:        Optional[AlgorithmResult] = None

        self._clock = clock
        self._due:  float = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def run(self, graph: Graph, start: str, goal: str) -> AlgorithmResult:
        """Search with the selected algorithm, then start replaying its steps."""
        collected: List[StepResult] = []
        result = dispatch(graph, start, goal, self.algorithm, self.heuristic, collected.append)
        self.start(collected)
        self.result = result
        return result

    def start(self, steps: Iterable[StepResult]) -> None:
        """Reset, then arm the first step to fire on the next tick()."""
        self.reset()
        self.steps = list(steps)
        if not self.steps:
            self.state = PlaybackState.COMPLETED
            return
        self.state = PlaybackState.RUNNING
        self._due  = self._clock()
        logger.debug("Playback started: %d steps at %s ms", len(self.steps), self.delay_ms)

    def reset(self) -> None:
        """Back to IDLE with nothing loaded; clears the visuals."""
        self.steps         = []
        self.current_index = -1
        self.state         = PlaybackState.IDLE
        self.result        = None
        if self.on_reset:
            self.on_reset()

    def stop(self) -> None:
        """Abandon playback but leave whatever has been drawn."""
        self.state = PlaybackState.IDLE

    # ------------------------------------------------------------------
    # Pause / Resume
    # ------------------------------------------------------------------
    def pause(self) -> None:
        if self.state == PlaybackState.RUNNING:
            self.state = PlaybackState.PAUSED

    def resume(self) -> None:
        if self.state == PlaybackState.PAUSED:
            self.state = PlaybackState.RUNNING
            self._due  = self._clock()

    def toggle(self) -> None:
        if self.state == PlaybackState.RUNNING:
            self.pause()
        else:
            self.resume()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """Fire the next step if it is due.  Returns True if a step fired."""
        if self.state != PlaybackState.RUNNING:
            return False
        now = self._clock()
        if now < self._due:
            return False

        self.current_index += 1
        self._fire(self.current_index)

        if self.current_index >= len(self.steps) - 1:
            self.state = PlaybackState.COMPLETED
            logger.debug("Playback completed after %d steps", len(self.steps))
        else:
            self._due = now + self.delay_ms / 1000
        return True

    def run_to_end(self, sleep: Callable[[float], None] = time.sleep) -> int:
        """Block until playback leaves RUNNING.  Returns steps fired."""
        fired = 0
        while self.state == PlaybackState.RUNNING:
            if self.tick():
                fired += 1
            else:
                sleep(max(0.0, self._due - self._clock()))
        return fired

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_delay(self, delay_ms: float) -> None:
        self.delay_ms = max(config.MIN_STEP_DELAY_MS, delay_ms)

    def set_speed(self, preset: str) -> None:
        self.set_delay(config.SPEED_PRESETS.get(preset, config.SPEED_PRESETS["medium"]))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[StepResult]:
        if 0 <= self.current_index < len(self.steps):
            return self.steps[self.current_index]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def is_running(self) -> bool:
        return self.state in (PlaybackState.RUNNING, PlaybackState.PAUSED)

    @property
    def is_paused(self) -> bool:
        return self.state == PlaybackState.PAUSED

    @property
    def is_completed(self) -> bool:
        return self.state == PlaybackState.COMPLETED

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _fire(self, idx: int) -> None:
        step = self.steps[idx]
        if step.current_node_id is not None and self.on_visit_node:
            self.on_visit_node(step.current_node_id)
        if idx == len(self.steps) - 1:
            if self.on_path_node:
                for node_id in step.path:
                    self.on_path_node(node_id)
            if self.on_path_edge:
                for edge_id in step.path_edges:
                    self.on_path_edge(edge_id)
