"""
scheduler.py — Step Scheduler
==============================
The StepScheduler is the ONLY object a host interacts with during a run.
It owns the run flags, the per-run Overlay and the active Traversal, and
decides when that traversal's step() is invoked:

    auto mode   – host calls tick() at a fixed cadence (TICK_INTERVAL_MS)
    step mode   – host calls manual_step() on an explicit user action
    paused      – tick() does nothing until resume()

Flag transitions:
    start_run()                      →  running, not paused
    pause() / resume() / toggle      →  only while running
    step() returns DONE              →  not running (run_mode kept)
    reset()                          →  not running, not paused, IDLE

`is_step_mode` is a session preference: it survives start_run / reset.

Every command is total.  tick / manual_step / pause / resume / reset
never raise, and calling them in a state where they make no sense is a
no-op.  Only start_run validates (InvalidEndpoint, ValueError for an
unknown mode), and it does so before touching any state.

Threading:
  Not thread-safe and does not need to be: one host loop drives it and
  every step is short and non-blocking.  Drive independent graphs with
  independent schedulers.
"""

import logging
from typing import Callable, List, Optional, Union

from algorithms import RunMode, Step, StepKind, Traversal, get_algorithm
from graph import INF, Graph, NodeState, Overlay

logger = logging.getLogger(__name__)


class StepScheduler:
    """
    Attributes:
        graph      : The fixed Graph Store for this session.
        overlay    : Per-run state, reset at every start_run / reset.
        last_step  : Most recent Step executed, or None.
        step_count : Steps executed in the current run (NO_OP and DONE included).
        on_step    : Optional callback(Step) fired after every executed step.
                     Observers hook their re-render here.
    """

    def __init__(self, graph: Graph, on_step: Optional[Callable[[Step], None]] = None):
        self.graph:       Graph                      = graph
        self.overlay:     Overlay                    = Overlay(graph)
        self.on_step:     Optional[Callable[[Step], None]] = on_step
        self.last_step:   Optional[Step]             = None
        self.step_count:  int                        = 0

        self._active:       Optional[Traversal]      = None
        self._run_mode:     RunMode                  = RunMode.IDLE
        self._is_running:   bool                     = False
        self._is_paused:    bool                     = False
        self._is_step_mode: bool                     = False
        self._start_node:   Optional[int]            = None
        self._end_node:     Optional[int]            = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_run(
        self,
        mode: Union[RunMode, str],
        start_node: int,
        end_node: Optional[int] = None,
    ) -> None:
        """Reset everything, then seed the traversal for `mode` at start_node."""
        info = get_algorithm(mode)
        self.graph.require_node(start_node, role="start")
        if end_node is not None:
            self.graph.require_node(end_node, role="end")

        self.reset()
        traversal = info.cls(self.graph, self.overlay)
        traversal.start(start_node, end_node)

        self._active      = traversal
        self._run_mode    = info.mode
        self._start_node  = start_node
        self._end_node    = end_node
        self._is_running  = True
        logger.info(f"Started {info.label}: start={start_node}, end={end_node}")

    def reset(self) -> None:
        """Cancel any run: clear the overlay, drop the frontier, go IDLE."""
        if self._active is not None:
            self._active.discard()
        self._active     = None
        self.overlay.reset()
        self._run_mode   = RunMode.IDLE
        self._is_running = False
        self._is_paused  = False
        self._start_node = None
        self._end_node   = None
        self.last_step   = None
        self.step_count  = 0
        logger.debug("Scheduler reset")

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def tick(self) -> Optional[Step]:
        """
        Call from the host timer (every TICK_INTERVAL_MS).  Executes one
        step when running in auto mode and not paused; otherwise None.
        """
        if not self._is_running or self._is_paused or self._is_step_mode:
            return None
        return self._advance()

    def manual_step(self) -> Optional[Step]:
        """Execute one step now, paused or not.  None when no run is active."""
        if not self._is_running:
            return None
        return self._advance()

    # ------------------------------------------------------------------
    # Pause / mode flags
    # ------------------------------------------------------------------
    def pause(self) -> None:
        if self._is_running:
            self._is_paused = True

    def resume(self) -> None:
        if self._is_running:
            self._is_paused = False

    def toggle_pause(self) -> None:
        if self._is_running:
            self._is_paused = not self._is_paused

    def set_step_mode(self) -> None:
        """Disable auto-advance; steps only happen through manual_step()."""
        self._is_step_mode = True

    def set_auto_mode(self) -> None:
        """Re-enable auto-advance, un-pausing a running run."""
        self._is_step_mode = False
        if self._is_running and self._is_paused:
            self._is_paused = False

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------
    @property
    def run_mode(self) -> RunMode:
        return self._run_mode

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_paused(self) -> bool:
        return self._is_paused

    @property
    def is_step_mode(self) -> bool:
        return self._is_step_mode

    @property
    def current_node(self) -> Optional[int]:
        return self.overlay.current_node

    @property
    def shortest_path(self) -> List[int]:
        return list(self.overlay.shortest_path)

    @property
    def frontier(self) -> List[int]:
        if self._active is None or not self._active.is_running:
            return []
        return self._active.frontier

    @property
    def start_node(self) -> Optional[int]:
        return self._start_node

    @property
    def end_node(self) -> Optional[int]:
        return self._end_node

    def is_visited(self, node_id: int) -> bool:
        return self.overlay.is_visited(node_id)

    def distance_of(self, node_id: int) -> float:
        return self.overlay.distance_of(node_id)

    def node_state(self, node_id: int) -> NodeState:
        return self.overlay.node_state(node_id)

    def status_text(self) -> str:
        if self._is_paused:
            status = "PAUSED"
        elif self._is_step_mode:
            status = "STEP MODE"
        else:
            status = "RUNNING"
        return f"Mode: {self._run_mode.display} | Status: {status}"

    def distance_summary(self) -> Optional[str]:
        """Set once Dijkstra has finished with a reachable end node."""
        if self._run_mode is not RunMode.DIJKSTRA or self._is_running or self._end_node is None:
            return None
        d = self.overlay.distance_of(self._end_node)
        if d == INF:
            return None
        return f"Shortest distance from {self._start_node} to {self._end_node}: {d}"

    def snapshot(self) -> dict:
        """Every query above in one JSON-safe dict (∞ becomes None)."""
        return {
            "mode":             self._run_mode.value,
            "is_running":       self._is_running,
            "is_paused":        self._is_paused,
            "is_step_mode":     self._is_step_mode,
            "start_node":       self._start_node,
            "end_node":         self._end_node,
            "current_node":     self.current_node,
            "frontier":         self.frontier,
            "shortest_path":    self.shortest_path,
            "step_count":       self.step_count,
            "status":           self.status_text(),
            "distance_summary": self.distance_summary(),
            "last_step":        self.last_step.to_dict() if self.last_step else None,
            "nodes": [
                {
                    "id":       n,
                    "visited":  self.is_visited(n),
                    "distance": _json_distance(self.distance_of(n)),
                    "parent":   self.overlay.parent[n],
                    "state":    self.node_state(n).value,
                }
                for n in self.graph.node_ids()
            ],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _advance(self) -> Step:
        step = self._active.step()
        self.last_step   = step
        self.step_count += 1
        if step.kind is StepKind.DONE:
            self._is_running = False
            self._is_paused  = False
            logger.info(
                f"{self._active.label} finished after {self.step_count} step(s): "
                f"visited {self.overlay.visited_nodes()}, path {self.overlay.shortest_path}"
            )
        if self.on_step is not None:
            self.on_step(step)
        return step


def _json_distance(d: float) -> Optional[int]:
    return None if d == INF else d
