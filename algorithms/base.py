"""
base.py — Steppable Traversal State Machine
============================================
The shared shape of every traversal the engine can drive:

    IDLE  →  start(node)  →  RUNNING
    RUNNING  →  step() with empty frontier  →  EXHAUSTED
    any   →  discard()  →  IDLE

One step() is one atomic unit of work: pop one frontier entry, and if
it is new, mark it visited and expand it.  Nothing blocks and nothing
sleeps, so the caller decides the cadence and may stop between any two
steps for as long as it likes.

Subclasses only supply the frontier (queue / stack / heap) and the
expansion rule; the pop → dedupe → visit → expand skeleton lives here.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from graph import Graph, Overlay
from algorithms.step import Step, StepKind

logger = logging.getLogger(__name__)


class TraversalStatus(Enum):
    IDLE      = "idle"
    RUNNING   = "running"
    EXHAUSTED = "exhausted"


class Traversal(ABC):
    """
    Attributes:
        graph      : Read-only Graph Store.
        overlay    : Per-run state this traversal writes.
        status     : Current TraversalStatus.
        start_node : Node the current run was seeded with.
        end_node   : Optional goal node (only Dijkstra uses it).
    """

    label = "Traversal"

    def __init__(self, graph: Graph, overlay: Overlay):
        self.graph:      Graph                      = graph
        self.overlay:    Overlay                    = overlay
        self.status:     TraversalStatus            = TraversalStatus.IDLE
        self.start_node: Optional[int]              = None
        self.end_node:   Optional[int]              = None
        self._step_no:   int                        = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, start_node: int, end_node: Optional[int] = None) -> None:
        """Clear the overlay, seed a fresh frontier and enter RUNNING."""
        self.graph.require_node(start_node, role="start")
        if end_node is not None:
            self.graph.require_node(end_node, role="end")

        self.overlay.reset()
        self._clear_frontier()
        self.start_node = start_node
        self.end_node   = end_node
        self._step_no   = 0
        self._seed(start_node)
        self.status     = TraversalStatus.RUNNING

    def discard(self) -> None:
        """Drop the frontier and go back to IDLE.  The overlay is left alone."""
        self._clear_frontier()
        self.status = TraversalStatus.IDLE

    # ------------------------------------------------------------------
    # The step
    # ------------------------------------------------------------------
    def step(self) -> Step:
        if self.status is not TraversalStatus.RUNNING:
            # stray call: report DONE, touch nothing
            return Step(
                step_number=self._step_no,
                kind=StepKind.DONE,
                explanation=f"{self.label} is not running.",
            )

        if self._frontier_empty():
            self.status = TraversalStatus.EXHAUSTED
            self._on_exhausted()
            self.overlay.current_node = None
            return self._emit(StepKind.DONE, None, self._done_explanation())

        node = self._pop()
        self.overlay.current_node = node

        if self.overlay.is_visited(node):
            return self._emit(
                StepKind.NO_OP, node, f"Pop {node}: already visited, skip."
            )

        self.overlay.mark_visited(node)
        self._expand(node)
        return self._emit(StepKind.ADVANCED, node, self._visit_explanation(node))

    @property
    def is_running(self) -> bool:
        return self.status is TraversalStatus.RUNNING

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------
    @property
    @abstractmethod
    def frontier(self) -> List[int]:
        """Frontier node ids, next-to-pop first."""

    @abstractmethod
    def _seed(self, start_node: int) -> None: ...

    @abstractmethod
    def _clear_frontier(self) -> None: ...

    @abstractmethod
    def _frontier_empty(self) -> bool: ...

    @abstractmethod
    def _pop(self) -> int: ...

    @abstractmethod
    def _expand(self, node: int) -> None: ...

    def _on_exhausted(self) -> None:
        pass

    def _visit_explanation(self, node: int) -> str:
        return f"Visit {node}."

    def _done_explanation(self) -> str:
        return f"Frontier empty: {self.label} finished."

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _emit(self, kind: StepKind, node: Optional[int], explanation: str) -> Step:
        step = Step(
            step_number=self._step_no,
            kind=kind,
            node=node,
            frontier=self.frontier,
            explanation=explanation,
        )
        self._step_no += 1
        logger.debug(f"{self.label} step {step.step_number}: {kind.value} {node} | {explanation}")
        return step
