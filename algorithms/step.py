"""
step.py — Step Result Snapshot
===============================
Every call to a traversal's step() returns one Step.  A Step is a
frozen record of what that single atomic step did:

    • ADVANCED – a new node was popped and marked visited
    • NO_OP    – the popped node was already visited (stale entry);
                 only current_node changed.  Expected steady-state
                 behaviour, not a failure: just step again.
    • DONE     – the frontier was empty; the run is over

Design decisions:
  - Step is a plain frozen dataclass.  The traversal is the only writer
    of the overlay; the scheduler and observers are pure readers.
  - `frontier` is a copy, in pop order, taken after the step finished.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class StepKind(Enum):
    ADVANCED = "advanced"
    NO_OP    = "no-op"
    DONE     = "done"


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step within the run.
        kind        : What the step did.
        node        : Node popped by this step (None for DONE).
        frontier    : Frontier contents after the step, next-to-pop first.
        explanation : One-line human-readable account of the step.
    """

    step_number: int                = 0
    kind:        StepKind           = StepKind.DONE
    node:        Optional[int]      = None
    frontier:    List[int]          = field(default_factory=list)
    explanation: str                = ""

    @property
    def is_final(self) -> bool:
        return self.kind is StepKind.DONE

    def to_dict(self) -> dict:
        return {
            "step_number": self.step_number,
            "kind":        self.kind.value,
            "node":        self.node,
            "frontier":    list(self.frontier),
            "explanation": self.explanation,
        }
