"""
recorder.py — Run Recorder & Analytics
========================================
Drives a complete run on a private scheduler, records every Step, then
computes the metrics card a host shows next to the live view.

Usage:
    rec = Recorder(graph)
    metrics = rec.run("dijkstra", start=1, end=4)
    rec.export()                     # JSON-safe trace + metrics

The recorder never shares state with a live session: it builds its own
StepScheduler (and therefore its own Overlay) for each run.
"""

import logging
import time
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional, Union

from algorithms import RunMode, Step, StepKind, get_algorithm, path_cost
from engine.scheduler import StepScheduler
from graph import INF, Graph

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    mode:          str              = ""
    label:         str              = ""
    start:         Optional[int]    = None
    end:           Optional[int]    = None
    visit_order:   List[int]        = field(default_factory=list)
    total_steps:   int              = 0      # including NO_OP and the final DONE
    noop_steps:    int              = 0
    path:          List[int]        = field(default_factory=list)
    path_cost:     int              = 0
    path_found:    bool             = False
    distances:     Dict[int, Optional[int]] = field(default_factory=dict)
    wall_time_ms:  float            = 0.0


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        graph   : Graph every run is recorded on.
        steps   : Full list of Steps from the last run.
        metrics : RunMetrics of the last run (None before run()).
    """

    def __init__(self, graph: Graph):
        self.graph:   Graph                 = graph
        self.steps:   List[Step]            = []
        self.metrics: Optional[RunMetrics]  = None

    def run(
        self,
        mode: Union[RunMode, str],
        start: int,
        end: Optional[int] = None,
    ) -> RunMetrics:
        """Run `mode` from start to exhaustion and compute metrics."""
        info = get_algorithm(mode)
        self.steps = []
        scheduler = StepScheduler(self.graph, on_step=self.steps.append)
        scheduler.start_run(info.mode, start, end)

        t0 = time.monotonic()
        while scheduler.is_running:
            scheduler.manual_step()
        wall_ms = (time.monotonic() - t0) * 1000

        path = scheduler.shortest_path
        self.metrics = RunMetrics(
            mode=info.key,
            label=info.label,
            start=start,
            end=end,
            visit_order=[s.node for s in self.steps if s.kind is StepKind.ADVANCED],
            total_steps=len(self.steps),
            noop_steps=sum(1 for s in self.steps if s.kind is StepKind.NO_OP),
            path=path,
            path_cost=path_cost(self.graph, path),
            path_found=bool(path),
            distances={
                n: (None if scheduler.distance_of(n) == INF else scheduler.distance_of(n))
                for n in self.graph.node_ids()
            },
            wall_time_ms=round(wall_ms, 3),
        )
        logger.info(
            f"Recorded {info.label} from {start}: {self.metrics.total_steps} step(s), "
            f"visit order {self.metrics.visit_order}"
        )
        return self.metrics

    def export(self) -> Dict[str, Any]:
        return {
            "graph":   self.graph.to_dict(),
            "metrics": asdict(self.metrics) if self.metrics else {},
            "steps":   [s.to_dict() for s in self.steps],
        }
