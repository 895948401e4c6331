"""
engine/
-------
Run control & recording layer.

    from engine import StepScheduler, Recorder
"""

from engine.scheduler import StepScheduler
from engine.recorder  import Recorder, RunMetrics

__all__ = [
    "StepScheduler",
    "Recorder",
    "RunMetrics",
]
