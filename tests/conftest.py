"""
Pytest configuration and shared fixtures.

The scenario graphs here are small enough to trace by hand; the
expected visit orders in the tests follow directly from their
adjacency (insertion) order.
"""

import pytest

from engine import StepScheduler
from graph import Graph


@pytest.fixture
def line_graph() -> Graph:
    """1 - 2 - 3, unit weights."""
    return Graph.build(3, [(1, 2, 1), (2, 3, 1)])


@pytest.fixture
def triangle_graph() -> Graph:
    """1 - 2 - 3 - 1: the third node gets queued twice."""
    return Graph.build(3, [(1, 2, 1), (1, 3, 1), (2, 3, 1)])


@pytest.fixture
def branch_graph() -> Graph:
    """1 → {2, 3}, 2 → 4.  BFS and DFS disagree on this one."""
    return Graph.build(4, [(1, 2, 1), (1, 3, 1), (2, 4, 1)])


@pytest.fixture
def weighted_graph() -> Graph:
    """Direct edge 1-2 costs 4, the detour through 3 costs 2."""
    return Graph.build(4, [(1, 2, 4), (1, 3, 1), (3, 2, 1), (2, 4, 1)])


@pytest.fixture
def scheduler(line_graph) -> StepScheduler:
    return StepScheduler(line_graph)


@pytest.fixture
def drain():
    """Step a traversal until DONE; return every Step produced."""

    def _drain(traversal, limit: int = 1000):
        steps = []
        for _ in range(limit):
            step = traversal.step()
            steps.append(step)
            if step.is_final:
                return steps
        raise AssertionError("traversal did not finish")

    return _drain
