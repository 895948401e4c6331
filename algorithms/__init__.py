"""
algorithms/__init__.py — Traversal Registry
=============================================
Single source of truth for every traversal the engine can drive.

    from algorithms import RunMode, REGISTRY, get_algorithm

REGISTRY maps each active RunMode to an AlgoInfo card:
    {
        RunMode.BFS: AlgoInfo(mode, label, cls, pseudocode, tags, …),
        …
    }

The scheduler only ever talks to the uniform Traversal interface, so a
new algorithm is: subclass Traversal, add one RunMode, add one entry here.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Type, Union

from algorithms.base     import Traversal, TraversalStatus
from algorithms.step     import Step, StepKind
from algorithms.bfs      import BFSTraversal,      PSEUDOCODE as _bfs_pc
from algorithms.dfs      import DFSTraversal,      PSEUDOCODE as _dfs_pc
from algorithms.dijkstra import DijkstraTraversal, PSEUDOCODE as _dij_pc
from algorithms.path     import reconstruct, path_cost


# ---------------------------------------------------------------------------
# RunMode — which state machine is active
# ---------------------------------------------------------------------------
class RunMode(Enum):
    IDLE     = "idle"
    BFS      = "bfs"
    DFS      = "dfs"
    DIJKSTRA = "dijkstra"

    @property
    def display(self) -> str:
        return "NONE" if self is RunMode.IDLE else self.name


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each traversal
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    mode:              RunMode                # registry key
    label:             str                    # human label, e.g. "Breadth-First Search"
    cls:               Type[Traversal]        # the state machine class
    pseudocode:        List[str]              # one line per entry
    tags:              List[str] = field(default_factory=list)
    uses_end_node:     bool     = False       # reconstructs a path to an end node?
    complexity_time:   str      = ""
    complexity_space:  str      = ""
    description:       str      = ""

    @property
    def key(self) -> str:
        return self.mode.value


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[RunMode, AlgoInfo] = {

    RunMode.BFS: AlgoInfo(
        mode=RunMode.BFS, label="Breadth-First Search", cls=BFSTraversal, pseudocode=_bfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(E)",
        description="Explores layer by layer from the start node.",
    ),

    RunMode.DFS: AlgoInfo(
        mode=RunMode.DFS, label="Depth-First Search", cls=DFSTraversal, pseudocode=_dfs_pc,
        tags=["unweighted", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(E)",
        description="Dives deep before backtracking, in adjacency order.",
    ),

    RunMode.DIJKSTRA: AlgoInfo(
        mode=RunMode.DIJKSTRA, label="Dijkstra's Algorithm", cls=DijkstraTraversal, pseudocode=_dij_pc,
        tags=["weighted", "shortest-path"],
        uses_end_node=True,
        complexity_time="O((V + E) log V)", complexity_space="O(E)",
        description="Greedily finalises the closest node. Requires non-negative weights.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def parse_mode(key: Union[RunMode, str]) -> RunMode:
    """Accept a RunMode or its name ("bfs", "DFS", …)."""
    if isinstance(key, RunMode):
        return key
    try:
        return RunMode(str(key).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown run mode: {key!r}") from None


def get_algorithm(key: Union[RunMode, str]) -> AlgoInfo:
    """Return AlgoInfo for an active mode; ValueError for unknown or IDLE."""
    mode = parse_mode(key)
    if mode not in REGISTRY:
        raise ValueError(f"No traversal registered for mode {mode.value!r}")
    return REGISTRY[mode]


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered traversals in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_tag(tag: str) -> List[AlgoInfo]:
    return [a for a in REGISTRY.values() if tag in a.tags]


__all__ = [
    "RunMode",
    "AlgoInfo",
    "REGISTRY",
    "Traversal",
    "TraversalStatus",
    "Step",
    "StepKind",
    "BFSTraversal",
    "DFSTraversal",
    "DijkstraTraversal",
    "reconstruct",
    "path_cost",
    "parse_mode",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_tag",
]
