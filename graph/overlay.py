"""
overlay.py — Per-Run Traversal Overlay
=======================================
Mutable state layered on top of the immutable Graph Store for the
duration of one run:

    • visited       – node → bool, never unmarked within a run
    • distance      – node → int | ∞   (only Dijkstra writes it)
    • parent        – node → node | None
    • current_node  – most recently popped node, None when idle
    • shortest_path – filled by the path reconstructor, else empty

One Overlay belongs to one scheduler.  Two graphs driven side by side
each get their own; nothing here is shared or global.
"""

from enum import Enum
from typing import Dict, List, Optional

from graph.graph import Graph

INF = float("inf")


# ---------------------------------------------------------------------------
# Node State Enum — what an observer should paint a node as
# ---------------------------------------------------------------------------
class NodeState(Enum):
    UNVISITED = "unvisited"
    VISITED   = "visited"
    CURRENT   = "current"     # the node popped by the latest step
    PATH      = "path"        # on the reconstructed shortest path


class Overlay:
    """
    Attributes:
        graph         : The Graph Store this overlay annotates.
        visited       : {node_id: bool}
        distance      : {node_id: int | INF}
        parent        : {node_id: node_id | None}
        current_node  : Optional node id.
        shortest_path : Ordered node ids, start → end.
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self.reset()

    def reset(self) -> None:
        """Back to the pristine pre-run state."""
        ids = self.graph.node_ids()
        self.visited:       Dict[int, bool]           = {n: False for n in ids}
        self.distance:      Dict[int, float]          = {n: INF for n in ids}
        self.parent:        Dict[int, Optional[int]]  = {n: None for n in ids}
        self.current_node:  Optional[int]             = None
        self.shortest_path: List[int]                 = []

    # ------------------------------------------------------------------
    # Writers (traversals only)
    # ------------------------------------------------------------------
    def mark_visited(self, node_id: int) -> None:
        self.visited[node_id] = True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_visited(self, node_id: int) -> bool:
        return self.visited.get(node_id, False)

    def distance_of(self, node_id: int) -> float:
        return self.distance.get(node_id, INF)

    def visited_nodes(self) -> List[int]:
        return [n for n, seen in self.visited.items() if seen]

    def node_state(self, node_id: int) -> NodeState:
        if node_id in self.shortest_path:
            return NodeState.PATH
        if node_id == self.current_node:
            return NodeState.CURRENT
        if self.is_visited(node_id):
            return NodeState.VISITED
        return NodeState.UNVISITED

    def copy_state(self) -> dict:
        """Shallow copy of every mutable field, for before/after comparisons."""
        return {
            "visited":       dict(self.visited),
            "distance":      dict(self.distance),
            "parent":        dict(self.parent),
            "current_node":  self.current_node,
            "shortest_path": list(self.shortest_path),
        }
