"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Steppable Dijkstra over a min-heap (heapq) of (distance, node) pairs.
Ties on distance are broken by the smaller node id, so runs are
reproducible.

Each step extracts one heap entry.  Entries for nodes that were already
finalised are stale and produce a NO_OP step.  Relaxation uses a strict
`<`: an equal-cost alternative never overwrites a parent, and a parent
is never rewritten once its node is visited.

When the heap runs dry the run is EXHAUSTED and, if the end node was
reached, the shortest path is reconstructed into the overlay.

Correctness note: Dijkstra requires non-negative weights.  The Graph
Store refuses negative edges, so nothing needs checking here.
"""

import heapq
import logging
from typing import List, Tuple

from algorithms.base import Traversal
from algorithms.path import reconstruct
from graph import INF

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra_step():",                             # 0
    "    if pq is empty:",                              # 1
    "        if dist[end] < ∞: path ← reconstruct()",   # 2
    "        return DONE",                              # 3
    "    (d, node) ← pq.pop_min()",                     # 4
    "    if node in visited: return NO-OP",             # 5
    "    visited.add(node)",                            # 6
    "    for (nbr, w) in adj(node):",                   # 7
    "        if nbr not visited and dist[node] + w < dist[nbr]:",  # 8
    "            dist[nbr] ← dist[node] + w",           # 9
    "            parent[nbr] ← node",                   # 10
    "            pq.push((dist[nbr], nbr))",            # 11
    "    return ADVANCED",                              # 12
]


class DijkstraTraversal(Traversal):

    label = "Dijkstra"

    def __init__(self, graph, overlay):
        self._pq: List[Tuple[float, int]] = []      # min-heap: (distance, node_id)
        super().__init__(graph, overlay)

    @property
    def frontier(self) -> List[int]:
        return [n for _, n in sorted(self._pq)]

    @property
    def queue(self) -> List[Tuple[float, int]]:
        """Heap entries in extraction order."""
        return sorted(self._pq)

    def _seed(self, start_node: int) -> None:
        self.overlay.distance[start_node] = 0
        heapq.heappush(self._pq, (0, start_node))

    def _clear_frontier(self) -> None:
        self._pq.clear()

    def _frontier_empty(self) -> bool:
        return not self._pq

    def _pop(self) -> int:
        _, node = heapq.heappop(self._pq)
        return node

    def _expand(self, node: int) -> None:
        dist   = self.overlay.distance
        parent = self.overlay.parent
        for nbr, weight in self.graph.neighbours(node):
            if self.overlay.is_visited(nbr):
                continue
            new_dist = dist[node] + weight
            if new_dist < dist[nbr]:
                dist[nbr]   = new_dist
                parent[nbr] = node
                heapq.heappush(self._pq, (new_dist, nbr))

    def _on_exhausted(self) -> None:
        if self.end_node is None:
            return
        if self.overlay.distance_of(self.end_node) != INF:
            self.overlay.shortest_path = reconstruct(
                self.overlay.parent, self.overlay.distance, self.end_node
            )
            logger.info(
                f"Shortest path {self.start_node} → {self.end_node}: "
                f"{self.overlay.shortest_path} (cost {self.overlay.distance[self.end_node]})"
            )

    def _visit_explanation(self, node: int) -> str:
        return (
            f"Extract {node} with distance {self.overlay.distance[node]}: "
            f"it is now final. Relax its edges."
        )

    def _done_explanation(self) -> str:
        if self.end_node is None:
            return "Priority queue empty: all reachable distances are final."
        d = self.overlay.distance_of(self.end_node)
        if d == INF:
            return f"Priority queue empty: {self.end_node} is not reachable."
        return f"Priority queue empty: shortest distance to {self.end_node} is {d}."
