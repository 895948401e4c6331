"""
bfs.py — Breadth-First Search
==============================
Steppable BFS over a FIFO queue.

Each step dequeues one node.  Neighbours are enqueued freely when they
are unvisited at expansion time; a node that ends up queued twice is
deduplicated when popped (NO_OP step), so no "already queued" set is
needed.  Visitation order therefore follows adjacency insertion order
layer by layer.
"""

from collections import deque
from typing import Deque, List

from algorithms.base import Traversal


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def BFS_step():",                              # 0
    "    if queue is empty: return DONE",           # 1
    "    node ← queue.dequeue()",                   # 2
    "    if node in visited: return NO-OP",         # 3
    "    visited.add(node)",                        # 4
    "    for (nbr, _) in adj(node):",               # 5
    "        if nbr not in visited:",               # 6
    "            queue.enqueue(nbr)",               # 7
    "    return ADVANCED",                          # 8
]


class BFSTraversal(Traversal):

    label = "BFS"

    def __init__(self, graph, overlay):
        self._queue: Deque[int] = deque()
        super().__init__(graph, overlay)

    @property
    def frontier(self) -> List[int]:
        return list(self._queue)

    def _seed(self, start_node: int) -> None:
        self._queue.append(start_node)

    def _clear_frontier(self) -> None:
        self._queue.clear()

    def _frontier_empty(self) -> bool:
        return not self._queue

    def _pop(self) -> int:
        return self._queue.popleft()

    def _expand(self, node: int) -> None:
        for nbr, _ in self.graph.neighbours(node):
            if not self.overlay.is_visited(nbr):
                self._queue.append(nbr)

    def _visit_explanation(self, node: int) -> str:
        return f"Dequeue {node} and mark it visited; queue is now {list(self._queue)}."
