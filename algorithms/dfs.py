"""
dfs.py — Depth-First Search
=============================
Steppable DFS over an explicit LIFO stack (no Python recursion).

On expansion the unvisited neighbours are pushed in REVERSE adjacency
order, so the first-listed neighbour ends up on top and is popped next.
Combined with mark-on-pop this reproduces exactly the pre-order of a
recursive DFS that walks each adjacency list left to right.
"""

from typing import List

from algorithms.base import Traversal


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def DFS_step():",                              # 0
    "    if stack is empty: return DONE",           # 1
    "    node ← stack.pop()",                       # 2
    "    if node in visited: return NO-OP",         # 3
    "    visited.add(node)",                        # 4
    "    for (nbr, _) in reversed(adj(node)):",     # 5
    "        if nbr not in visited:",               # 6
    "            stack.push(nbr)",                  # 7
    "    return ADVANCED",                          # 8
]


class DFSTraversal(Traversal):

    label = "DFS"

    def __init__(self, graph, overlay):
        self._stack: List[int] = []
        super().__init__(graph, overlay)

    @property
    def frontier(self) -> List[int]:
        return list(reversed(self._stack))

    def _seed(self, start_node: int) -> None:
        self._stack.append(start_node)

    def _clear_frontier(self) -> None:
        self._stack.clear()

    def _frontier_empty(self) -> bool:
        return not self._stack

    def _pop(self) -> int:
        return self._stack.pop()

    def _expand(self, node: int) -> None:
        for nbr, _ in reversed(self.graph.neighbours(node)):
            if not self.overlay.is_visited(nbr):
                self._stack.append(nbr)

    def _visit_explanation(self, node: int) -> str:
        top = self._stack[-1] if self._stack else None
        return f"Pop {node} and mark it visited; next on the stack: {top}."
