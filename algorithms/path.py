"""
path.py — Path Reconstructor
=============================
Turns Dijkstra's parent pointers into an ordered start → end node list.
"""

from typing import Dict, List, Optional

from graph import INF, Graph


def reconstruct(
    parent: Dict[int, Optional[int]],
    distance: Dict[int, float],
    end_node: int,
) -> List[int]:
    """Empty when end_node was never reached; otherwise start → end."""
    if distance.get(end_node, INF) == INF:
        return []

    path: List[int] = []
    cur: Optional[int] = end_node
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path


def path_cost(graph: Graph, path: List[int]) -> int:
    """
    Sum of edge weights along consecutive path nodes.  Between a pair
    joined by parallel edges the cheapest one counts, which is the one
    Dijkstra relaxed through.
    """
    total = 0
    for a, b in zip(path, path[1:]):
        weights = [w for nbr, w in graph.neighbours(a) if nbr == b]
        if not weights:
            raise ValueError(f"No edge between {a} and {b}")
        total += min(weights)
    return total
