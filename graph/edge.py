"""
edge.py — Graph Edge
====================
One undirected, weighted connection between two node ids.

Design decisions:
  - `source` and `target` are plain integer node ids, NOT object
    references.  Nodes are just the numbers 1..num_nodes.
  - Edges are immutable once the Graph Store is built; a run never
    mutates the structure it walks.
  - `id` is the insertion index, so two parallel edges between the same
    pair of nodes stay distinguishable.
"""

from typing import Tuple


class Edge:
    """
    Attributes:
        id       : Insertion index within the owning Graph.
        source   : First endpoint as given in the edge list.
        target   : Second endpoint.
        weight   : Non-negative integer cost.
    """

    __slots__ = ("id", "source", "target", "weight")

    def __init__(self, source: int, target: int, weight: int = 1, edge_id: int = 0):
        self.id:     int = edge_id
        self.source: int = source
        self.target: int = target
        self.weight: int = weight

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.source, self.target, self.weight)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "source": self.source,
            "target": self.target,
            "weight": self.weight,
        }

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.source} ↔ {self.target}, w={self.weight})"

