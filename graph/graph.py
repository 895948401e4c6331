"""
graph.py — Graph Store
=======================
Single source of truth for the graph structure.  Traversals, the
scheduler and any observer all read from this object; none of them
write to it.

Responsibilities:
  1. Validated construction from (num_nodes, edge list)      (build)
  2. Adjacency queries in insertion order                     (neighbours, …)
  3. Random-graph factory for demos and property tests         (generate_random)
  4. Serialisation for observers                              (to_dict)

Design decisions:
  - Nodes are the integers 1..num_nodes.
  - `_adj[node] → [(neighbour, edge_id)]` is filled once.  Insertion
    order is preserved because it decides BFS / DFS visitation order.
  - The store is frozen after build(): there is no add / remove API, so
    a run can never observe a mutating graph.
  - Malformed edges are dropped with a warning unless `strict` is set,
    in which case they raise InvalidEdge.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple

import config
from graph.edge import Edge
from graph.errors import GraphConfigError, InvalidEdge, InvalidEndpoint, InvalidNodeCount

logger = logging.getLogger(__name__)

EdgeSpec = Sequence[int]          # (u, v, weight)


class Graph:
    """
    Attributes:
        num_nodes : Node ids are 1..num_nodes.
        edges     : Accepted edges in insertion order.
        dropped   : Edge specs that were rejected in lenient mode.
        _adj      : {node_id: [(neighbour_id, edge_id), …]}
    """

    def __init__(self, num_nodes: int):
        _check_node_count(num_nodes)
        self.num_nodes: int = num_nodes
        self.edges:     List[Edge] = []
        self.dropped:   List[Tuple] = []
        self._adj:      Dict[int, List[Tuple[int, int]]] = {n: [] for n in range(1, num_nodes + 1)}

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    @classmethod
    def build(
        cls,
        num_nodes: int,
        edge_list: Sequence[EdgeSpec],
        strict: Optional[bool] = None,
    ) -> "Graph":
        """
        Validate and assemble an undirected weighted graph.

        Args:
            num_nodes : Must lie in [MIN_NODES, MAX_NODES].
            edge_list : List or tuple of (u, v, weight) triples.
            strict    : Raise on malformed edges instead of dropping them.
                        Defaults to config.STRICT_EDGES.

        Raises:
            InvalidNodeCount, GraphConfigError (edge_list not a list),
            InvalidEdge (strict only).
        """
        if strict is None:
            strict = config.STRICT_EDGES

        g = cls(num_nodes)
        if not _is_sequence(edge_list):
            raise GraphConfigError(f"Edge list must be a list of (u, v, weight), got {edge_list!r}")
        for spec in edge_list:
            reason = g._edge_problem(spec)
            if reason is not None:
                if strict:
                    raise InvalidEdge(tuple(spec) if _is_sequence(spec) else spec, reason)
                logger.warning(f"Dropping edge {spec!r}: {reason}")
                g.dropped.append(tuple(spec) if _is_sequence(spec) else (spec,))
                continue
            u, v, w = spec
            g._add_edge(int(u), int(v), int(w))

        logger.info(
            f"Graph built: {g.num_nodes} node(s), {len(g.edges)} edge(s), "
            f"{len(g.dropped)} dropped"
        )
        return g

    def _edge_problem(self, spec) -> Optional[str]:
        if not _is_sequence(spec) or len(spec) != 3:
            return "expected (u, v, weight)"
        u, v, w = spec
        if not all(_is_int(x) for x in (u, v, w)):
            return "endpoints and weight must be integers"
        if not (self.has_node(u) and self.has_node(v)):
            return f"endpoint outside 1..{self.num_nodes}"
        if w < 0:
            return "negative weight"
        return None

    def _add_edge(self, u: int, v: int, w: int) -> Edge:
        edge = Edge(source=u, target=v, weight=w, edge_id=len(self.edges))
        self.edges.append(edge)
        self._adj[u].append((v, edge.id))
        self._adj[v].append((u, edge.id))
        return edge

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, int]]:
        """Return [(neighbour_id, weight)] in insertion order."""
        return [(nbr, self.edges[eid].weight) for nbr, eid in self._adj.get(node_id, [])]

    def get_edge_between(self, a: int, b: int) -> Optional[Edge]:
        """First inserted edge connecting a and b."""
        for nbr, eid in self._adj.get(a, []):
            if nbr == b:
                return self.edges[eid]
        return None

    def has_node(self, node_id) -> bool:
        return _is_int(node_id) and 1 <= node_id <= self.num_nodes

    def require_node(self, node_id, role: str = "node") -> int:
        """Return node_id unchanged, or raise InvalidEndpoint."""
        if not self.has_node(node_id):
            raise InvalidEndpoint(node_id, self.num_nodes, role)
        return node_id

    def node_ids(self) -> List[int]:
        return list(range(1, self.num_nodes + 1))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "num_nodes": self.num_nodes,
            "edges":     [e.to_dict() for e in self.edges],
            "dropped":   [list(d) for d in self.dropped],
        }

    # ==================================================================
    # GENERATORS — Factory class-methods
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        edge_probability: float = config.DEFAULT_EDGE_PROBABILITY,
        weight_range: Tuple[int, int] = config.DEFAULT_WEIGHT_RANGE,
        seed: Optional[int] = None,
        connected: bool = True,
    ) -> "Graph":
        """
        Erdős–Rényi style random graph.
        Each possible edge is included with probability `edge_probability`;
        with `connected` a shuffled spanning backbone is added afterwards.
        """
        _check_node_count(num_nodes)
        if not _is_number(edge_probability) or not (0 <= edge_probability <= 1):
            raise GraphConfigError(f"Edge probability must be a number in [0, 1], got {edge_probability!r}")
        rng = random.Random(seed)

        specs: List[Tuple[int, int, int]] = []
        linked = set()
        for i in range(1, num_nodes + 1):
            for j in range(i + 1, num_nodes + 1):
                if rng.random() < edge_probability:
                    specs.append((i, j, rng.randint(*weight_range)))
                    linked.add(frozenset((i, j)))

        if connected:
            order = list(range(1, num_nodes + 1))
            rng.shuffle(order)
            for k in range(1, len(order)):
                pair = frozenset((order[k - 1], order[k]))
                if pair not in linked:
                    specs.append((order[k - 1], order[k], rng.randint(*weight_range)))
                    linked.add(pair)

        return cls.build(num_nodes, specs, strict=True)

    # ==================================================================
    # UTILITY
    # ==================================================================
    def edge_count(self) -> int:
        return len(self.edges)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.num_nodes}, edges={len(self.edges)})"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_sequence(value) -> bool:
    return isinstance(value, (list, tuple))


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_node_count(num_nodes) -> None:
    if not _is_int(num_nodes) or not (config.MIN_NODES <= num_nodes <= config.MAX_NODES):
        raise InvalidNodeCount(num_nodes, config.MIN_NODES, config.MAX_NODES)
