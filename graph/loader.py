"""
loader.py — Text Graph Input
=============================
Reads the interactive input protocol as one whitespace-separated stream
of integers:

    num_nodes
    num_edges
    u v w        (num_edges times)
    start
    end

Lines starting with '#' are comments.  Node count and both endpoints
are validated here so an invalid configuration never reaches a run.
"""

from dataclasses import dataclass
from typing import List, Optional

from graph.errors import InputFormatError
from graph.graph import Graph


@dataclass
class GraphInput:
    graph: Graph
    start: int
    end:   int


def parse_graph_input(text: str, strict: Optional[bool] = None) -> GraphInput:
    """
    Parse the text protocol into a validated GraphInput.

    Raises:
        InputFormatError  – missing or non-integer tokens.
        InvalidNodeCount  – node count out of range.
        InvalidEndpoint   – start / end outside 1..num_nodes.
        InvalidEdge       – strict mode only.
    """
    tokens = _tokenize(text)
    pos = 0

    def take(what: str) -> int:
        nonlocal pos
        if pos >= len(tokens):
            raise InputFormatError(f"Unexpected end of input: expected {what}")
        raw = tokens[pos]
        pos += 1
        try:
            return int(raw)
        except ValueError:
            raise InputFormatError(f"Expected integer for {what}, got {raw!r}") from None

    num_nodes = take("number of nodes")
    num_edges = take("number of edges")
    if num_edges < 0:
        raise InputFormatError(f"Number of edges cannot be negative: {num_edges}")

    edges = [
        (take(f"edge {i + 1} u"), take(f"edge {i + 1} v"), take(f"edge {i + 1} weight"))
        for i in range(num_edges)
    ]

    # node count is checked before the endpoints are even read
    graph = Graph.build(num_nodes, edges, strict=strict)
    start = graph.require_node(take("starting node"), role="start")
    end   = graph.require_node(take("ending node"), role="end")

    if pos != len(tokens):
        raise InputFormatError(f"Unexpected trailing input: {' '.join(tokens[pos:])}")

    return GraphInput(graph=graph, start=start, end=end)


def _tokenize(text: str) -> List[str]:
    tokens: List[str] = []
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        tokens.extend(line.split())
    return tokens
