"""
errors.py — Configuration Errors
=================================
Raised once, while a graph or a run is being set up.  Nothing in the
stepping path raises: tick / step / pause / reset are total.
"""


class GraphConfigError(ValueError):
    """Base class: the engine must not start with this configuration."""


class InvalidNodeCount(GraphConfigError):
    def __init__(self, count, low: int, high: int):
        self.count = count
        super().__init__(f"Invalid number of nodes: {count!r} (expected {low}..{high})")


class InvalidEndpoint(GraphConfigError):
    def __init__(self, node, num_nodes: int, role: str = "node"):
        self.node = node
        self.role = role
        super().__init__(f"Invalid {role} node: {node!r} (expected 1..{num_nodes})")


class InvalidEdge(GraphConfigError):
    """Only raised in strict mode; lenient mode drops the edge."""

    def __init__(self, edge, reason: str):
        self.edge = edge
        super().__init__(f"Invalid edge {edge!r}: {reason}")


class InputFormatError(GraphConfigError):
    pass
