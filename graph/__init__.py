"""
graph/
-----
Core data layer.  Public API:

    from graph import Graph, Edge, Overlay, NodeState, INF
    from graph import parse_graph_input, GraphInput
    from graph import GraphConfigError, InvalidNodeCount, InvalidEndpoint, InvalidEdge
"""

from graph.errors  import GraphConfigError, InvalidNodeCount, InvalidEndpoint, InvalidEdge, InputFormatError
from graph.edge    import Edge
from graph.graph   import Graph
from graph.overlay import Overlay, NodeState, INF
from graph.loader  import GraphInput, parse_graph_input

__all__ = [
    "Graph",     "Edge",
    "Overlay",   "NodeState",  "INF",
    "GraphInput", "parse_graph_input",
    "GraphConfigError", "InvalidNodeCount", "InvalidEndpoint",
    "InvalidEdge",      "InputFormatError",
]
