"""Generic breadth-first and depth-first traversal of directed graphs."""

__all__ = [
    "AdjacencyGraph",
    "AdjacencyNode",
    "Edge",
    "EdgeCallback",
    "EdgeType",
    "Graph",
    "Node",
    "NodeInfo",
    "NodeStatus",
    "StatusCallback",
    "StatusTransitionError",
    "breadth_search",
    "depth_search",
    "is_acyclic",
    "topological_sort",
]

from ._adjacency import AdjacencyGraph, AdjacencyNode
from ._algorithms import is_acyclic, topological_sort
from ._protocols import Graph, Node
from ._search import EdgeCallback, StatusCallback, breadth_search, depth_search
from ._status import Edge, EdgeType, NodeInfo, NodeStatus, StatusTransitionError
