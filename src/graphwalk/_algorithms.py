"""Algorithms derived from the depth-first search."""

import logging

from ._protocols import Graph, Node
from ._search import depth_search
from ._status import Edge, EdgeType, NodeInfo, NodeStatus

logger = logging.getLogger(__name__)


class _BackEdgeDetector:
    """Edge callback that stops a search at the first back edge."""

    __slots__ = ("back_edge",)

    def __init__(self) -> None:
        self.back_edge: Edge | None = None

    @property
    def acyclic(self) -> bool:
        return self.back_edge is None

    def __call__(self, edge: Edge) -> bool:
        if edge.type() is EdgeType.BACK:
            logger.debug(f"Back edge found: {edge.source!r} -> {edge.target!r}")
            self.back_edge = edge
            return False
        return True


def is_acyclic(graph: Graph) -> bool:
    """Return True if no cycle is reachable from the roots of the graph.

    A cycle exists exactly when a depth-first search meets a back edge, i.e. an
    edge to a node whose visit has not finished yet. The search stops at the first
    such edge.
    """
    detector = _BackEdgeDetector()
    depth_search(graph, on_edge=detector)
    return detector.acyclic


def topological_sort[N: Node](graph: Graph[N], *, reverse: bool = False) -> list[N] | None:
    """Order the reachable nodes so that every child comes before its parent.

    Nodes are collected in the order a depth-first search finishes them. Since a
    node is processed only after all its descendants, for every edge ``u -> v``
    the target ``v`` appears before the source ``u``.

    Args:
        graph: Graph to sort.
        reverse: Return the conventional order instead, where every edge source
            precedes its target.

    Returns:
        The reachable nodes, each exactly once, or None if they contain a cycle.

    Example:
        >>> from graphwalk import AdjacencyGraph
        >>> graph = AdjacencyGraph.from_edges([("a", "b"), ("b", "c")])
        >>> [str(n) for n in topological_sort(graph)]
        ['c', 'b', 'a']
        >>> [str(n) for n in topological_sort(graph, reverse=True)]
        ['a', 'b', 'c']

    """
    ordered: list[N] = []
    detector = _BackEdgeDetector()

    def collect(info: NodeInfo[N]) -> bool:
        if info.status is NodeStatus.PROCESSED:
            ordered.append(info.node)
        return True

    depth_search(graph, on_edge=detector, on_status_change=collect)
    if not detector.acyclic:
        return None
    if reverse:
        ordered.reverse()
    return ordered
