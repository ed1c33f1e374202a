"""Breadth-first and depth-first traversal over a `Graph`.

Both searches report what they see through two optional callbacks:

- ``on_status_change(NodeInfo)`` after every status assignment,
- ``on_edge(Edge)`` when an edge is discovered.

A callback returning ``False`` stops the whole search, including roots that have
not been visited yet. Any other return value (``True``, ``None``) continues.
"""

import logging
from collections.abc import Callable, Iterator

from ._protocols import Graph, Node
from ._queue import Queue
from ._status import Edge, NodeInfo, NodeStatus, SearchInfo

logger = logging.getLogger(__name__)

type EdgeCallback[N: Node] = Callable[[Edge[N]], bool | None]
type StatusCallback[N: Node] = Callable[[NodeInfo[N]], bool | None]


def _notify[A](callback: Callable[[A], bool | None] | None, argument: A) -> bool:
    """Invoke a callback and return whether the search may continue."""
    if callback is None:
        return True
    return callback(argument) is not False


def breadth_search[N: Node](
    graph: Graph[N],
    on_edge: EdgeCallback[N] | None = None,
    on_status_change: StatusCallback[N] | None = None,
    *,
    strict: bool = False,
) -> bool:
    """Traverse the graph breadth first.

    Roots are visited in order; each root that is still new starts a level-order
    walk through its reachable nodes.

    Only tree edges are reported. A breadth-first search does not keep enough
    ordering information to tell back edges from cross edges, so edges to nodes
    that are already discovered or processed are skipped silently.

    Args:
        graph: Graph whose roots are the starting points.
        on_edge: Called with every tree edge, after its target was discovered.
        on_status_change: Called after every status change.
        strict: Raise `StatusTransitionError` on a non-forward status assignment.

    Returns:
        True if the traversal completed, False if a callback stopped it.

    """
    search_info: SearchInfo[N] = SearchInfo(strict=strict)
    queue: Queue[N] = Queue()
    roots = list(graph.roots())
    logger.debug(f"Starting breadth-first search from {len(roots)} root(s)")

    for root in roots:
        if search_info.status(root) is not NodeStatus.NEW:
            continue

        queue.enqueue(root)
        search_info.set(root, NodeStatus.DISCOVERED)
        if not _notify(on_status_change, search_info.node_info(root)):
            return _stopped("breadth-first", search_info)

        while queue:
            parent = queue.dequeue()
            for child in parent.children():
                if search_info.status(child) is not NodeStatus.NEW:
                    continue
                # Snapshot before discovery so the edge classifies as a tree edge
                edge = Edge(search_info.node_info(parent), search_info.node_info(child))
                queue.enqueue(child)
                search_info.set(child, NodeStatus.DISCOVERED)
                if not _notify(on_status_change, search_info.node_info(child)):
                    return _stopped("breadth-first", search_info)
                if not _notify(on_edge, edge):
                    return _stopped("breadth-first", search_info)

            search_info.set(parent, NodeStatus.PROCESSED)
            if not _notify(on_status_change, search_info.node_info(parent)):
                return _stopped("breadth-first", search_info)

    logger.debug(f"Breadth-first search finished, {len(search_info)} node(s) visited")
    return True


def depth_search[N: Node](
    graph: Graph[N],
    on_edge: EdgeCallback[N] | None = None,
    on_status_change: StatusCallback[N] | None = None,
    *,
    strict: bool = False,
) -> bool:
    """Traverse the graph depth first.

    Every edge of the reachable subgraph is reported exactly once, with the target
    status it had when the edge was examined, so tree, back and cross/forward
    edges can all be told apart via `Edge.type`.

    The visit keeps an explicit stack instead of recursing, so arbitrarily long
    chains do not hit the interpreter recursion limit. The callback order is the
    one of the textbook recursive formulation.

    Args:
        graph: Graph whose roots are the starting points.
        on_edge: Called with every edge before its target is visited.
        on_status_change: Called after every status change.
        strict: Raise `StatusTransitionError` on a non-forward status assignment.

    Returns:
        True if the traversal completed, False if a callback stopped it.

    """
    search_info: SearchInfo[N] = SearchInfo(strict=strict)
    roots = list(graph.roots())
    logger.debug(f"Starting depth-first search from {len(roots)} root(s)")

    for root in roots:
        if search_info.status(root) is not NodeStatus.NEW:
            continue
        if not _depth_visit(root, search_info, on_edge, on_status_change):
            return _stopped("depth-first", search_info)

    logger.debug(f"Depth-first search finished, {len(search_info)} node(s) visited")
    return True


def _depth_visit[N: Node](
    root: N,
    search_info: SearchInfo[N],
    on_edge: EdgeCallback[N] | None,
    on_status_change: StatusCallback[N] | None,
) -> bool:
    """Visit everything reachable from a new root. Return False on a stop request."""
    search_info.set(root, NodeStatus.DISCOVERED)
    if not _notify(on_status_change, search_info.node_info(root)):
        return False

    # Each frame is a node together with the iterator over its remaining children
    stack: list[tuple[N, Iterator[N]]] = [(root, iter(root.children()))]
    while stack:
        node, children = stack[-1]
        for child in children:
            if not _notify(on_edge, Edge(search_info.node_info(node), search_info.node_info(child))):
                return False
            if search_info.status(child) is NodeStatus.NEW:
                search_info.set(child, NodeStatus.DISCOVERED)
                if not _notify(on_status_change, search_info.node_info(child)):
                    return False
                stack.append((child, iter(child.children())))
                break
        else:
            stack.pop()
            search_info.set(node, NodeStatus.PROCESSED)
            if not _notify(on_status_change, search_info.node_info(node)):
                return False

    return True


def _stopped(kind: str, search_info: SearchInfo) -> bool:
    logger.debug(f"The {kind} search was stopped by a callback after {len(search_info)} node(s)")
    return False
