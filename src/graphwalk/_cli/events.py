"""Recording traversal callbacks for CLI commands.

These are the functional core of the ``bfs``/``dfs`` commands - no I/O, no Rich rendering.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from graphwalk._protocols import Graph
from graphwalk._search import breadth_search, depth_search
from graphwalk._status import Edge, EdgeType, NodeInfo, NodeStatus


class SearchMode(StrEnum):
    BREADTH = "breadth"
    DEPTH = "depth"


@dataclass(frozen=True, slots=True)
class StatusEvent:
    """A node changed status."""

    index: int
    node: str
    status: NodeStatus


@dataclass(frozen=True, slots=True)
class EdgeEvent:
    """An edge was discovered."""

    index: int
    source: str
    target: str
    edge_type: EdgeType


type TraversalEvent = StatusEvent | EdgeEvent


@dataclass(frozen=True, slots=True)
class TraversalLog:
    """All events of one traversal, in callback order."""

    mode: SearchMode
    events: tuple[TraversalEvent, ...]
    completed: bool

    @property
    def status_events(self) -> tuple[StatusEvent, ...]:
        return tuple(e for e in self.events if isinstance(e, StatusEvent))

    @property
    def edge_events(self) -> tuple[EdgeEvent, ...]:
        return tuple(e for e in self.events if isinstance(e, EdgeEvent))


def record_traversal(
    graph: Graph,
    mode: SearchMode,
    *,
    stop_after: int | None = None,
    strict: bool = False,
) -> TraversalLog:
    """Run a traversal and record every callback invocation.

    Args:
        graph: Graph to traverse.
        mode: Which search to run.
        stop_after: Stop the search at the given status event (1-based).
        strict: Use the strict status tracker.

    Returns:
        The recorded events and whether the traversal ran to completion.

    """
    events: list[TraversalEvent] = []
    status_count = 0

    def on_edge(edge: Edge) -> bool:
        events.append(EdgeEvent(len(events) + 1, str(edge.source), str(edge.target), edge.type()))
        return True

    def on_status_change(info: NodeInfo) -> bool:
        nonlocal status_count
        status_count += 1
        events.append(StatusEvent(len(events) + 1, str(info.node), info.status))
        return stop_after is None or status_count < stop_after

    search: Callable[..., bool] = breadth_search if mode is SearchMode.BREADTH else depth_search
    completed = search(graph, on_edge, on_status_change, strict=strict)
    return TraversalLog(mode=mode, events=tuple(events), completed=completed)
