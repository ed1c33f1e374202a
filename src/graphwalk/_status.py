"""Node status and edge classification used during a traversal."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Self

from ._protocols import Node

logger = logging.getLogger(__name__)


class _DocumentedEnum(StrEnum):
    """String enum whose members carry their own docstring.

    Members are declared as ``NAME = "value", "docstring"``.
    """

    def __new__(cls, value: str, doc: str = "") -> Self:
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.__doc__ = doc
        return obj


class NodeStatus(_DocumentedEnum):
    """Visitation state of a node within one traversal call."""

    NEW = "new", "The node has not been discovered yet."
    DISCOVERED = "discovered", "The node has been discovered; its children are not fully explored."
    PROCESSED = (
        "processed",
        "All children of the node have been explored. "
        "In a depth-first search this implies every descendant is processed too.",
    )

    @property
    def rank(self) -> int:
        """Position of the status in the ``NEW -> DISCOVERED -> PROCESSED`` progression."""
        return _STATUS_ORDER.index(self)


_STATUS_ORDER = (NodeStatus.NEW, NodeStatus.DISCOVERED, NodeStatus.PROCESSED)


class EdgeType(_DocumentedEnum):
    """Classification of an edge by the status of its target at discovery time."""

    TREE = "tree", "Edge to a node that had not been discovered yet."
    BACK = "back", "Edge to a node that is still being visited. Implies a cycle."
    CROSS_OR_FORWARD = (
        "cross_or_forward",
        "Edge to a node that was already processed (a descendant or a node of a sibling subtree).",
    )


@dataclass(frozen=True, slots=True)
class NodeInfo[N: Node]:
    """A node paired with its status at the moment a callback is invoked."""

    node: N
    status: NodeStatus


@dataclass(frozen=True, slots=True)
class Edge[N: Node]:
    """A directed arc discovered during traversal.

    Both endpoints are snapshots taken when the edge was discovered.
    """

    from_: NodeInfo[N]
    to: NodeInfo[N]

    @property
    def source(self) -> N:
        return self.from_.node

    @property
    def target(self) -> N:
        return self.to.node

    def type(self) -> EdgeType:
        """Classify the edge from the target status at discovery time."""
        match self.to.status:
            case NodeStatus.NEW:
                return EdgeType.TREE
            case NodeStatus.DISCOVERED:
                return EdgeType.BACK
            case NodeStatus.PROCESSED:
                return EdgeType.CROSS_OR_FORWARD


class StatusTransitionError(AssertionError):
    """Raised by a strict tracker when a node status does not move strictly forward."""

    def __init__(self, node: object, current: NodeStatus, requested: NodeStatus) -> None:
        self.node = node
        self.current = current
        self.requested = requested
        super().__init__(f"Illegal status transition for node {node!r}: {current} -> {requested}")


@dataclass(slots=True)
class SearchInfo[N: Node]:
    """Per-call status map keyed by node identity.

    Nodes never seen are ``NEW``. With ``strict`` set, any assignment that does not
    advance a node along ``NEW -> DISCOVERED -> PROCESSED`` raises
    `StatusTransitionError`; otherwise assignment always succeeds.
    """

    strict: bool = False
    _statuses: dict[N, NodeStatus] = field(default_factory=dict)

    def status(self, node: N) -> NodeStatus:
        return self._statuses.get(node, NodeStatus.NEW)

    def set(self, node: N, status: NodeStatus) -> None:
        if self.strict:
            current = self.status(node)
            if status.rank <= current.rank:
                logger.debug(f"Rejected status change for {node!r}: {current} -> {status}")
                raise StatusTransitionError(node, current, status)
        self._statuses[node] = status

    def node_info(self, node: N) -> NodeInfo[N]:
        return NodeInfo(node, self.status(node))

    def __len__(self) -> int:
        """Return the number of nodes with an assigned status, ``NEW`` included."""
        return len(self._statuses)
