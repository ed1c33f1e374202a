"""Capability protocols the search engine is written against."""

from collections.abc import Hashable, Sequence
from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Node(Hashable, Protocol):
    """A value that can report its immediate successors.

    Identity is taken from ``__eq__``/``__hash__``. The engine never mutates a node
    and assumes ``children()`` returns the same sequence for the whole traversal.
    """

    def children(self) -> Sequence[Self]:
        """Return the ordered child nodes."""
        ...


@runtime_checkable
class Graph[N: Node](Protocol):
    """A collection of entry points for a traversal.

    The roots do not have to enumerate every node; nodes not reachable from them
    are never visited.
    """

    def roots(self) -> Sequence[N]:
        """Return the ordered root nodes."""
        ...
