"""Concrete graph built from an adjacency mapping."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AdjacencyNode[K: Hashable]:
    """A node of an `AdjacencyGraph`.

    Nodes compare and hash by key only, so the node handed out by `AdjacencyGraph.node`
    and the one reached through `children` are interchangeable.
    """

    key: K
    graph: AdjacencyGraph[K] = field(compare=False, repr=False)

    def children(self) -> tuple[AdjacencyNode[K], ...]:
        return tuple(AdjacencyNode(child, self.graph) for child in self.graph.successors(self.key))

    def __str__(self) -> str:
        return str(self.key)


@dataclass(frozen=True, slots=True)
class AdjacencyGraph[K: Hashable]:
    """An immutable directed graph stored as ordered successor lists.

    An edge ``(a, b)`` makes ``b`` a child of ``a``. Child order follows insertion
    order, and so does the order of `keys`.

    Attributes:
        _successors: Mapping from key to its ordered child keys.
        _predecessors: Mapping from key to the keys having it as a child.
        _root_keys: Explicit traversal roots, or None to infer them.

    """

    _successors: dict[K, tuple[K, ...]] = field(default_factory=dict)
    _predecessors: dict[K, frozenset[K]] = field(default_factory=dict)
    _root_keys: tuple[K, ...] | None = None

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[K, K]], roots: Iterable[K] | None = None) -> AdjacencyGraph[K]:
        """Build a graph from ``(source, target)`` pairs.

        Duplicate edges are collapsed.

        Args:
            edges: Edges in the order children should be visited.
            roots: Explicit traversal roots. Inferred when omitted.

        Returns:
            A new AdjacencyGraph instance.

        Raises:
            ValueError: If a root is not a node of the graph.

        Example:
            >>> graph = AdjacencyGraph.from_edges([("a", "b"), ("a", "c")])
            >>> graph.successors("a")
            ('b', 'c')

        """
        successors: dict[K, list[K]] = {}
        for src, dst in edges:
            children = successors.setdefault(src, [])
            if dst not in children:
                children.append(dst)
            successors.setdefault(dst, [])
        return cls._build(successors, roots)

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[K, Iterable[K]],
        roots: Iterable[K] | None = None,
    ) -> AdjacencyGraph[K]:
        """Build a graph from a mapping of key to child keys.

        Child keys missing from the mapping become leaf nodes.

        Raises:
            ValueError: If a root is not a node of the graph.

        """
        successors: dict[K, list[K]] = {}
        for key, child_keys in mapping.items():
            children = successors.setdefault(key, [])
            for child in child_keys:
                if child not in children:
                    children.append(child)
                successors.setdefault(child, [])
        return cls._build(successors, roots)

    @classmethod
    def _build(cls, successors: dict[K, list[K]], roots: Iterable[K] | None) -> AdjacencyGraph[K]:
        predecessors: dict[K, set[K]] = {key: set() for key in successors}
        for key, children in successors.items():
            for child in children:
                predecessors[child].add(key)

        root_keys = None if roots is None else tuple(roots)
        if root_keys is not None:
            unknown = [key for key in root_keys if key not in successors]
            if unknown:
                msg = f"Roots are not nodes of the graph: {', '.join(map(repr, unknown))}"
                raise ValueError(msg)

        return cls(
            _successors={k: tuple(v) for k, v in successors.items()},
            _predecessors={k: frozenset(v) for k, v in predecessors.items()},
            _root_keys=root_keys,
        )

    @property
    def keys(self) -> tuple[K, ...]:
        """All node keys in insertion order."""
        return tuple(self._successors)

    def node(self, key: K) -> AdjacencyNode[K]:
        """Get the node for a key.

        Raises:
            KeyError: If the key is not a node of the graph.

        """
        if key not in self._successors:
            raise KeyError(key)
        return AdjacencyNode(key, self)

    def successors(self, key: K) -> tuple[K, ...]:
        """Get the ordered child keys of a node (empty for unknown keys)."""
        return self._successors.get(key, ())

    def predecessors(self, key: K) -> frozenset[K]:
        """Get the keys of nodes that have this node as a child."""
        return self._predecessors.get(key, frozenset())

    def root_keys(self) -> tuple[K, ...]:
        """Keys the traversal starts from.

        The explicit roots if given. Otherwise every key without predecessors,
        followed by all remaining keys so that cycles no source leads to are
        still visited. Both groups keep insertion order.
        """
        if self._root_keys is not None:
            return self._root_keys
        sources = tuple(key for key in self._successors if not self._predecessors[key])
        return sources + tuple(key for key in self._successors if self._predecessors[key])

    def roots(self) -> tuple[AdjacencyNode[K], ...]:
        return tuple(AdjacencyNode(key, self) for key in self.root_keys())

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._successors)

    def __contains__(self, key: object) -> bool:
        """Check if a key is a node of the graph."""
        return key in self._successors
