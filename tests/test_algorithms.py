"""Tests for is_acyclic and topological_sort."""

import pytest
from graph_fixtures import FiveNodeTree, ListGraph, RandomTree, generate_random_tree

from graphwalk import AdjacencyGraph, is_acyclic, topological_sort


class TestIsAcyclic:
    def test_acyclic(self, acyclic_tree: FiveNodeTree) -> None:
        assert is_acyclic(acyclic_tree.graph)

    def test_not_acyclic(self, cyclic_tree: FiveNodeTree) -> None:
        assert not is_acyclic(cyclic_tree.graph)

    def test_empty_graph(self) -> None:
        assert is_acyclic(ListGraph([]))

    def test_random_tree(self, random_tree: RandomTree) -> None:
        assert is_acyclic(random_tree.graph)

    def test_self_loop(self) -> None:
        assert not is_acyclic(AdjacencyGraph.from_edges([("a", "a")]))

    def test_diamond_is_acyclic(self) -> None:
        # Cross and forward edges do not make a cycle
        graph = AdjacencyGraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d"), ("a", "d")])
        assert is_acyclic(graph)

    def test_cycle_below_the_root(self) -> None:
        graph = AdjacencyGraph.from_edges([("a", "b"), ("b", "c"), ("c", "d"), ("d", "b")])
        assert not is_acyclic(graph)

    def test_unreachable_cycle_is_ignored(self) -> None:
        graph = AdjacencyGraph.from_edges([("a", "b"), ("x", "y"), ("y", "x")], roots=["a"])
        assert is_acyclic(graph)

    def test_cycle_without_source_next_to_acyclic_part(self) -> None:
        graph = AdjacencyGraph.from_mapping({"a": ["b"], "c": ["d"], "d": ["c"]})
        assert not is_acyclic(graph)


class TestTopologicalSort:
    def test_children_before_parents(self, acyclic_tree: FiveNodeTree) -> None:
        t = acyclic_tree
        result = topological_sort(t.graph)

        assert result is not None
        for parent, child in [(t.root, t.node1), (t.root, t.node2), (t.node1, t.leaf1), (t.node2, t.leaf2)]:
            assert result.index(parent) > result.index(child)
        assert result == [t.leaf1, t.node1, t.leaf2, t.node2, t.root]

    def test_reverse_puts_sources_first(self, acyclic_tree: FiveNodeTree) -> None:
        t = acyclic_tree
        result = topological_sort(t.graph, reverse=True)
        assert result == [t.root, t.node2, t.leaf2, t.node1, t.leaf1]

    def test_circular_graph(self, cyclic_tree: FiveNodeTree) -> None:
        assert topological_sort(cyclic_tree.graph) is None
        assert topological_sort(cyclic_tree.graph, reverse=True) is None

    def test_empty_graph(self) -> None:
        assert topological_sort(ListGraph([])) == []

    def test_linear_chain(self) -> None:
        graph = AdjacencyGraph.from_edges([("a", "b"), ("b", "c")])
        result = topological_sort(graph)
        assert result is not None
        assert [str(n) for n in result] == ["c", "b", "a"]

    def test_diamond_lists_each_node_once(self) -> None:
        graph = AdjacencyGraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        result = topological_sort(graph)
        assert result is not None
        keys = [n.key for n in result]
        assert sorted(keys) == ["a", "b", "c", "d"]
        assert keys[0] == "d"
        assert keys[-1] == "a"

    def test_multiple_roots(self) -> None:
        graph = AdjacencyGraph.from_edges([("a", "c"), ("b", "c")])
        result = topological_sort(graph, reverse=True)
        assert result is not None
        keys = [n.key for n in result]
        assert keys[-1] == "c"
        assert set(keys[:2]) == {"a", "b"}

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_every_edge_respected_in_random_tree(self, seed: int) -> None:
        tree = generate_random_tree(40, seed=seed)
        result = topological_sort(tree.graph)

        assert result is not None
        assert len(result) == len(tree.nodes)
        position = {node: i for i, node in enumerate(result)}
        for node in tree.nodes:
            for child in node.children():
                assert position[child] < position[node]

    def test_cycle_without_source_next_to_acyclic_part(self) -> None:
        graph = AdjacencyGraph.from_mapping({"a": ["b"], "c": ["d"], "d": ["c"]})
        assert topological_sort(graph) is None

    def test_works_with_tuple_keys(self) -> None:
        graph = AdjacencyGraph.from_edges([(("a", 1), ("b", 2))])
        result = topological_sort(graph, reverse=True)
        assert result is not None
        assert [n.key for n in result] == [("a", 1), ("b", 2)]
