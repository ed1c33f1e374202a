"""Pytest fixtures for the traversal tests."""

import pytest

from graph_fixtures import FiveNodeTree, RandomTree, generate_random_tree


@pytest.fixture
def random_tree() -> RandomTree:
    """A random 50 node tree."""
    return generate_random_tree(50, seed=1234)


@pytest.fixture
def acyclic_tree() -> FiveNodeTree:
    return FiveNodeTree.build(acyclic=True)


@pytest.fixture
def cyclic_tree() -> FiveNodeTree:
    """The five node tree with an extra ``leaf1 -> root`` edge."""
    return FiveNodeTree.build(acyclic=False)
