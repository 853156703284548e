"""
Shared pytest fixtures for AVL tree tests.
"""

import pytest

from avltree import AVLTree, natural_order

SCENARIO_KEYS = [2, 1, 6, 5, 4, 3, 15, 12, 9, 7, 11, 10, 13, 14, 16, 17, 18]


@pytest.fixture
def tree():
    """Provide an empty tree ordered by natural key order."""
    return AVLTree(natural_order)


@pytest.fixture
def scenario_keys():
    """Provide the key sequence used by the worked insert/delete scenario."""
    return list(SCENARIO_KEYS)


@pytest.fixture
def scenario_tree(scenario_keys):
    """Provide a tree holding the scenario keys, each mapped to key * 10."""
    tree = AVLTree(natural_order)
    for key in scenario_keys:
        tree.insert(key, key * 10)
    return tree


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        ("key1", "value1"),
        ("key2", "value2"),
        ("key3", "value3"),
    ]


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}", f"value{i}") for i in range(1000)]
