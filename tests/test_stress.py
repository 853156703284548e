"""
Randomized stress tests checking the tree against a dict oracle.
"""

import math
import random

import pytest

from avltree import AVLTree, KeyNotFoundError, natural_order


def _height_bound(size: int) -> float:
    return 1.44 * math.log2(size + 2) - 0.328


class TestRandomWorkloads:
    """Seeded random insert/delete workloads."""

    @pytest.mark.parametrize("seed", [0, 1, 7, 42, 2024])
    def test_mixed_workload_matches_dict(self, seed):
        """Test every operation agrees with a plain dict and keeps the tree valid."""
        rng = random.Random(seed)
        tree = AVLTree(natural_order)
        oracle = {}

        for step in range(3000):
            key = rng.randrange(500)
            if rng.random() < 0.6:
                tree.insert(key, step)
                oracle[key] = step
            else:
                assert tree.delete(key) == (key in oracle)
                oracle.pop(key, None)

            tree.validate()
            assert tree.size() == len(oracle)
            assert tree.height() <= _height_bound(tree.size())

        assert list(tree) == sorted(oracle.items())

    def test_random_inserts_then_searches(self, large_sample_entries):
        """Test shuffled inserts are all found and misses raise."""
        rng = random.Random(3)
        entries = list(large_sample_entries)
        rng.shuffle(entries)

        tree = AVLTree(natural_order)
        for key, value in entries:
            tree.insert(key, value)

        tree.validate()
        for key, value in large_sample_entries:
            assert tree.search(key) == value
        with pytest.raises(KeyNotFoundError):
            tree.search("key9999")

    def test_size_matches_traversal(self):
        """Test the cached size equals the number of traversed entries."""
        rng = random.Random(11)
        tree = AVLTree(natural_order)

        for _ in range(2000):
            key = rng.randrange(300)
            if rng.random() < 0.5:
                tree.insert(key, key)
            else:
                tree.delete(key)

        assert tree.size() == sum(1 for _ in tree)

    def test_descending_deletes_keep_balance(self):
        """Test deleting from one end repeatedly rebalances at every level."""
        tree = AVLTree(natural_order)
        for i in range(4096):
            tree.insert(i, i)

        for i in reversed(range(0, 4096, 2)):
            tree.delete(i)
            assert tree.height() <= _height_bound(tree.size())

        tree.validate()
        assert list(tree.keys()) == list(range(1, 4096, 2))

    def test_delete_insert_round_trip(self):
        """Test a deleted key can be inserted and found again."""
        rng = random.Random(5)
        tree = AVLTree(natural_order)
        keys = rng.sample(range(10000), 1000)
        for key in keys:
            tree.insert(key, str(key))

        for key in keys[:500]:
            tree.delete(key)
            with pytest.raises(KeyNotFoundError):
                tree.search(key)
            tree.insert(key, "again")
            assert tree.search(key) == "again"

        assert tree.size() == 1000
        tree.validate()
