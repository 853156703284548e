"""
Tests for async in-order iteration.
"""

from avltree import AVLTree, natural_order


class TestAsyncIteration:
    """Tests for __aiter__."""

    async def test_async_iteration(self, scenario_tree):
        """Test async iteration yields the same entries as sync iteration."""
        entries = [entry async for entry in scenario_tree]

        assert entries == list(scenario_tree)

    async def test_async_iteration_empty(self, tree):
        """Test async iteration over an empty tree yields nothing."""
        entries = [entry async for entry in tree]

        assert entries == []

    async def test_async_iteration_is_restartable(self):
        """Test each async iteration starts over."""
        tree = AVLTree(natural_order)
        for key in ["b", "a", "c"]:
            tree.insert(key, key.upper())

        first = [key async for key, _ in tree]
        second = [value async for _, value in tree]

        assert first == ["a", "b", "c"]
        assert second == ["A", "B", "C"]
