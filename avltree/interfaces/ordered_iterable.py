"""
OrderedIterable protocol for data structures that iterate in key order.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from typing import Any


class OrderedIterable(ABC):
    """
    Protocol for data structures that can be walked in ascending key order.

    Implementations must support:
    - Iteration via __iter__, returning a fresh iterator on every call
    - Async iteration via __aiter__, yielding the same sequence
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in ascending key order."""
        pass

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[tuple[Any, Any]]:
        """Return an async iterator over all key-value pairs in ascending key order."""
        pass
