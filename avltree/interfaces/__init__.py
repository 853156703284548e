"""
Abstract base classes for ordered key-value containers.
"""

from avltree.interfaces.ordered_iterable import OrderedIterable
from avltree.interfaces.sorted_container import SortedContainer

__all__ = ["OrderedIterable", "SortedContainer"]
