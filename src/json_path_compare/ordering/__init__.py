"""ordering subpackage — three-way comparison of tree values.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_path_compare.ordering import Ordering, OrderedValue, ValueComparator

    ValueComparator().compare([1, 2], [1, 2])    # Ordering.EQUAL
    OrderedValue(1) < OrderedValue("1")          # True (number before string)
"""

from __future__ import annotations

from json_path_compare.ordering.comparator import ValueComparator
from json_path_compare.ordering.config import CompareConfig, StringOrder
from json_path_compare.ordering.result import Ordering
from json_path_compare.ordering.wrapper import OrderedValue

__all__ = [
    "CompareConfig",
    "OrderedValue",
    "Ordering",
    "StringOrder",
    "ValueComparator",
]
