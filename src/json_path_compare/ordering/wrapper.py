"""OrderedValue: operator-style comparisons over a borrowed tree value.

Every operator delegates to ``ValueComparator.compare``; an INCOMPARABLE
result makes every operator return False except ``!=``. Equality against a
non-tree object defers to Python, so ``==`` is False rather than an error.
"""

from __future__ import annotations

from typing import Any

from json_path_compare.ordering.comparator import ValueComparator
from json_path_compare.ordering.config import CompareConfig
from json_path_compare.ordering.result import Ordering
from json_path_compare.values import value_type

__all__ = ["OrderedValue"]


class OrderedValue:
    """Wraps a reference to a tree value and gives it partial-order operators.

    ``a < b`` holds only when ``compare(a, b)`` is LESS, ``a <= b`` when it is
    LESS or EQUAL, and ``a == b`` only when it is EQUAL.  Two objects are
    therefore never equal through this wrapper, even when structurally
    identical.  Because equality is not structural, instances are unhashable.

    The right-hand operand may be another ``OrderedValue`` or a raw tree
    value; raw values are compared with the left operand's config.

    Example::

        sorted([3, "a", None, [1]], key=OrderedValue)
        # [None, 3, 'a', [1]]
    """

    __slots__ = ("_comparator", "value")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Any, config: CompareConfig | None = None) -> None:
        self.value = value
        self._comparator = ValueComparator(config)

    def compare(self, other: Any) -> Ordering:
        """Return the ``Ordering`` of this value against ``other``."""
        if isinstance(other, OrderedValue):
            other = other.value
        return self._comparator.compare(self.value, other)

    def __lt__(self, other: Any) -> bool:
        return self.compare(other) == Ordering.LESS

    def __le__(self, other: Any) -> bool:
        return self.compare(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: Any) -> bool:
        return self.compare(other) == Ordering.GREATER

    def __ge__(self, other: Any) -> bool:
        return self.compare(other) in (Ordering.GREATER, Ordering.EQUAL)

    def __eq__(self, other: object) -> bool:
        if not _is_tree_value(other):
            return NotImplemented
        return self.compare(other) == Ordering.EQUAL

    def __ne__(self, other: object) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return NotImplemented
        return not equal

    def __repr__(self) -> str:
        return f"OrderedValue({self.value!r})"


def _is_tree_value(other: object) -> bool:
    if isinstance(other, OrderedValue):
        return True
    try:
        value_type(other)
    except TypeError:
        return False
    return True
