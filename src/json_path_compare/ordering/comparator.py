"""ValueComparator: three-way ordering of JSON-like tree values.

Values are ordered first by the rank of their kind (see ``ValueType``), then
by content within a kind:

- null equals null; ``False`` orders before ``True``.
- numbers order numerically and exactly, whatever their Python type.
- strings order lexicographically (code points by default).
- arrays order element by element; a strict prefix orders first.
- objects never order against each other: the result is INCOMPARABLE.

The comparator borrows the values it is given; it never copies or mutates
them, and it keeps no state besides its immutable config, so a single
instance is safe to share across threads.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from json_path_compare.ordering.config import CompareConfig, StringOrder
from json_path_compare.ordering.result import Ordering
from json_path_compare.values import ValueType, unwrap_scalar, value_type

__all__ = ["ValueComparator"]

_SCALAR_KINDS = frozenset({ValueType.BOOL, ValueType.NUMBER, ValueType.STRING})


def _three_way(left: Any, right: Any) -> Ordering:
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


def _is_nan(number: Any) -> bool:
    if isinstance(number, Decimal):
        return number.is_nan()
    if isinstance(number, float):
        return math.isnan(number)
    return False


def _parse_number(text: str) -> float | None:
    """Parse a numeric string the way SQL casts TEXT to REAL, or return None."""
    try:
        number = float(text)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


class ValueComparator:
    """Total-ordering comparator for JSON-like tree values.

    Example::

        from json_path_compare.ordering import Ordering, ValueComparator

        cmp = ValueComparator()
        cmp.compare([1, 2], [1, 2, 3])     # Ordering.LESS
        cmp.compare(None, False)           # Ordering.LESS (rank order)
        cmp.compare({"a": 1}, {"a": 1})    # Ordering.INCOMPARABLE
    """

    def __init__(self, config: CompareConfig | None = None) -> None:
        self._config: CompareConfig = config if config is not None else CompareConfig()

    @property
    def config(self) -> CompareConfig:
        """The immutable comparison options of this comparator."""
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compare(self, left: Any, right: Any) -> Ordering:
        """Compare two tree values.

        Args:
            left:  First tree value (dict, list, str, int, float, bool, None).
            right: Second tree value.

        Returns:
            LESS, EQUAL or GREATER; INCOMPARABLE only when two objects meet
            (directly or at the deciding position of two arrays).

        Raises:
            TypeError: If either value (or any nested value that is reached)
                is not a valid JSON type.
        """
        left = unwrap_scalar(left)
        right = unwrap_scalar(right)
        left_kind = value_type(left)
        right_kind = value_type(right)

        if left_kind != right_kind:
            if self._config.coerce_scalars and {left_kind, right_kind} <= _SCALAR_KINDS:
                coerced = self._compare_coerced(left, left_kind, right, right_kind)
                if coerced is not None:
                    return coerced
            return Ordering.from_sign(left_kind - right_kind)

        if left_kind == ValueType.NULL:
            return Ordering.EQUAL
        if left_kind == ValueType.BOOL:
            return _three_way(bool(left), bool(right))
        if left_kind == ValueType.NUMBER:
            return self._compare_numbers(left, right)
        if left_kind == ValueType.STRING:
            return self._compare_strings(left, right)
        if left_kind == ValueType.ARRAY:
            return self._compare_arrays(left, right)
        return Ordering.INCOMPARABLE

    # ------------------------------------------------------------------
    # Per-kind comparisons
    # ------------------------------------------------------------------

    def _compare_numbers(self, left: Any, right: Any) -> Ordering:
        """Compare two numbers exactly, coercing to float only as a last resort.

        Operands are native Python numbers (numpy scalars are unwrapped by
        ``compare``).  NaN is not valid JSON but floats can carry it; it is
        ordered equal to itself and before every other number.
        """
        left_nan = _is_nan(left)
        right_nan = _is_nan(right)
        if left_nan or right_nan:
            return Ordering.from_sign(int(right_nan) - int(left_nan))

        try:
            return _three_way(left, right)
        except TypeError:
            # e.g. a numbers.Real implementation that does not interoperate
            return _three_way(float(left), float(right))

    def _compare_strings(self, left: str, right: str) -> Ordering:
        if self._config.string_order == StringOrder.CASEFOLD:
            folded = _three_way(left.casefold(), right.casefold())
            if folded != Ordering.EQUAL:
                return folded
        return _three_way(left, right)

    def _compare_arrays(self, left: Sequence[Any], right: Sequence[Any]) -> Ordering:
        """Lexicographic element-wise comparison; INCOMPARABLE short-circuits."""
        for left_item, right_item in zip(left, right):
            result = self.compare(left_item, right_item)
            if result != Ordering.EQUAL:
                return result
        return Ordering.from_sign(len(left) - len(right))

    def _compare_coerced(
        self,
        left: Any,
        left_kind: ValueType,
        right: Any,
        right_kind: ValueType,
    ) -> Ordering | None:
        """Cast mismatched scalars to numbers, or return None to use rank order.

        Args:
            left, right: Scalars of two different kinds.
            left_kind, right_kind: Their ``ValueType``.
        """
        if right_kind == ValueType.NUMBER:
            number = self._as_number(left, left_kind)
            return None if number is None else self._compare_numbers(number, right)
        if left_kind == ValueType.NUMBER:
            number = self._as_number(right, right_kind)
            return None if number is None else self._compare_numbers(left, number)
        # bool against string keeps the rank order
        return None

    @staticmethod
    def _as_number(value: Any, kind: ValueType) -> int | float | None:
        if kind == ValueType.BOOL:
            return int(bool(value))
        if kind == ValueType.STRING:
            return _parse_number(value)
        return None
