"""Public API functions for json-path-compare.

Every function here is stateless: comparisons create a fresh
``ValueComparator`` per call and resolution parses the path on every call,
so nothing is shared between calls or threads.  Use ``PathResolver`` to
cache parsed paths across many calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import Any

from json_path_compare.ordering import CompareConfig, Ordering, ValueComparator
from json_path_compare.path import JsonPath, parse_path

__all__ = ["compare", "is_equal", "is_less", "parse_path", "resolve", "sort_values"]

_SIGN = {Ordering.LESS: -1, Ordering.EQUAL: 0, Ordering.GREATER: 1}


def compare(
    left: Any,
    right: Any,
    config: CompareConfig | None = None,
) -> Ordering:
    """Compare two tree values.

    Values of different kinds order by rank
    (null < bool < number < string < array < object); values of the same kind
    order by content.  Two objects are always INCOMPARABLE.

    Args:
        left:   First tree value (dict, list, str, int, float, bool, None).
        right:  Second tree value.
        config: Comparison options.  Defaults to ``CompareConfig()`` when None.

    Returns:
        ``Ordering.LESS``, ``EQUAL``, ``GREATER`` or ``INCOMPARABLE``.
    """
    return ValueComparator(config).compare(left, right)


def is_less(left: Any, right: Any, config: CompareConfig | None = None) -> bool:
    """Return True only if ``compare(left, right)`` is LESS."""
    return compare(left, right, config=config) == Ordering.LESS


def is_equal(left: Any, right: Any, config: CompareConfig | None = None) -> bool:
    """Return True only if ``compare(left, right)`` is EQUAL.

    Two objects are never equal, even when structurally identical.
    """
    return compare(left, right, config=config) == Ordering.EQUAL


def sort_values(
    values: Iterable[Any],
    config: CompareConfig | None = None,
) -> list[Any]:
    """Return ``values`` sorted by the value ordering (stable).

    Mixed kinds are grouped by rank.  Objects have no order, so a sort that
    has to compare two of them fails instead of returning an arbitrary order.

    Raises:
        TypeError: If two of the values are INCOMPARABLE.
    """
    comparator = ValueComparator(config)

    def _cmp(left: Any, right: Any) -> int:
        result = comparator.compare(left, right)
        if result == Ordering.INCOMPARABLE:
            msg = f"Cannot order {left!r} against {right!r}"
            raise TypeError(msg)
        return _SIGN[result]

    return sorted(values, key=cmp_to_key(_cmp))


def resolve(root: Any, path: str | JsonPath) -> Any:
    """Return the value addressed by ``path`` inside ``root``.

    Example::

        doc = {"a": "example", "b": [0, 1, 2]}
        resolve(doc, "$.a")        # "example"
        resolve(doc, "$.b[#-1]")   # 2

    Args:
        root: The tree value to navigate.
        path: Path text in the SQLite JSON-path dialect, or an already
              parsed ``JsonPath``.

    Returns:
        The object stored in the tree at ``path`` (not a copy).

    Raises:
        PathParseError: ``path`` is malformed.
        TypeMismatchError: A step met a value of the wrong kind.
        KeyNotFoundError: A field step's key is absent.
        IndexOutOfRangeError: An index step addressed a missing position.
    """
    parsed = path if isinstance(path, JsonPath) else parse_path(path)
    return parsed.find(root)
