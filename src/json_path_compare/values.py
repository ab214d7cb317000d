"""ValueType IntEnum and value classification for JSON-like trees.

Tree values are plain Python objects as produced by ``json.loads`` (or any
library that yields the same shapes).  This module maps each of them onto one
of the six JSON kinds.  The integer value of each ``ValueType`` member is its
comparison rank and is part of the public contract:

    NULL (0) < BOOL (1) < NUMBER (2) < STRING (3) < ARRAY (4) < OBJECT (5)
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from decimal import Decimal
from enum import IntEnum
from typing import Any

import numpy as np

__all__ = ["ValueType", "unwrap_scalar", "value_type"]


class ValueType(IntEnum):
    """The six JSON kinds, valued by their stable comparison rank."""

    NULL = 0
    BOOL = 1
    NUMBER = 2
    STRING = 3
    ARRAY = 4
    OBJECT = 5


def value_type(value: Any) -> ValueType:
    """Classify a Python value as one of the six JSON kinds.

    The dispatch order is critical: bool MUST be checked before numbers
    because bool is a subclass of int in Python.

    Args:
        value: Any tree value.

    Returns:
        The ``ValueType`` of ``value``.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    if value is None:
        return ValueType.NULL

    # CRITICAL: bool MUST be checked before int — bool subclasses int in Python
    if isinstance(value, (bool, np.bool_)):
        return ValueType.BOOL

    if isinstance(value, str):
        return ValueType.STRING

    # numpy registers its integer and floating scalars as numbers.Real
    if isinstance(value, (numbers.Real, Decimal)):
        return ValueType.NUMBER

    if isinstance(value, Mapping):
        return ValueType.OBJECT

    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY

    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return value_type(value.item())
        return ValueType.ARRAY

    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


def unwrap_scalar(value: Any) -> Any:
    """Return the native Python equivalent of a numpy scalar or 0-d array.

    Any other value is returned unchanged.
    """
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray) and value.ndim == 0:
        return value.item()
    return value
