"""json-path-compare - value ordering and SQLite-dialect paths for JSON trees."""

from __future__ import annotations

import logging

from json_path_compare.api import (
    compare,
    is_equal,
    is_less,
    parse_path,
    resolve,
    sort_values,
)
from json_path_compare.ordering import (
    CompareConfig,
    OrderedValue,
    Ordering,
    StringOrder,
    ValueComparator,
)
from json_path_compare.path import (
    FieldStep,
    Forward,
    FromEnd,
    IndexOutOfRangeError,
    IndexStep,
    JsonPath,
    KeyNotFoundError,
    PathError,
    PathParseError,
    PathResolutionError,
    PathResolver,
    RootStep,
    TypeMismatchError,
)
from json_path_compare.values import ValueType, value_type

# Library logging: records go nowhere unless the host application configures them
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CompareConfig",
    "FieldStep",
    "Forward",
    "FromEnd",
    "IndexOutOfRangeError",
    "IndexStep",
    "JsonPath",
    "KeyNotFoundError",
    "OrderedValue",
    "Ordering",
    "PathError",
    "PathParseError",
    "PathResolutionError",
    "PathResolver",
    "RootStep",
    "StringOrder",
    "TypeMismatchError",
    "ValueComparator",
    "ValueType",
    "compare",
    "is_equal",
    "is_less",
    "parse_path",
    "resolve",
    "sort_values",
    "value_type",
]
