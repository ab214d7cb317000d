"""path subpackage — parse and evaluate SQLite-dialect JSON paths.

Re-exports the public API for the path module:
- parse_path / tokenize: path text -> JsonPath (a step sequence)
- JsonPath: parsed path; ``find`` walks a tree value
- RootStep, FieldStep, IndexStep, Forward, FromEnd: the step types
- PathResolver: reusable resolver with an LRU parse cache
- PathError and its subclasses: the error taxonomy
"""

from __future__ import annotations

from json_path_compare.path.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    PathError,
    PathParseError,
    PathResolutionError,
    TypeMismatchError,
)
from json_path_compare.path.json_path import JsonPath
from json_path_compare.path.parser import Token, TokenKind, parse_path, tokenize
from json_path_compare.path.resolver import PathResolver
from json_path_compare.path.steps import (
    FieldStep,
    Forward,
    FromEnd,
    IndexSpec,
    IndexStep,
    RootStep,
    Step,
)

__all__ = [
    "FieldStep",
    "Forward",
    "FromEnd",
    "IndexOutOfRangeError",
    "IndexSpec",
    "IndexStep",
    "JsonPath",
    "KeyNotFoundError",
    "PathError",
    "PathParseError",
    "PathResolutionError",
    "PathResolver",
    "RootStep",
    "Step",
    "Token",
    "TokenKind",
    "TypeMismatchError",
    "parse_path",
    "tokenize",
]
