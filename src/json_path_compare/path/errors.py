"""Exception hierarchy for path parsing and resolution.

Parse errors describe malformed path text and are raised before any tree is
touched.  Resolution errors are data-dependent: they name the step that
failed and what it expected, so callers can build their own diagnostics.
Each resolution error also derives from the matching built-in exception
(``TypeError``, ``KeyError``, ``IndexError``) so generic handlers still work.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_path_compare.path.steps import FieldStep, IndexStep, Step
    from json_path_compare.values import ValueType

__all__ = [
    "IndexOutOfRangeError",
    "KeyNotFoundError",
    "PathError",
    "PathParseError",
    "PathResolutionError",
    "TypeMismatchError",
]


class PathError(Exception):
    """Base class for every error raised while parsing or resolving a path."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class PathParseError(PathError, ValueError):
    """The path text does not follow the path grammar.

    Attributes:
        position: Zero-based offset into ``path`` where parsing failed.
        reason:   Short description of what was expected.
    """

    def __init__(self, path: str, position: int, reason: str) -> None:
        message = f"Invalid path {path!r} at position {position}: {reason}"
        super().__init__(message, path)
        self.position = position
        self.reason = reason


class PathResolutionError(PathError, LookupError):
    """A well-formed path does not resolve against the given tree.

    Attributes:
        step:       The step that failed.
        step_index: Zero-based index of ``step`` in the parsed path.
    """

    def __init__(self, message: str, path: str, step: Step, step_index: int) -> None:
        super().__init__(message, path)
        self.step = step
        self.step_index = step_index


class TypeMismatchError(PathResolutionError, TypeError):
    """A step met a value of the wrong kind (e.g. indexing into a number)."""

    def __init__(
        self,
        path: str,
        step: Step,
        step_index: int,
        expected: ValueType,
        found: ValueType,
    ) -> None:
        message = (
            f"Step {step_index} ({step}) of path {path!r} expects "
            f"{expected.name.lower()} but found {found.name.lower()}"
        )
        super().__init__(message, path, step, step_index)
        self.expected = expected
        self.found = found


class KeyNotFoundError(PathResolutionError, KeyError):
    """A field step named a key the object does not have."""

    def __init__(self, path: str, step: FieldStep, step_index: int) -> None:
        message = f"Key {step.name!r} not found at step {step_index} of path {path!r}"
        super().__init__(message, path, step, step_index)
        self.key = step.name


class IndexOutOfRangeError(PathResolutionError, IndexError):
    """An index step addressed a position outside ``[0, length)``.

    Attributes:
        position: The computed position (negative for an oversized ``#-k``).
        length:   Length of the array that was indexed.
    """

    def __init__(
        self,
        path: str,
        step: IndexStep,
        step_index: int,
        position: int,
        length: int,
    ) -> None:
        message = (
            f"Index {step.position} (position {position}) out of range for array "
            f"of length {length} at step {step_index} of path {path!r}"
        )
        super().__init__(message, path, step, step_index)
        self.position = position
        self.length = length
