"""JsonPath: a parsed path expression and the walk that evaluates it.

Evaluation applies each step to the value produced by the previous one,
starting from the root.  The value returned is the very object stored in the
tree (no copy is made), so it stays valid only as long as the tree does.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from json_path_compare.path.errors import (
    IndexOutOfRangeError,
    KeyNotFoundError,
    PathResolutionError,
    TypeMismatchError,
)
from json_path_compare.path.steps import FieldStep, IndexStep, RootStep, Step
from json_path_compare.values import ValueType, value_type

__all__ = ["JsonPath"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class JsonPath:
    """An immutable, hashable sequence of navigation steps.

    Build one with ``parse_path()``; ``str()`` renders it back to canonical
    path text, so ``str(parse_path(text)) == text`` for canonical input.

    Invariants (checked on construction):
        - there is at least one step;
        - ``RootStep`` only appears first;
        - a bare leading ``IndexStep`` (no ``$``) is the only step.

    Example::

        from json_path_compare.path import parse_path

        path = parse_path("$.b[#-1]")
        path.find({"a": "example", "b": [0, 1, 2]})   # 2
    """

    steps: tuple[Step, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            msg = "JsonPath needs at least one step"
            raise ValueError(msg)
        if any(isinstance(step, RootStep) for step in self.steps[1:]):
            msg = "RootStep may only be the first step of a JsonPath"
            raise ValueError(msg)
        if isinstance(self.steps[0], IndexStep) and len(self.steps) > 1:
            msg = "A bare leading index must be the only step of a JsonPath"
            raise ValueError(msg)

    def __str__(self) -> str:
        first = self.steps[0]
        if isinstance(first, IndexStep):
            return str(first.position)
        text = "".join(str(step) for step in self.steps)
        if isinstance(first, FieldStep):
            # implicit field chain: no "$" and no leading "."
            return text[1:]
        return text

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def last(self) -> Step:
        """Return the final step of the path."""
        return self.steps[-1]

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def find(self, root: Any) -> Any:
        """Walk ``root`` along this path and return the addressed value.

        Args:
            root: The tree value to navigate.

        Returns:
            The object stored in the tree at this path (not a copy).

        Raises:
            TypeMismatchError: A step met a value of the wrong kind.
            KeyNotFoundError: A field step's key is absent from the object.
            IndexOutOfRangeError: An index step addressed a missing position.
            TypeError: A value on the way is not a valid JSON type.
        """
        current = root
        for step_index, step in enumerate(self.steps):
            if isinstance(step, RootStep):
                continue
            if isinstance(step, FieldStep):
                current = _descend_field(current, self, step, step_index)
            else:
                current = _descend_index(current, self, step, step_index)
        return current

    def exists(self, root: Any) -> bool:
        """Return True if this path resolves against ``root``."""
        try:
            self.find(root)
        except PathResolutionError as exc:
            logger.debug("Path %s does not resolve: %s", self, exc)
            return False
        return True


def _descend_field(
    current: Any, path: JsonPath, step: FieldStep, step_index: int
) -> Any:
    kind = value_type(current)
    if kind != ValueType.OBJECT:
        raise TypeMismatchError(str(path), step, step_index, ValueType.OBJECT, kind)
    # Membership first: subscripting a defaultdict or Counter invents a value
    if step.name not in current:
        raise KeyNotFoundError(str(path), step, step_index)
    return current[step.name]


def _descend_index(
    current: Any, path: JsonPath, step: IndexStep, step_index: int
) -> Any:
    kind = value_type(current)
    if kind != ValueType.ARRAY:
        raise TypeMismatchError(str(path), step, step_index, ValueType.ARRAY, kind)
    length = len(current)
    position = step.position.position(length)
    if not 0 <= position < length:
        raise IndexOutOfRangeError(str(path), step, step_index, position, length)
    return current[position]
