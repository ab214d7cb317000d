"""Step dataclasses: the navigation units of a parsed path expression.

A parsed path is a sequence of steps:

- ``RootStep``  -> ``$``        : the whole value
- ``FieldStep`` -> ``.name``    : a key of an object
- ``IndexStep`` -> ``[n]``      : a position in an array, counted from the start
                   ``[#-k]``    : a position counted back from the array length

Steps are immutable and own no reference into any tree.  ``str(step)``
renders the step back to its path syntax.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "FieldStep",
    "Forward",
    "FromEnd",
    "IndexSpec",
    "IndexStep",
    "RootStep",
    "Step",
]


@dataclass(frozen=True, slots=True)
class Forward:
    """Array position ``index`` counted from the first element (zero-based)."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            msg = f"Forward index must be >= 0, got {self.index}"
            raise ValueError(msg)

    def position(self, length: int) -> int:
        return self.index

    def __str__(self) -> str:
        return str(self.index)


@dataclass(frozen=True, slots=True)
class FromEnd:
    """Array position ``length - offset``; ``FromEnd(1)`` is the last element."""

    offset: int

    def __post_init__(self) -> None:
        if self.offset < 1:
            msg = f"FromEnd offset must be >= 1, got {self.offset}"
            raise ValueError(msg)

    def position(self, length: int) -> int:
        return length - self.offset

    def __str__(self) -> str:
        return f"#-{self.offset}"


IndexSpec = Forward | FromEnd


@dataclass(frozen=True, slots=True)
class RootStep:
    """The whole value (``$``).  Only ever the first step of a path."""

    def __str__(self) -> str:
        return "$"


@dataclass(frozen=True, slots=True)
class FieldStep:
    """Descend into an object by key ``name``."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            msg = "FieldStep name must not be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Descend into an array at ``position``.

    Attributes:
        position:  Where to index, from the start or from the end.
        base_name: The field token the bracket follows (``b`` in ``b[1]``);
                   None for a bare leading index or a chained bracket.
                   Informational only: the preceding ``FieldStep`` does
                   the descent into ``base_name``.
    """

    position: IndexSpec
    base_name: str | None = None

    def __str__(self) -> str:
        return f"[{self.position}]"


Step = RootStep | FieldStep | IndexStep
