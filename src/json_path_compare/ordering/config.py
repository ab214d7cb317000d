"""CompareConfig and StringOrder for value comparison configuration.

CompareConfig is a frozen (immutable) dataclass holding the comparison
options.  StringOrder selects how two strings are ordered: by raw code point
(the default) or case-insensitively with a code-point tie-break.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

__all__ = ["CompareConfig", "StringOrder"]


class StringOrder(StrEnum):
    """How to order two JSON strings.

    - CODEPOINT: Lexicographic over Unicode code points (same as UTF-8 bytes).
    - CASEFOLD:  Lexicographic over ``str.casefold()``; ties broken by code point.
    """

    CODEPOINT = auto()
    CASEFOLD = auto()


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Immutable configuration for the value comparator.

    Attributes:
        string_order: How strings are ordered against each other.
        coerce_scalars: When True, scalars of different kinds are cast the way
            SQL JSON operators do before falling back to rank order: a bool
            compares numerically against a number (``True == 1``), and a
            string that parses as a finite float compares numerically against
            a number.  Default False.
    """

    string_order: StringOrder = StringOrder.CODEPOINT
    coerce_scalars: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.string_order, StringOrder):
            msg = f"string_order must be a StringOrder, got {self.string_order!r}"
            raise TypeError(msg)
        if not isinstance(self.coerce_scalars, bool):
            msg = f"coerce_scalars must be a bool, got {self.coerce_scalars!r}"
            raise TypeError(msg)
