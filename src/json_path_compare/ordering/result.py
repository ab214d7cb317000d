"""Ordering StrEnum: the four-valued result of a value comparison."""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = ["Ordering"]


class Ordering(StrEnum):
    """Result of comparing two tree values.

    INCOMPARABLE is a normal result, not an error: two objects never order
    against each other, and neither do arrays containing them at the first
    position where they differ.
    """

    LESS = auto()
    EQUAL = auto()
    GREATER = auto()
    INCOMPARABLE = auto()

    @classmethod
    def from_sign(cls, sign: int) -> Ordering:
        """Map a negative / zero / positive integer onto LESS / EQUAL / GREATER."""
        if sign < 0:
            return cls.LESS
        if sign > 0:
            return cls.GREATER
        return cls.EQUAL

    def reverse(self) -> Ordering:
        """Return the ordering seen from the other operand."""
        if self is Ordering.LESS:
            return Ordering.GREATER
        if self is Ordering.GREATER:
            return Ordering.LESS
        return self
