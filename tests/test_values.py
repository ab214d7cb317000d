"""Tests for ValueType IntEnum and value classification.

Verifies:
- ValueType has exactly 6 members whose integer values are the rank contract
- value_type() maps every accepted Python type onto the right kind
- bool (and numpy.bool_) is classified BOOL, never NUMBER
- unsupported types raise TypeError
- unwrap_scalar() converts numpy scalars and 0-d arrays to native values
"""

from __future__ import annotations

from collections import OrderedDict
from decimal import Decimal
from fractions import Fraction
from types import MappingProxyType

import numpy as np
import pytest

from json_path_compare import values
from json_path_compare.values import ValueType, unwrap_scalar, value_type


class TestValueType:
    """Tests for the ValueType IntEnum."""

    def test_has_exactly_six_members(self) -> None:
        assert len(ValueType) == 6

    def test_rank_values_are_stable(self) -> None:
        """The integer values are a public contract and must never change."""
        assert ValueType.NULL == 0
        assert ValueType.BOOL == 1
        assert ValueType.NUMBER == 2
        assert ValueType.STRING == 3
        assert ValueType.ARRAY == 4
        assert ValueType.OBJECT == 5

    def test_members_are_totally_ordered_by_rank(self) -> None:
        assert sorted(ValueType) == list(ValueType)
        assert (
            ValueType.NULL
            < ValueType.BOOL
            < ValueType.NUMBER
            < ValueType.STRING
            < ValueType.ARRAY
            < ValueType.OBJECT
        )


class TestValueTypeClassification:
    """Tests for value_type() dispatch."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, ValueType.NULL),
            (True, ValueType.BOOL),
            (False, ValueType.BOOL),
            (0, ValueType.NUMBER),
            (-12, ValueType.NUMBER),
            (12.12, ValueType.NUMBER),
            (Decimal("1.5"), ValueType.NUMBER),
            (Fraction(1, 3), ValueType.NUMBER),
            ("", ValueType.STRING),
            ("text", ValueType.STRING),
            ([], ValueType.ARRAY),
            ([0, 1], ValueType.ARRAY),
            ((0, 1), ValueType.ARRAY),
            ({}, ValueType.OBJECT),
            ({"a": 1}, ValueType.OBJECT),
            (OrderedDict(a=1), ValueType.OBJECT),
            (MappingProxyType({"a": 1}), ValueType.OBJECT),
        ],
    )
    def test_native_values(self, value: object, expected: ValueType) -> None:
        assert value_type(value) == expected

    def test_bool_is_never_a_number(self) -> None:
        """bool subclasses int in Python; it must still classify as BOOL."""
        assert isinstance(True, int)
        assert value_type(True) == ValueType.BOOL

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (np.bool_(True), ValueType.BOOL),
            (np.int64(3), ValueType.NUMBER),
            (np.uint8(3), ValueType.NUMBER),
            (np.float32(1.5), ValueType.NUMBER),
            (np.float64(1.5), ValueType.NUMBER),
            (np.array([1, 2, 3]), ValueType.ARRAY),
            (np.zeros((2, 2)), ValueType.ARRAY),
            (np.array(7), ValueType.NUMBER),
        ],
    )
    def test_numpy_values(self, value: object, expected: ValueType) -> None:
        assert value_type(value) == expected

    @pytest.mark.parametrize(
        "value",
        [b"bytes", {1, 2}, object(), 1 + 2j, bytearray(b"x")],
    )
    def test_unsupported_type_raises(self, value: object) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            value_type(value)


class TestUnwrapScalar:
    """Tests for unwrap_scalar()."""

    def test_numpy_integer_becomes_int(self) -> None:
        result = unwrap_scalar(np.int32(5))
        assert result == 5
        assert type(result) is int

    def test_numpy_float_becomes_float(self) -> None:
        result = unwrap_scalar(np.float32(0.5))
        assert result == 0.5
        assert type(result) is float

    def test_zero_dim_array_becomes_scalar(self) -> None:
        assert unwrap_scalar(np.array(7)) == 7

    def test_native_values_pass_through(self) -> None:
        value = [1, 2]
        assert unwrap_scalar(value) is value
        assert unwrap_scalar(3) == 3


class TestModuleExports:
    def test_exports_only_classification_api(self) -> None:
        assert sorted(values.__all__) == ["ValueType", "unwrap_scalar", "value_type"]
        assert not hasattr(values, "JsonValue")
