"""Unit tests for the public API functions: compare, resolve, sort_values, etc."""

from __future__ import annotations

import pytest

from json_path_compare import (
    CompareConfig,
    IndexOutOfRangeError,
    Ordering,
    PathParseError,
    StringOrder,
    TypeMismatchError,
    compare,
    is_equal,
    is_less,
    parse_path,
    resolve,
    sort_values,
)


class TestCompare:
    def test_array_lexicographic_law(self) -> None:
        assert compare([1, 2], [1, 2, 3]) == Ordering.LESS
        assert compare([1, 2, 3], [1, 2]) == Ordering.GREATER
        assert compare([1, 2], [1, 2]) == Ordering.EQUAL

    def test_object_incomparability(self) -> None:
        assert compare({"a": 1}, {"a": 1}) == Ordering.INCOMPARABLE

    def test_config_passthrough(self) -> None:
        config = CompareConfig(string_order=StringOrder.CASEFOLD)
        assert compare("B", "a") == Ordering.LESS
        assert compare("B", "a", config=config) == Ordering.GREATER

    def test_no_global_state_between_calls(self) -> None:
        coercing = CompareConfig(coerce_scalars=True)
        assert compare(0, False, config=coercing) == Ordering.EQUAL
        assert compare(0, False) == Ordering.GREATER


class TestPredicates:
    def test_is_less(self) -> None:
        assert is_less(None, 0)
        assert not is_less(0, None)
        assert not is_less({}, {})

    def test_is_equal(self) -> None:
        assert is_equal([1, "a"], (1, "a"))
        assert not is_equal({}, {})
        assert is_equal(1, True, config=CompareConfig(coerce_scalars=True))


class TestSortValues:
    def test_mixed_kinds_sort_by_rank(self) -> None:
        values = [{"k": 1}, "b", [2], 3, None, False, "a", [1, 5], 2.5]
        assert sort_values(values) == [
            None,
            False,
            2.5,
            3,
            "a",
            "b",
            [1, 5],
            [2],
            {"k": 1},
        ]

    def test_sort_is_stable(self) -> None:
        one_int, one_float = 1, 1.0
        result = sort_values([one_float, 0, one_int])
        assert result == [0, 1, 1]
        assert type(result[1]) is float
        assert type(result[2]) is int

    def test_accepts_any_iterable(self) -> None:
        assert sort_values(iter([3, 1, 2])) == [1, 2, 3]

    def test_two_objects_cannot_be_sorted(self) -> None:
        with pytest.raises(TypeError, match="Cannot order"):
            sort_values([{"a": 1}, {"b": 2}])

    def test_sorting_does_not_mutate_input(self) -> None:
        values = [3, 1, 2]
        sort_values(values)
        assert values == [3, 1, 2]


class TestResolve:
    DOC = {"a": "example", "b": [0, 1, 2]}

    def test_root_returns_value(self) -> None:
        assert resolve(self.DOC, "$") is self.DOC

    def test_field(self) -> None:
        assert resolve(self.DOC, "$.a") == "example"

    def test_index(self) -> None:
        assert resolve(self.DOC, "$.b[1]") == 1

    def test_from_end_index_is_last_element(self) -> None:
        assert resolve(self.DOC, "$.b[#-1]") == 2

    def test_implicit_root(self) -> None:
        assert resolve(self.DOC, "b[0]") == 0

    def test_bare_root_array_index(self) -> None:
        assert resolve([0, 2], "1") == 2

    def test_accepts_parsed_path(self) -> None:
        assert resolve(self.DOC, parse_path("$.b[2]")) == 2

    def test_out_of_range(self) -> None:
        with pytest.raises(IndexOutOfRangeError):
            resolve({"b": [0, 1, 2]}, "$.b[5]")

    def test_type_mismatch(self) -> None:
        with pytest.raises(TypeMismatchError):
            resolve({"a": 1}, "$.a[0]")

    def test_malformed_path(self) -> None:
        with pytest.raises(PathParseError):
            resolve(self.DOC, "$.b[")
