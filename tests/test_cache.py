"""Unit tests for ParseCache.

Tests cover:
- Cache hits (cached texts bypass the parser on the second parse() call)
- Parse failures are never cached
- LRU eviction (silent eviction at max_size; evicted texts re-parse on next call)
- Instance isolation (separate ParseCache instances do not share state)
- Properties (max_size and curr_size return correct values)
"""

from __future__ import annotations

import logging

import pytest

import json_path_compare.cache as cache_module
from json_path_compare.cache import ParseCache
from json_path_compare.path import JsonPath, PathParseError, parse_path

# ---------------------------------------------------------------------------
# Spy helper
# ---------------------------------------------------------------------------


@pytest.fixture
def parse_log(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Replace the parser used by the cache with a spy that records each text.

    The spy delegates to the real parser so results are unchanged.
    """
    call_log: list[str] = []

    def spy_parse(path: str) -> JsonPath:
        call_log.append(path)
        return parse_path(path)

    monkeypatch.setattr(cache_module, "parse_path", spy_parse)
    return call_log


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestCachedTextsNotReParsed:
    def test_no_parser_call_on_second_parse(self, parse_log: list[str]) -> None:
        cache = ParseCache()
        first = cache.parse("$.a[0]")
        second = cache.parse("$.a[0]")

        assert parse_log == ["$.a[0]"]
        assert second is first

    def test_distinct_texts_are_parsed_separately(self, parse_log: list[str]) -> None:
        cache = ParseCache()
        cache.parse("$.a")
        cache.parse("a")
        assert parse_log == ["$.a", "a"]
        assert cache.curr_size == 2


class TestFailuresNotCached:
    def test_malformed_text_raises_every_time(self, parse_log: list[str]) -> None:
        cache = ParseCache()
        for _ in range(2):
            with pytest.raises(PathParseError):
                cache.parse("$.b[")
        assert parse_log == ["$.b[", "$.b["]
        assert cache.curr_size == 0
        assert "$.b[" not in cache


class TestLRUEviction:
    def test_least_recently_used_is_evicted(self, parse_log: list[str]) -> None:
        cache = ParseCache(max_size=2)
        cache.parse("a")
        cache.parse("b")
        cache.parse("a")  # "a" is now most recently used
        cache.parse("c")  # evicts "b"

        assert cache.curr_size == 2
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache

        parse_log.clear()
        cache.parse("b")
        assert parse_log == ["b"]

    def test_clear_drops_every_entry(self) -> None:
        cache = ParseCache()
        cache.parse("$")
        cache.clear()
        assert cache.curr_size == 0


class TestInstanceIsolation:
    def test_separate_instances(self, parse_log: list[str]) -> None:
        first = ParseCache()
        second = ParseCache()
        first.parse("$.x")
        second.parse("$.x")
        assert parse_log == ["$.x", "$.x"]


class TestProperties:
    def test_default_max_size(self) -> None:
        assert ParseCache().max_size == 512

    def test_custom_max_size(self) -> None:
        assert ParseCache(max_size=3).max_size == 3

    def test_curr_size_starts_empty(self) -> None:
        assert ParseCache().curr_size == 0

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_max_size_must_be_positive(self, max_size: int) -> None:
        with pytest.raises(ValueError, match="max_size must be >= 1"):
            ParseCache(max_size=max_size)


class TestLogging:
    def test_hits_and_misses_are_logged_at_debug(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        cache = ParseCache()
        with caplog.at_level(logging.DEBUG, logger="json_path_compare.cache"):
            cache.parse("$.a")
            cache.parse("$.a")
        messages = [record.getMessage() for record in caplog.records]
        assert messages == ["Parse cache miss for '$.a'", "Parse cache hit for '$.a'"]
