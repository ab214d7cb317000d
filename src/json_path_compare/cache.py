"""ParseCache: LRU cache of parsed path expressions.

Maps path text to its parsed ``JsonPath``.  Cached texts bypass the parser
on subsequent ``parse()`` calls.  LRU eviction occurs silently when
``max_size`` is exceeded — no error is raised.  Texts that fail to parse are
never cached, so every call with a malformed path raises.

Each ``ParseCache`` instance maintains its own ``LRUCache`` — there is no
class-level shared state, so two separate instances never interfere with
each other.

Example::

    from json_path_compare.cache import ParseCache

    cache = ParseCache(max_size=128)
    first = cache.parse("$.a[0]")     # parsed
    again = cache.parse("$.a[0]")     # served from memory
    assert first is again
"""

from __future__ import annotations

import logging

from cachetools import LRUCache

from json_path_compare.path.json_path import JsonPath
from json_path_compare.path.parser import parse_path

__all__ = ["ParseCache"]

logger = logging.getLogger(__name__)


class ParseCache:
    """LRU-backed memo of ``parse_path``.

    Args:
        max_size: Maximum number of parsed paths to hold in memory.
            Defaults to 512.  When exceeded, the least-recently-used entry
            is silently evicted.
    """

    def __init__(self, max_size: int = 512) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[str, JsonPath] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def __contains__(self, path: object) -> bool:
        return path in self._cache

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse(self, path: str) -> JsonPath:
        """Return the parsed form of ``path``; only uncached texts hit the parser.

        Raises:
            PathParseError: If ``path`` is malformed.
        """
        cached = self._cache.get(path)
        if cached is not None:
            logger.debug("Parse cache hit for %r", path)
            return cached

        logger.debug("Parse cache miss for %r", path)
        parsed = parse_path(path)
        self._cache[path] = parsed
        return parsed

    def clear(self) -> None:
        """Drop every cached entry."""
        self._cache.clear()
