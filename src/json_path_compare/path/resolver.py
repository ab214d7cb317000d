"""PathResolver: reusable path resolution with a per-instance parse cache.

Repeatedly resolving the same path text against many documents is the common
case (e.g. extracting one field from every row of a dataset).  The resolver
parses each distinct path once and keeps the ``JsonPath`` in an LRU cache.

Two separate ``PathResolver`` instances never share cache state.  The cache
is not locked: give each thread its own resolver, or use the stateless
``json_path_compare.resolve`` function.
"""

from __future__ import annotations

import logging
from typing import Any

from json_path_compare.cache import ParseCache
from json_path_compare.path.errors import PathResolutionError
from json_path_compare.path.json_path import JsonPath

__all__ = ["PathResolver"]

logger = logging.getLogger(__name__)


class PathResolver:
    """Resolves path expressions against tree values, caching parsed paths.

    Example::

        from json_path_compare.path import PathResolver

        resolver = PathResolver()
        for row in rows:
            total += resolver.resolve(row, "$.amount")
    """

    def __init__(self, max_cache_size: int = 512) -> None:
        """Initialise the resolver.

        Args:
            max_cache_size: Maximum number of parsed paths held in the
                per-instance LRU cache.  When exceeded, the least-recently-used
                entry is silently evicted.  Defaults to 512.
        """
        self._cache = ParseCache(max_size=max_cache_size)

    @property
    def cache(self) -> ParseCache:
        """The parse cache of this resolver."""
        return self._cache

    def parse(self, path: str) -> JsonPath:
        """Parse ``path``, serving repeated texts from the cache.

        Raises:
            PathParseError: If ``path`` is malformed.  Failures are not cached.
        """
        return self._cache.parse(path)

    def resolve(self, root: Any, path: str) -> Any:
        """Return the value addressed by ``path`` inside ``root``.

        Args:
            root: The tree value to navigate.
            path: Path text in the SQLite JSON-path dialect.

        Returns:
            The object stored in the tree (not a copy).

        Raises:
            PathParseError: ``path`` is malformed.
            TypeMismatchError: A step met a value of the wrong kind.
            KeyNotFoundError: A field step's key is absent.
            IndexOutOfRangeError: An index step addressed a missing position.
        """
        parsed = self.parse(path)
        try:
            return parsed.find(root)
        except PathResolutionError as exc:
            logger.debug(
                "Resolution of %r failed at step %d: %s", path, exc.step_index, exc
            )
            raise

    def exists(self, root: Any, path: str) -> bool:
        """Return True if ``path`` resolves inside ``root``.

        Raises:
            PathParseError: ``path`` is malformed (never reported as False).
        """
        return self.parse(path).exists(root)
