"""Path assertions for pytest: the ``assert_json_path`` fixture.

Loaded through the ``json_path_compare`` entry in the ``pytest11`` group, so
any test session that has the package installed can request the fixture.
A failed assertion reports the path, the expected value and either the
resolution error or the value actually found.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_path_compare import PathError, resolve


@pytest.fixture(scope="session")
def assert_json_path() -> Any:
    """Fixture that returns a callable path-value asserter.

    The fixture is session-scoped because the returned callable is stateless
    (delegates to resolve() which parses the path on every call).

    Usage in tests::

        def test_total(assert_json_path):
            assert_json_path({"order": {"total": 12}}, "$.order.total", 12)

        def test_missing(assert_json_path):
            with pytest.raises(AssertionError, match=r"does not resolve"):
                assert_json_path({}, "$.order", 12)

    Returns:
        A callable ``_assert(document, path, expected) -> None`` that raises
        ``AssertionError`` when the path does not resolve or the resolved
        value differs from ``expected``.
    """

    def _assert(document: Any, path: str, expected: Any) -> None:
        """Assert that ``path`` resolves inside ``document`` to ``expected``.

        Args:
            document: The JSON value produced by the code under test.
            path:     Path text in the SQLite JSON-path dialect.
            expected: The value ``path`` should address (compared with ``==``).

        Raises:
            AssertionError: When the path is malformed, does not resolve, or
                resolves to a different value.
        """
        try:
            actual = resolve(document, path)
        except PathError as exc:
            raise AssertionError(
                f"JSON path {path!r} does not resolve: {exc}\n"
                f"  document: {document}\n"
                f"  expected: {expected}"
            ) from exc
        if actual != expected:
            raise AssertionError(
                f"JSON path {path!r} resolved to an unexpected value\n"
                f"  actual:   {actual}\n"
                f"  expected: {expected}"
            )

    return _assert
