"""Path-expression parser for the SQLite JSON-path dialect.

Parsing runs in two phases, both independent of any tree value:

1. ``tokenize`` splits the text into position-tagged tokens.
2. ``parse_path`` checks the token sequence against the grammar and builds
   a ``JsonPath``.

Grammar::

    path       := "$" tail | root_index | field tail
    tail       := ("." field | index)*
    field      := identifier                ; one or more word characters
    index      := "[" index_body "]"
    index_body := integer | "#-" integer
    root_index := integer                   ; the whole path is a bare integer
    integer    := "0" | [1-9][0-9]*

No whitespace is allowed anywhere.  ``#-0``, a lone ``#``, leading zeros and
signed integers are rejected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import NoReturn

from json_path_compare.path.errors import PathParseError
from json_path_compare.path.json_path import JsonPath
from json_path_compare.path.steps import (
    FieldStep,
    Forward,
    FromEnd,
    IndexSpec,
    IndexStep,
    RootStep,
    Step,
)

__all__ = ["Token", "TokenKind", "parse_path", "tokenize"]

# One alternative per token kind; group names are TokenKind values
_TOKEN = re.compile(
    r"(?P<root>\$)|(?P<dot>\.)|(?P<open>\[)|(?P<close>\])"
    r"|(?P<from_end>#-)|(?P<word>\w+)"
)

_INTEGER = re.compile(r"0|[1-9][0-9]*")
_DIGITS = re.compile(r"[0-9]+")


class TokenKind(StrEnum):
    """Lexical token kinds of the path language."""

    ROOT = auto()
    DOT = auto()
    OPEN = auto()
    CLOSE = auto()
    FROM_END = auto()
    WORD = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical token and the offset where it starts in the path text."""

    kind: TokenKind
    text: str
    position: int


def _is_digits(token: Token) -> bool:
    return token.kind == TokenKind.WORD and _DIGITS.fullmatch(token.text) is not None


def tokenize(path: str) -> list[Token]:
    """Split ``path`` into tokens.

    Raises:
        PathParseError: On any character that cannot start a token
            (whitespace included).
    """
    tokens: list[Token] = []
    position = 0
    while position < len(path):
        match = _TOKEN.match(path, position)
        if match is None:
            reason = f"unexpected character {path[position]!r}"
            raise PathParseError(path, position, reason)
        kind = TokenKind(match.lastgroup)
        tokens.append(Token(kind, match.group(), position))
        position = match.end()
    return tokens


def parse_path(path: str) -> JsonPath:
    """Parse a path expression into a ``JsonPath``.

    Args:
        path: Path text such as ``"$"``, ``"$.a.b[0]"``, ``"a[#-1]"`` or ``"2"``.

    Returns:
        The parsed ``JsonPath``.

    Raises:
        PathParseError: If ``path`` does not follow the grammar.
    """
    return _Parser(path, tokenize(path)).parse()


class _Parser:
    """Recursive-descent parser over a token list (one instance per call)."""

    def __init__(self, path: str, tokens: list[Token]) -> None:
        self._path = path
        self._tokens = tokens
        self._index = 0

    def parse(self) -> JsonPath:
        first = self._next()
        if first is None:
            self._fail(0, "empty path")

        steps: list[Step]
        base_name: str | None = None
        if first.kind == TokenKind.ROOT:
            steps = [RootStep()]
        elif self._peek() is None and _is_digits(first):
            # the whole path is a bare integer: index into a root array
            return JsonPath((IndexStep(Forward(self._integer(first))),))
        elif first.kind == TokenKind.WORD:
            steps = [FieldStep(first.text)]
            base_name = first.text
        else:
            self._fail(first.position, "expected '$', a field name or an array index")

        steps.extend(self._tail(base_name))
        return JsonPath(tuple(steps))

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _tail(self, base_name: str | None) -> list[Step]:
        """Parse ``("." field | index)*`` up to the end of the input."""
        steps: list[Step] = []
        while (token := self._next()) is not None:
            if token.kind == TokenKind.DOT:
                name = self._field(token)
                steps.append(FieldStep(name))
                base_name = name
            elif token.kind == TokenKind.OPEN:
                steps.append(IndexStep(self._index_body(token), base_name))
                base_name = None
            else:
                self._fail(token.position, "expected '.' or '['")
        return steps

    def _field(self, dot: Token) -> str:
        token = self._next()
        if token is None or token.kind != TokenKind.WORD:
            position = dot.position + 1 if token is None else token.position
            self._fail(position, "expected a field name after '.'")
        return token.text

    def _index_body(self, open_bracket: Token) -> IndexSpec:
        token = self._next()
        if token is None:
            self._fail(len(self._path), "unterminated '['")

        spec: IndexSpec
        if token.kind == TokenKind.FROM_END:
            number = self._next()
            if number is None or number.kind != TokenKind.WORD:
                position = len(self._path) if number is None else number.position
                self._fail(position, "expected an integer after '#-'")
            offset = self._integer(number)
            if offset == 0:
                self._fail(number.position, "offset after '#-' must be at least 1")
            spec = FromEnd(offset)
        elif token.kind == TokenKind.WORD:
            spec = Forward(self._integer(token))
        else:
            self._fail(token.position, "expected an integer or '#-' after '['")

        close = self._next()
        if close is None:
            reason = f"unterminated '[' opened at position {open_bracket.position}"
            self._fail(len(self._path), reason)
        if close.kind != TokenKind.CLOSE:
            self._fail(close.position, "expected ']'")
        return spec

    def _integer(self, token: Token) -> int:
        if _INTEGER.fullmatch(token.text):
            return int(token.text)
        if _is_digits(token):
            reason = f"leading zeros are not allowed in {token.text!r}"
            self._fail(token.position, reason)
        self._fail(token.position, f"expected an integer, got {token.text!r}")

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------

    def _next(self) -> Token | None:
        if self._index >= len(self._tokens):
            return None
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _peek(self) -> Token | None:
        if self._index >= len(self._tokens):
            return None
        return self._tokens[self._index]

    def _fail(self, position: int, reason: str) -> NoReturn:
        raise PathParseError(self._path, position, reason)
