"""Token types and a cursor over a token sequence."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from ccom.errors import SourceError


class TokenKind(enum.Enum):
    """Categories of lexical tokens."""

    RESERVED = enum.auto()
    NUMBER = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    """A lexical token: its kind, source text, offset and numeric value."""

    kind: TokenKind
    text: str
    position: int
    value: int = 0

    @property
    def length(self) -> int:
        return len(self.text)


class TokenStream:
    """Sequential reader over tokens, reporting errors against the source."""

    def __init__(self, tokens: Iterable[Token], source: str) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].kind is not TokenKind.EOF:
            self._tokens.append(Token(TokenKind.EOF, "", len(source)))
        self._source = source
        self._index = 0

    @property
    def source(self) -> str:
        return self._source

    def current(self) -> Token:
        """Return the token under the cursor."""
        return self._tokens[self._index]

    def _advance(self) -> None:
        if self._index < len(self._tokens) - 1:
            self._index += 1

    def _matches(self, op: str) -> bool:
        token = self.current()
        return token.kind is TokenKind.RESERVED and token.text == op

    def consume(self, op: str) -> bool:
        """Advance past ``op`` if it is the current token."""
        if not self._matches(op):
            return False
        self._advance()
        return True

    def expect(self, op: str) -> None:
        """Advance past ``op``, raising SourceError if it is not current."""
        if not self._matches(op):
            raise SourceError(self._source, self.current().position, f'excepted "{op}"')
        self._advance()

    def expect_number(self) -> int:
        """Return the current number token's value and advance past it."""
        token = self.current()
        if token.kind is not TokenKind.NUMBER:
            raise SourceError(self._source, token.position, "excepted a number.")
        self._advance()
        return token.value

    def at_eof(self) -> bool:
        """Whether the cursor sits on the end-of-input token."""
        return self.current().kind is TokenKind.EOF