"""
  Theta Lexer

- Streaming, lazy tokenization: tokens are produced one at a time as the
  parser pulls them, so an error late in the source only surfaces once the
  parser reaches it.
- Tokens are (kind, value) pairs:

    - (        -> ("lparen", "(")
    - )        -> ("rparen", ")")
    - 42       -> ("integer", 42)
    - "text"   -> ("string", "text")   raw text, no escape processing
    - name     -> ("symbol", "name")   includes operators such as + - <
"""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Optional

from theta.errors import ThetaTokenError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"[^"]*")'  # "..." closed by the first following quote
    r'|(?P<unterminated>")'  # a quote with no partner
    r"|(?P<integer>[0-9]+)(?P<trailing>[^\s()]*)"  # digit run; trailing chars are malformed
    r"|(?P<symbol>[^\s()]+)"  # fallback: identifiers
)

TOKEN_KINDS = ("lparen", "rparen", "string", "unterminated", "integer", "symbol")

WHITESPACE_RE = re.compile(r"\s*")


class Token(NamedTuple):
    kind: str
    value: object


def position(source: str, pos: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of offset `pos` in `source`."""
    line = source.count("\n", 0, pos) + 1
    column = pos - (source.rfind("\n", 0, pos) + 1) + 1
    return line, column


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Token(kind, value) pairs until the input is exhausted."""
    pos = 0
    n = len(source)

    while True:
        pos = WHITESPACE_RE.match(source, pos).end()
        if pos >= n:
            return

        m = TOKEN_RE.match(source, pos)
        kind = next(nm for nm in TOKEN_KINDS if m.group(nm) is not None)

        if kind == "unterminated":
            raise ThetaTokenError("Unterminated string literal", *position(source, pos))

        if kind == "string":
            yield Token("string", m.group("string")[1:-1])
        elif kind == "integer":
            digits = m.group("integer")
            if m.group("trailing"):
                raise ThetaTokenError(
                    f"Malformed integer literal {digits + m.group('trailing')!r}",
                    *position(source, pos),
                )
            value = int(digits)
            if value > INT64_MAX:
                raise ThetaTokenError(
                    f"Integer literal {digits} does not fit in 64 bits",
                    *position(source, pos),
                )
            yield Token("integer", value)
        else:
            yield Token(kind, m.group(kind))
        pos = m.end()


def tokenize(source: str) -> list[Token]:
    """Eagerly lex the whole of `source`; convenient for debugging."""
    return list(lex(source))


class TokenStream:
    """Single-token lookahead over a lazy token iterator.

    `peek` never consumes; `advance` returns the token `peek` would have
    shown and moves past it. Both return None once the input is exhausted,
    and both raise ThetaTokenError when the next token cannot be formed.
    """

    __slots__ = ("tokens", "buffer")

    def __init__(self, token_iter: Iterator[Token]):
        self.tokens = iter(token_iter)
        self.buffer: Optional[Token] = None

    def peek(self) -> Optional[Token]:
        if self.buffer is None:
            self.buffer = next(self.tokens, None)
        return self.buffer

    def advance(self) -> Optional[Token]:
        if self.buffer is not None:
            tok, self.buffer = self.buffer, None
            return tok
        return next(self.tokens, None)
