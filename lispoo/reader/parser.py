"""
  Recursive-descent parser for lispoo.

  expr := atom | '(' expr* ')'

  Output uses plain Python values:
    - integers -> int
    - decimals with one '.' -> float
    - lists -> Python list
    - everything else -> Symbol (operators included)
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence

from lispoo import SExpression
from lispoo.errors import LispooSyntaxError
from lispoo.reader.lexer import tokenize
from lispoo.types.symbol import Symbol

logger = logging.getLogger("lispoo.reader")


def _is_numeric_token(token: str) -> bool:
    if token[0].isdigit():
        return True
    return len(token) > 1 and token[0] == "-" and token[1].isdigit()


def parse_atom(token: str) -> SExpression:
    """Classify a single non-parenthesis token."""
    if not _is_numeric_token(token):
        return Symbol(token)

    is_float = False
    for ch in token[1:]:
        if ch == ".":
            if is_float:
                raise LispooSyntaxError(f"Malformed number {token!r}: more than one '.'")
            is_float = True
        elif not ch.isdigit():
            raise LispooSyntaxError(f"Malformed number {token!r}")

    # str.isdigit accepts non-ASCII digits that int()/float() may reject
    try:
        return float(token) if is_float else int(token)
    except ValueError as exc:
        raise LispooSyntaxError(f"Malformed number {token!r}") from exc


class TokenStream:
    """A token sequence plus the shared cursor the parser advances."""

    def __init__(self, tokens: Sequence[str], cursor: int = 0):
        self.tokens: list[str] = list(tokens)
        self.cursor: int = cursor

    def peek(self) -> Optional[str]:
        if self.cursor >= len(self.tokens):
            return None
        return self.tokens[self.cursor]

    def advance(self) -> str:
        token = self.peek()
        if token is None:
            raise LispooSyntaxError("Unexpected end of input")
        self.cursor += 1
        return token

    def at_end(self) -> bool:
        return self.cursor >= len(self.tokens)

    def parse_expr(self) -> SExpression:
        token = self.advance()

        if token == "(":
            start = self.cursor - 1
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise LispooSyntaxError(f"Unmatched '(' at token {start}")
                if nxt == ")":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if token == ")":
            raise LispooSyntaxError(f"Unexpected ')' at token {self.cursor - 1}")

        return parse_atom(token)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Sequence[str] | TokenStream, cursor: int = 0) -> SExpression:
    """Parse one expression from `tokens`, starting at `cursor`."""
    stream = tokens if isinstance(tokens, TokenStream) else TokenStream(tokens, cursor)
    return stream.parse_expr()


def parse_all(tokens: Sequence[str]) -> list[SExpression]:
    """Parse every top-level expression in `tokens`."""
    return list(TokenStream(tokens).parse_all())


def read(source: str) -> list[SExpression]:
    """Tokenize and parse `source` into its top-level expressions."""
    tokens = tokenize(source)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("read %d token(s)", len(tokens))
    return parse_all(tokens)
