"""Lexer for lispoo source text.

Whitespace separates tokens, each parenthesis is a token on its own, and any
other run of characters is a single token. There is no quoting, escaping or
comment syntax, so the lexer never fails; malformed input is left for the
parser to reject.
"""

from __future__ import annotations

import re

TOKEN_RE = re.compile(r"[()]|[^\s()]+")


def tokenize(source: str) -> list[str]:
    """Split `source` into an ordered list of token strings."""
    return TOKEN_RE.findall(source)
