"""
  Sigma Reader: lexer and recursive-descent parser

- Whitespace-normalising lexer, no comments or string literals
- Emits Python primitives:

    - integers     -> int
    - decimals     -> float
    - symbols      -> Symbol
    - combinations -> tuple, in source order
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from sigma import SExpression
from sigma.errors import SigmaSyntaxError
from sigma.types.symbol import Symbol, SYMBOL_RE


NUMBER_RE = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")

_PAREN_RE = re.compile(r"([()])")
_WHITESPACE_RE = re.compile(r"\s+")


def tokenize(source: str) -> list[str]:
    """Split source text into '(', ')' and atom tokens."""
    spaced = _PAREN_RE.sub(r" \1 ", source)
    normalized = _WHITESPACE_RE.sub(" ", spaced).strip()
    if not normalized:
        return []
    return normalized.split(" ")


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: list[str] = list(tokens)
        self.pos = 0

    def exhausted(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.exhausted():
            return None
        return self.tokens[self.pos]

    def advance(self) -> str:
        if self.exhausted():
            raise SigmaSyntaxError("unexpected end of input")
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def parse_expr(self) -> SExpression:
        token = self.advance()

        if NUMBER_RE.fullmatch(token):
            if "." in token:
                return float(token)
            try:
                return int(token)
            except ValueError as e:
                # CPython caps int() string conversion (sys.get_int_max_str_digits)
                raise SigmaSyntaxError(
                    f"numeric literal too long: {len(token)} characters"
                ) from e

        if SYMBOL_RE.fullmatch(token):
            return Symbol(token)

        if token == "(":
            items = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise SigmaSyntaxError("unexpected end of input")
                if nxt == ")":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return tuple(items)

        raise SigmaSyntaxError(f"unexpected token: {token}")


def parse(source: str) -> SExpression:
    """Parse exactly one expression; the whole input must be consumed."""
    stream = TokenStream(tokenize(source))
    expr = stream.parse_expr()
    if not stream.exhausted():
        raise SigmaSyntaxError("unexpected tokens at end of input")
    return expr
