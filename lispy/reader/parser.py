"""
  Lispy Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the Value tree consumed by the evaluator:

    - integer literals -> Number (signed 64-bit)
    - bare identifiers -> Symbol (including nil, T, \\, +)
    - ( ... )          -> SExpr of the children
    - 'x               -> QExpr wrapping exactly one child, x
    - ; to end of line  -> comment
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from lispy import LispValue
from lispy.errors import LispySyntaxError
from lispy.types.expr import QExpr, SExpr
from lispy.types.number import Number, in_int64_range
from lispy.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()';]+)"  # numbers and symbols
    r")"
)

NUMBER_RE = re.compile(r"-?[0-9]+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples; comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # Only trailing whitespace is left
            if source[pos:].strip():
                raise LispySyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
            break
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                if nm != "comment":
                    yield nm, m.group(nm)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[LispValue]:
        """Read one expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None

        if tok_type == "atom":
            self.advance()
            if NUMBER_RE.fullmatch(tok_val):
                value = int(tok_val)
                if not in_int64_range(value):
                    raise LispySyntaxError(f"Integer literal out of range: {tok_val}")
                return Number(value)
            return Symbol(tok_val)

        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            if expr is None:
                raise LispySyntaxError("Expected an expression after '")
            return QExpr([expr])

        if tok_type == "lparen":
            self.advance()
            items: list[LispValue] = []
            while True:
                if self.peek()[0] == "rparen":
                    self.advance()
                    break
                if self.peek()[0] is None:
                    raise LispySyntaxError("Unmatched '('")
                items.append(self.parse_expr())
            return SExpr(items)

        if tok_type == "rparen":
            raise LispySyntaxError("Unexpected ')'")

        raise LispySyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[LispValue]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[LispValue]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
