"""Recursive-descent parser from token lists to expression trees."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .ast import Expr, List, Number, Symbol
from .errors import Reason
from .lexer import LPAREN, RPAREN

_FLOAT_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)      # mantissa
        (?:[eE][+-]?[0-9]+)?                  # exponent
      |
        inf(?:inity)?
      |
        nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_atom(token: str) -> Expr:
    """Classify a non-paren token as a ``Number`` or a ``Symbol``.

    A token is numeric only if it matches the float literal grammar as a
    whole, so ``hi1.0hi`` and ``1_000`` stay symbols.
    """
    if _FLOAT_RE.fullmatch(token):
        return Number(float(token))
    return Symbol(token)


@dataclass
class _Parser:
    tokens: Sequence[str]
    index: int = 0

    def remaining(self) -> list[str]:
        return list(self.tokens[self.index :])

    def _advance(self, *, missing: str) -> str:
        if self.index >= len(self.tokens):
            raise Reason(missing)
        tok = self.tokens[self.index]
        self.index += 1
        return tok

    def parse_expression(self) -> Expr:
        tok = self._advance(missing="could not get token")
        if tok == LPAREN:
            return self.read_seq()
        if tok == RPAREN:
            raise Reason(f"unexpected `{RPAREN}`")
        return parse_atom(tok)

    def read_seq(self) -> List:
        items: list[Expr] = []
        while True:
            if self.index >= len(self.tokens):
                raise Reason(f"could not find closing `{RPAREN}`")
            if self.tokens[self.index] == RPAREN:
                self.index += 1
                return List(items=tuple(items))
            items.append(self.parse_expression())


def parse(tokens: Sequence[str]) -> tuple[Expr, list[str]]:
    """Parse one expression from the front of ``tokens``.

    Returns the expression and the tokens that follow it. Leftover tokens are
    not an error here; rejecting them is up to the caller.
    """
    parser = _Parser(tokens=tuple(tokens))
    expr = parser.parse_expression()
    return expr, parser.remaining()


def read_seq(tokens: Sequence[str]) -> tuple[List, list[str]]:
    """Read list items up to the ``)`` closing an already consumed ``(``."""
    parser = _Parser(tokens=tuple(tokens))
    expr = parser.read_seq()
    return expr, parser.remaining()
