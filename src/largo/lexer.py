"""Tokenization for parenthesized symbolic expressions."""

from __future__ import annotations

LPAREN = "("
RPAREN = ")"


def tokenize(source: str) -> list[str]:
    """Split ``source`` into paren and atom tokens.

    Parentheses are padded with spaces so they separate from their
    neighbours, then the text is split on runs of whitespace. There is no
    quoting, escaping or comment syntax, so this never fails.
    """
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    return padded.split()
