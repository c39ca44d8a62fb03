"""Error type shared by the parser, the environment and the evaluator."""

from __future__ import annotations


class Reason(Exception):
    """A language-level failure carrying a human-readable cause.

    Tokenizing never fails; every parse, lookup and evaluation failure raises
    this one kind and propagates unchanged to the caller.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Error: {self.message}"

    def __repr__(self) -> str:
        return f"Reason({self.message!r})"
