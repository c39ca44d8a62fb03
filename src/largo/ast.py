"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Symbol:
    name: str


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class List:
    items: tuple["Expr", ...] = ()


Expr = Union[Symbol, Number, List]
