"""Runtime value model and validators for the evaluator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Union

from .ast import Expr, List, Number, Symbol


@dataclass(frozen=True)
class NativeOperation:
    """A builtin operation bound to a name in the environment.

    Only environment lookups produce this value; the parser never does.
    """

    name: str
    function: Callable[[Sequence["Value"]], "Value"] = field(compare=False)

    def __call__(self, args: Sequence["Value"]) -> "Value":
        return self.function(args)


Value = Union[Expr, NativeOperation]


class ValueKind(str, Enum):
    SYMBOL = "symbol"
    NUMBER = "number"
    LIST = "list"
    OPERATION = "operation"


def is_operation(value: object) -> bool:
    return isinstance(value, NativeOperation)


def kind_of(value: object) -> ValueKind:
    if isinstance(value, Symbol):
        return ValueKind.SYMBOL
    if isinstance(value, Number):
        return ValueKind.NUMBER
    if isinstance(value, List):
        return ValueKind.LIST
    if is_operation(value):
        return ValueKind.OPERATION
    raise TypeError(f"unsupported runtime type {type(value).__name__}")


def validate_value(value: object, *, where: str = "value") -> None:
    if isinstance(value, (Symbol, NativeOperation)):
        return
    if isinstance(value, Number):
        if not isinstance(value.value, float):
            raise TypeError(f"{where} holds a {type(value.value).__name__}, expected float")
        return
    if isinstance(value, List):
        for idx, item in enumerate(value.items):
            validate_value(item, where=f"{where}[{idx}]")
        return
    raise TypeError(f"{where} has unsupported runtime type {type(value).__name__}")
