"""Text rendering of runtime values."""

from __future__ import annotations

import math
from decimal import Decimal

from .ast import List, Number, Symbol
from .values import NativeOperation, Value

FUNCTION_PLACEHOLDER = "Function"


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # Shortest round-trip digits, written out without an exponent.
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def to_string(value: Value, *, separator: str = ",") -> str:
    if isinstance(value, Symbol):
        return value.name
    if isinstance(value, Number):
        return _format_number(value.value)
    if isinstance(value, List):
        return "(" + separator.join(to_string(item, separator=separator) for item in value.items) + ")"
    if isinstance(value, NativeOperation):
        return FUNCTION_PLACEHOLDER
    raise TypeError(f"cannot render object of type {type(value).__name__}")
