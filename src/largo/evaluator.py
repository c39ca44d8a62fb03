"""Tree-walking evaluator for parsed expressions."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .ast import List, Number, Symbol
from .errors import Reason
from .lexer import tokenize
from .parser import parse
from .values import NativeOperation, Value, kind_of

logger = logging.getLogger(__name__)


def evaluate(expr: Value, env: Mapping[str, Value]) -> Value:
    """Reduce ``expr`` to a value, resolving symbols through ``env``.

    Recursion depth follows the nesting depth of ``expr``.
    """
    if isinstance(expr, Symbol):
        if expr.name not in env:
            raise Reason(f"unexpected symbol `{expr.name}`")
        return env[expr.name]

    if isinstance(expr, Number):
        return expr

    if isinstance(expr, List):
        if not expr.items:
            raise Reason("expected non-empty list")
        op_expr, *arg_exprs = expr.items
        op = evaluate(op_expr, env)
        if not isinstance(op, NativeOperation):
            logger.debug("operator position evaluated to a %s", kind_of(op).value)
            raise Reason("operator must be a function")
        args = [evaluate(arg, env) for arg in arg_exprs]
        return op(args)

    if isinstance(expr, NativeOperation):
        raise Reason("cannot evaluate a function")

    raise TypeError(f"cannot evaluate object of type {type(expr).__name__}")


def string_to_expression(source: str, env: Mapping[str, Value]) -> Value:
    """Tokenize, parse and evaluate the first expression in ``source``."""
    expr, rest = parse(tokenize(source))
    if rest:
        logger.debug("ignoring %d trailing token(s) after first expression", len(rest))
    try:
        return evaluate(expr, env)
    except Reason as err:
        logger.debug("evaluation of %r failed: %s", source, err.message)
        raise
