"""Symbol table and builtin operations backed by ``jax.numpy``."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Callable, Final

import jax
import jax.numpy as jnp
from jax import lax

from .ast import Number
from .errors import Reason
from .values import NativeOperation, Value, validate_value

logger = logging.getLogger(__name__)


class Environment(MutableMapping[str, Value]):
    """Flat name -> value table owned by one evaluation session.

    Evaluation only reads from it today, but it stays writable so that
    binding forms can insert names later.
    """

    def __init__(self, data: Mapping[str, Value] | None = None, *, allow_redefinition: bool = False) -> None:
        self.data: dict[str, Value] = {}
        self.allow_redefinition = allow_redefinition
        if data is not None:
            for key, value in data.items():
                self[key] = value

    def __getitem__(self, key: str) -> Value:
        return self.data[key]

    def __setitem__(self, key: str, value: Value) -> None:
        if not isinstance(key, str):
            raise TypeError(f"environment keys must be str, not {type(key).__name__}")
        validate_value(value, where=f"env[{key!r}]")
        self.data[key] = value

    def __delitem__(self, key: str) -> None:
        del self.data[key]

    def __iter__(self):
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __repr__(self) -> str:
        return f"Environment({sorted(self.data)!r})"

    def define(self, key: str, value: Value) -> None:
        if key in self.data and not self.allow_redefinition:
            raise NameError(f"Duplicate definition for name {key!r}")
        self[key] = value

    def copy(self) -> "Environment":
        return Environment(self.data, allow_redefinition=self.allow_redefinition)


def _float64_precision() -> contextlib.AbstractContextManager:
    # Scoped to the calling thread; the process-wide jax_enable_x64 flag is untouched.
    scoped = getattr(jax, "enable_x64", None)
    if callable(scoped):
        return scoped(True)
    from jax.experimental import enable_x64

    return enable_x64(True)


def _as_float_array(args: Sequence[Value]) -> jnp.ndarray:
    floats: list[float] = []
    for arg in args:
        if not isinstance(arg, Number):
            raise Reason("expected a number")
        floats.append(arg.value)
    return jnp.asarray(floats, dtype=jnp.float64)


def _fold_sum(floats: jnp.ndarray) -> jnp.ndarray:
    """Sum strictly left to right, starting from ``0.0``."""
    total, _ = lax.scan(lambda acc, x: (acc + x, None), jnp.zeros((), dtype=floats.dtype), floats)
    return total


def _add(args: Sequence[Value]) -> Value:
    with _float64_precision():
        return Number(float(_fold_sum(_as_float_array(args))))


def _subtract(args: Sequence[Value]) -> Value:
    # Fold-subtract: a single operand comes back unchanged, it is not negated.
    with _float64_precision():
        floats = _as_float_array(args)
        if floats.shape[0] == 0:
            raise Reason("`-` requires at least one operand")
        return Number(float(floats[0] - _fold_sum(floats[1:])))


_BUILTINS: Final[dict[str, Callable[[Sequence[Value]], Value]]] = {
    "+": _add,
    "-": _subtract,
}


def default_env() -> Environment:
    """Build a fresh environment holding the builtin operators."""
    env = Environment()
    for name, function in _BUILTINS.items():
        env.define(name, NativeOperation(name=name, function=function))
        logger.debug("registered builtin %r", name)
    logger.debug("built default environment with %d names", len(env))
    return env
