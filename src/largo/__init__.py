"""largo public API."""

from .ast import Expr, List, Number, Symbol
from .errors import Reason
from .evaluator import evaluate, string_to_expression
from .lexer import tokenize
from .parser import parse, parse_atom, read_seq
from .printer import to_string
from .values import NativeOperation, Value

try:
    from .environment import Environment, default_env
    from .repl import run_repl
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def default_env(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for default_env(). Install runtime deps first."
            ) from _jax_import_error

        def run_repl(*_args, **_kwargs):
            raise ModuleNotFoundError(
                "jax is required for run_repl(). Install runtime deps first."
            ) from _jax_import_error

        class Environment:  # pragma: no cover - import-time fallback
            def __init__(self, *_args, **_kwargs) -> None:
                raise ModuleNotFoundError(
                    "jax is required for Environment(). Install runtime deps first."
                ) from _jax_import_error

    else:
        raise

__all__ = [
    "tokenize",
    "parse",
    "parse_atom",
    "read_seq",
    "evaluate",
    "string_to_expression",
    "default_env",
    "Environment",
    "run_repl",
    "to_string",
    "Expr",
    "Value",
    "Symbol",
    "Number",
    "List",
    "NativeOperation",
    "Reason",
]
