"""Command-line entry point for the largo interpreter."""

from __future__ import annotations

import argparse
import logging
import sys

from .environment import default_env
from .errors import Reason
from .evaluator import string_to_expression
from .printer import to_string
from .repl import DEFAULT_PROMPT, run_repl


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="largo", description=__doc__)
    parser.add_argument(
        "-c",
        "--command",
        default=None,
        help="evaluate one expression, print the result and exit",
    )
    parser.add_argument(
        "--prompt",
        default=DEFAULT_PROMPT,
        help="prompt shown by the interactive loop",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is not None:
        try:
            result = string_to_expression(args.command, default_env())
        except Reason as err:
            print(err, file=sys.stderr)
            return 1
        print(to_string(result))
        return 0

    run_repl(prompt=args.prompt)
    return 0
