"""Line-oriented read-eval-print loop."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import MutableMapping
from typing import Final, TextIO

from .environment import default_env
from .errors import Reason
from .evaluator import string_to_expression
from .printer import to_string
from .values import Value

logger = logging.getLogger(__name__)

DEFAULT_PROMPT: Final[str] = os.environ.get("LARGO_PROMPT", "largo> ")
QUIT_COMMAND: Final[str] = "quit"


def run_repl(
    env: MutableMapping[str, Value] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str = DEFAULT_PROMPT,
) -> int:
    """Evaluate lines from ``stdin`` until ``quit`` or end of input.

    Errors are printed and the loop keeps going. Returns the number of lines
    that were evaluated.
    """
    env = default_env() if env is None else env
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    evaluated = 0
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        line = line.rstrip("\r\n")
        if line.strip() == QUIT_COMMAND:
            break
        evaluated += 1
        try:
            result = string_to_expression(line, env)
        except Reason as err:
            print(err, file=stdout)
            continue
        print(to_string(result), file=stdout)

    logger.debug("repl finished after %d line(s)", evaluated)
    return evaluated
