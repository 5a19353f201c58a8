from __future__ import annotations

import logging

from rlisp import LispValue
from rlisp.builtin.env_builtin import default_env
from rlisp.evaluation.evaluator import evaluate
from rlisp.printer import to_display
from rlisp.reader.parser import parse
from rlisp.types.environment import Environment

log = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates rlisp code one expression at a time.
    Keeps a single root Environment across calls, so top-level definitions
    persist for the lifetime of the interpreter.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else default_env()

    def eval(self, code: str | bytes) -> LispValue:
        """Parse one expression from `code` and evaluate it in the root environment."""
        expr = parse(code)
        log.debug("evaluating %r", expr)
        return evaluate(expr, self.env)

    def eval_display(self, code: str | bytes) -> str:
        return to_display(self.eval(code))
