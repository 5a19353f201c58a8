"""Application engine for rlisp.

Centralizes function application so the evaluator and any future callers share
one set of rules:
- Closures run their body in a fresh child of the environment they captured.
- Native functions receive the evaluated argument list directly and do their
  own arity and type checks.
- Anything else is an illegal function call.
"""

from __future__ import annotations

import logging

from rlisp import LispValue, EvaluatorFn
from rlisp.errors import RlispIllegalCall
from rlisp.printer import to_display
from rlisp.types.closure import Closure

log = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user-defined function.

    One new scope is created per application. Parameters are paired with
    arguments positionally up to the shorter of the two; surplus arguments are
    ignored and missing ones leave their parameter unbound, so a later
    reference fails as an ordinary unbound variable.
    """
    if len(args) != len(fn.params):
        log.debug("applying %r to %d argument(s)", fn, len(args))
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    match head:
        case Closure():
            return apply_closure(head, args, evaluate_fn)
        case _ if callable(head):
            return head(args)
        case _:
            raise RlispIllegalCall(f"illegal function call: {to_display(head)}")
