"""Core evaluator for the rlisp interpreter.

Walks a value tree against an environment chain:
- symbols are resolved through the chain,
- the empty list evaluates to Nil,
- a list headed by a special-form name is handed, unevaluated, to that form,
- any other non-empty list is an application: every element, head included,
  is evaluated left to right and the head is applied to the rest,
- everything else evaluates to itself.

Evaluation is plainly recursive (one Python frame per nesting level and per
closure call); there is no tail-call elimination.
"""

from __future__ import annotations

from rlisp import SExpression, LispValue
from rlisp.evaluation.apply import apply
from rlisp.evaluation.special_forms import SPECIAL_FORMS
from rlisp.types.environment import Environment
from rlisp.types.nil import Nil
from rlisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Symbol():
            return env.lookup(expr.id)

        case ():
            return Nil

        case (Symbol() as head, *tail_args) if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)

        case tuple():
            # Any failure propagates before the head is applied
            fn, *args = [evaluate(e, env) for e in expr]
            return apply(fn, args, evaluate)

    # --- Atoms return as-is ---
    return expr
