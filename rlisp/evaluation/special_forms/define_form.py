import logging

from rlisp import EvaluatorFn
from rlisp import SExpression, LispValue
from rlisp.errors import RlispArityError, RlispInvalidSymbol
from rlisp.printer import to_display
from rlisp.types.environment import Environment
from rlisp.types.symbol import Symbol

log = logging.getLogger(__name__)


def defparameter_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defparameter name expr)
    Binds in the environment the form is evaluated in, which is not
    necessarily the root. Returns the name as a symbol.
    """
    if len(tail) != 2:
        raise RlispArityError("defparameter requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise RlispInvalidSymbol(f"not a legal name: {to_display(name)}")
    value = evaluate_fn(val_expr, env)
    env.set(name.id, value)
    log.debug("defparameter %s", name)
    return name
