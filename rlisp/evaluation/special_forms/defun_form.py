import logging

from rlisp import EvaluatorFn
from rlisp import SExpression, LispValue
from rlisp.errors import RlispArityError, RlispInvalidSymbol, RlispSpecialFormError
from rlisp.printer import to_display
from rlisp.types.closure import Closure
from rlisp.types.environment import Environment
from rlisp.types.symbol import Symbol

log = logging.getLogger(__name__)


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (p1 p2 ...) body)
    The closure captures the current environment; the body stays unevaluated
    until the function is applied.
    """
    if len(tail) != 3:
        raise RlispArityError("defun requires a name, a parameter list and a body")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise RlispInvalidSymbol(f"not a legal name: {to_display(name)}")
    if not isinstance(params, tuple) or not all(isinstance(p, Symbol) for p in params):
        raise RlispSpecialFormError(
            f"argument error: parameter list must be a list of symbols, got {to_display(params)}"
        )

    fn = Closure(tuple(p.id for p in params), body, env)
    env.set(name.id, fn)
    log.debug("defun %s %r", name, fn)
    return name
