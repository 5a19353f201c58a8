from rlisp import SExpression, LispValue, EvaluatorFn
from rlisp.errors import RlispArityError
from rlisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise RlispArityError("quote expects exactly 1 argument")
    return tail[0]
