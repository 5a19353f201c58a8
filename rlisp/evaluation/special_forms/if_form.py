from rlisp import EvaluatorFn
from rlisp import SExpression, LispValue
from rlisp.errors import RlispArityError
from rlisp.types.environment import Environment
from rlisp.types.nil import Nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    Only the chosen branch is evaluated.
    """
    if len(tail) != 3:
        raise RlispArityError("if requires a condition, a then-expression and an else-expression")

    cond = evaluate_fn(tail[0], env)
    # Only Nil is false
    if cond is not Nil:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
