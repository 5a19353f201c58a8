"""Built-in functions for the rlisp runtime environment.

This module defines the native arithmetic, comparison and predicate functions
exposed to Lisp code, and `register` / `default_env` to install them into a
fresh root environment. Every native takes the list of evaluated arguments and
does its own arity and type checks.
"""
from __future__ import annotations

from rlisp import LispValue
from rlisp.errors import RlispTypeError, RlispArityError, RlispZeroDivisionError
from rlisp.printer import to_display
from rlisp.types.environment import Environment
from rlisp.types.nil import T, truth


def _numbers(expr: list[LispValue]) -> list[float]:
    """Return the arguments unchanged if every one is a Number, else raise."""
    for v in expr:
        if not isinstance(v, float):
            raise RlispTypeError(f"Argument {to_display(v)} is not a number")
    return expr


def _require_args(name: str, expr: list[LispValue], minimum: int = 1) -> None:
    if len(expr) < minimum:
        raise RlispArityError(f"{name} requires at least {minimum} argument{'s' if minimum > 1 else ''}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(expr: list[LispValue]) -> LispValue:
    """Return the sum of all arguments; 0 with no arguments."""
    result = 0.0
    for x in _numbers(expr):
        result += x
    return result


def sub(expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _require_args("-", expr)
    first, *rest = _numbers(expr)
    if not rest:
        return -first
    result = first
    for x in rest:
        result -= x
    return result


def mul(expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments, folding from the first."""
    _require_args("*", expr)
    first, *rest = _numbers(expr)
    result = first
    for x in rest:
        result *= x
    return result


def div(expr: list[LispValue]) -> LispValue:
    """Divide left-to-right, folding from the first argument.

    Every divisor is checked for zero before any division happens, so a zero
    anywhere after the first argument fails the whole call.
    """
    _require_args("/", expr)
    first, *divisors = _numbers(expr)
    if any(d == 0 for d in divisors):
        raise RlispZeroDivisionError("division by zero")
    result = first
    for d in divisors:
        result /= d
    return result


# -------------------------------
# Comparison
# -------------------------------
def lt(expr: list[LispValue]) -> LispValue:
    """Chainable less-than: T if a0 < a1 < a2 ... holds for all adjacent pairs."""
    _require_args("<", expr)
    xs = _numbers(expr)
    return truth(all(a < b for a, b in zip(xs, xs[1:])))


def lte(expr: list[LispValue]) -> LispValue:
    """Chainable less-or-equal: T if a0 <= a1 <= a2 ... holds for all adjacent pairs."""
    _require_args("<=", expr)
    xs = _numbers(expr)
    return truth(all(a <= b for a, b in zip(xs, xs[1:])))


# -------------------------------
# Predicates
# -------------------------------
def numberp(expr: list[LispValue]) -> LispValue:
    if len(expr) != 1:
        raise RlispArityError("numberp requires exactly 1 argument")
    return truth(isinstance(expr[0], float))


def register(env: Environment) -> None:
    """Register all builtin functions and constants into the given environment."""
    env.update(
        {
            "t": T,
            "+": add,
            "-": sub,
            "*": mul,
            "/": div,
            "<": lt,
            "<=": lte,
            "numberp": numberp,
        }
    )


def default_env() -> Environment:
    """Create a new root environment seeded with the builtins."""
    env = Environment()
    register(env)
    return env
