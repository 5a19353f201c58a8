"""User-defined function values."""

from __future__ import annotations

from io import StringIO

from rlisp import SExpression, LispValue
from rlisp.types.environment import Environment


class Closure:
    """A function made by `defun`: parameter names, an unevaluated body and the defining env."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: tuple[str, ...], body: SExpression, env: Environment):
        self.params: tuple[str, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<closure (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Return a fresh child of the captured env with params bound to args.

        Pairing is positional and stops at the shorter of the two sequences:
        extra arguments are dropped and unmatched parameters stay unbound.
        """
        local_env = Environment(outer=self.env)
        for name, value in zip(self.params, args):
            local_env.set(name, value)
        return local_env
