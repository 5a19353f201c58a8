"""Runtime environment for rlisp.

An Environment maps names to evaluated Lisp values and links to its enclosing
scope through `outer`. Scopes form a chain from the innermost scope to the
root. Writes always go to the scope they are made on, so binding a name in a
child scope shadows (and never mutates) the same name in a parent.

Closures hold a plain reference to the Environment they were defined in, which
keeps that scope and all of its ancestors alive for as long as the closure is.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from rlisp import LispValue
from rlisp.errors import RlispUnboundSymbol


class Environment:
    """Hierarchical mapping from names to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, LispValue] = {}
        self.outer: Environment | None = outer

    def set(self, name: str, value: LispValue) -> None:
        """Bind `name` to `value` in this scope, overwriting any previous binding here."""
        self.vars[name] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: str) -> Optional[LispValue]:
        """Return the value bound to `name` in the nearest scope, or None if unbound."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: str) -> LispValue:
        """Like `get`, but raises RlispUnboundSymbol when the chain has no binding."""
        env = self.find(name)
        if env is None:
            raise RlispUnboundSymbol(f"unbound variable: {name}")
        return env.vars[name]

    def update(self, mapping: dict[str, LispValue]) -> None:
        """Bulk-bind a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.set(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
