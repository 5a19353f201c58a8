"""The two canonical truth sentinels.

`Nil` is the only false value (and the printed result of an empty form);
`T` is what predicates return for true. Both are singletons and are compared
by identity.
"""
from __future__ import annotations


class NilType:
    __slots__ = ()

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TType:
    __slots__ = ()

    def __repr__(self): return "T"

    def __eq__(self, other):
        return isinstance(other, TType)

    def __hash__(self):
        return hash(TType)


Nil = NilType()
T = TType()


def truth(flag: bool):
    """Map a Python boolean onto T / Nil."""
    return T if flag else Nil
