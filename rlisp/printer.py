"""Display form of rlisp values, as printed by the shell."""

from __future__ import annotations

import math
from decimal import Decimal

from rlisp import LispValue
from rlisp.types.closure import Closure
from rlisp.types.nil import NilType, TType
from rlisp.types.symbol import Symbol

FUNCTION_MARKER = "<function>"


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    # Shortest round-trip digits, written out positionally (no exponent)
    text = format(Decimal(repr(n)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def to_display(value: LispValue) -> str:
    match value:
        case float():
            return format_number(value)
        case str():
            # Text is case-folded on output; reading it back does not restore casing.
            return f'"{value.upper()}"'
        case Symbol():
            return value.id
        case tuple():
            return "(" + " ".join(to_display(v) for v in value) + ")"
        case NilType():
            return "NIL"
        case TType():
            return "T"
        case Closure():
            return FUNCTION_MARKER
        case _ if callable(value):
            return FUNCTION_MARKER
        case _:
            raise TypeError(f"not an rlisp value: {value!r}")
