# Type aliases shared across rlisp.
# Every runtime value is an ordinary Python object: numbers are floats, text is
# str, lists are tuples (immutable, and doubling as parsed code), symbols are
# Symbol instances, and falsity/truth are the Nil and T singletons. Closures
# and native callables are the only function values.
#
# SExpression is used where a value is treated as code (reader, special forms);
# LispValue where it is a runtime result. Both are `Any`.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms and closure application
EvaluatorFn = Callable[..., LispValue]
