"""
  rlisp Reader

Recursive-descent reader that turns one line of text into a single value tree.
Emits plain Python objects, the same ones the evaluator works on:

    - numbers -> float
    - strings -> str (raw contents, an escaped quote is kept as written)
    - symbols -> Symbol
    - lists   -> tuple

Grammar:

    expr    := number | text | symbol | list
    number  := [sign] digits "." [digits] | [sign] "." digits | [sign] digits
    text    := '"' ( '\\"' | any-char-except-quote )* '"'
    symbol  := ( alnum | one of !$%&*+-./:<=>?@^_~ )+
    list    := "(" ws? ( expr ( ws expr )* )? ws? ")"

Numeric forms are tried in the order above and the first match wins. A numeric
match that runs straight into more symbol characters is not a number, so
`12sym` and `1.2.3` read as symbols.
"""

from __future__ import annotations

import logging
import re

from rlisp import SExpression
from rlisp.errors import RlispSyntaxError
from rlisp.types.symbol import Symbol

log = logging.getLogger(__name__)

NUMBER_FORMS = (
    re.compile(r"[+-]?[0-9]+\.[0-9]*"),  # 12.  12.34
    re.compile(r"[+-]?\.[0-9]+"),  # .34
    re.compile(r"[+-]?[0-9]+"),  # 12
)

SYMBOL_CHARS = "!$%&*+-./:<=>?@^_~"
SYMBOL_RE = re.compile(r"[A-Za-z0-9" + re.escape(SYMBOL_CHARS) + r"]+")

WHITESPACE = " \t\r\n"


def is_symbol_char(c: str) -> bool:
    return c.isascii() and (c.isalnum() or c in SYMBOL_CHARS)


class Reader:
    """Reads one expression from `source`; `remainder` holds whatever follows it."""

    def __init__(self, source: str | bytes):
        if isinstance(source, bytes):
            try:
                source = source.decode("utf-8")
            except UnicodeDecodeError as e:
                raise RlispSyntaxError(f"Input is not valid UTF-8: {e}") from e
        self.source: str = source
        self.pos: int = 0

    @property
    def remainder(self) -> str:
        return self.source[self.pos:]

    def peek(self) -> str | None:
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    def skip_whitespace(self) -> int:
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in WHITESPACE:
            self.pos += 1
        return self.pos - start

    def read(self) -> SExpression:
        """Read one top-level expression, skipping any leading whitespace."""
        self.skip_whitespace()
        expr = self.parse_expr()
        log.debug("read %r, %d chars left", expr, len(self.source) - self.pos)
        return expr

    def parse_expr(self) -> SExpression:
        c = self.peek()
        if c is None:
            raise RlispSyntaxError("Unexpected end of input")
        if c == "(":
            return self.parse_list()
        if c == '"':
            return self.parse_text()
        number = self.parse_number()
        if number is not None:
            return number
        return self.parse_symbol()

    def parse_number(self) -> float | None:
        for form in NUMBER_FORMS:
            m = form.match(self.source, self.pos)
            if m is None:
                continue
            # First matching form decides; trailing symbol chars make it a symbol
            end = m.end()
            if end < len(self.source) and is_symbol_char(self.source[end]):
                return None
            self.pos = end
            return float(m.group())
        return None

    def parse_symbol(self) -> Symbol:
        m = SYMBOL_RE.match(self.source, self.pos)
        if m is None:
            raise RlispSyntaxError(
                f"Unexpected char at {self.pos}: {self.source[self.pos]!r}"
            )
        self.pos = m.end()
        return Symbol(m.group())

    def parse_text(self) -> str:
        start = self.pos + 1  # past the opening quote
        i = start
        n = len(self.source)
        while i < n:
            if self.source.startswith('\\"', i):
                i += 2
            elif self.source[i] != '"':
                i += 1
            else:
                self.pos = i + 1
                return self.source[start:i]
        raise RlispSyntaxError("Unterminated string literal")

    def parse_list(self) -> tuple:
        self.pos += 1  # consume (
        items = []
        self.skip_whitespace()
        if self.peek() == ")":
            self.pos += 1
            return ()
        items.append(self.parse_expr())
        while True:
            mark = self.pos
            if not self.skip_whitespace() or self.peek() in (")", None):
                # Elements must be whitespace separated; let the closer check decide
                self.pos = mark
                break
            items.append(self.parse_expr())
        self.skip_whitespace()
        c = self.peek()
        if c is None:
            raise RlispSyntaxError("Unmatched '('")
        if c != ")":
            raise RlispSyntaxError(f"Expected ')' at {self.pos}, found {c!r}")
        self.pos += 1
        return tuple(items)


def parse(source: str | bytes) -> SExpression:
    """Parse exactly one expression from `source`; trailing input is ignored."""
    return Reader(source).read()
