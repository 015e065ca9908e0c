"""
  Symbelix Reader: Lexer and Parser

- Line-tagged tokens, so every node knows where it came from
- Emits the node model from symbelix.types:

    - integers / floats  -> Number(line, value)
    - "double quoted"    -> StringLit(line, value)
    - anything else      -> Symbol(line, name)
    - [a b c]            -> ListLit((a, b, c))
    - (head a b)         -> tuple (a Form), head first

A program is exactly one expression.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from symbelix import Node
from symbelix.types.errors import ParseFailure
from symbelix.types.literals import Number, StringLit, ListLit
from symbelix.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<newline>\n)"
    r"|(?P<space>[ \t\r\f\v,]+)"  # commas read as whitespace
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>")'  # a quote with no closing partner
    r'|(?P<atom>[^\s()\[\]",;]+)'  # numbers and symbols
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}


def lex(source: str) -> Iterator[tuple[str, str, int]]:
    """Token generator: yields (token_type, token_value, line) tuples."""
    pos = 0
    line = 1
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            raise ParseFailure(f"unexpected character {source[pos]!r}", line)
        kind = m.lastgroup
        value = m.group(kind)
        pos = m.end()
        if kind == "newline":
            line += 1
        elif kind == "unterminated":
            raise ParseFailure("unterminated string", line)
        elif kind not in ("space", "comment"):
            yield kind, value, line
            # strings may span lines
            line += value.count("\n")


def unescape(raw: str) -> str:
    body = raw[1:-1]
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), body, flags=re.DOTALL)


def read_atom(value: str, line: int) -> Node:
    if INT_RE.match(value):
        return Number(line, int(value))
    if FLOAT_RE.match(value):
        return Number(line, float(value))
    return Symbol(line, value)


CLOSERS = {"lparen": "rparen", "lbracket": "rbracket"}


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str, int]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str, int]] = []
        self.line = 1

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, self.line
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, (None, None, self.line))
        self.line = tok[2]
        return tok

    def parse_expr(self) -> Node:
        tok_type, tok_val, line = self.advance()
        if tok_type is None:
            raise ParseFailure("unexpected end of input", line)
        if tok_type == "atom":
            return read_atom(tok_val, line)
        if tok_type == "string":
            return StringLit(line, unescape(tok_val))
        if tok_type in CLOSERS:
            items = self._parse_until(CLOSERS[tok_type], line)
            return tuple(items) if tok_type == "lparen" else ListLit(tuple(items))
        raise ParseFailure(f"unexpected {tok_val!r}", line)

    def _parse_until(self, closer: str, opened_at: int) -> list[Node]:
        items: list[Node] = []
        while True:
            tok_type, tok_val, line = self.peek()
            if tok_type is None:
                raise ParseFailure(f"unbalanced brackets opened at line {opened_at}", line)
            if tok_type == closer:
                self.advance()
                return items
            if tok_type in ("rparen", "rbracket"):
                raise ParseFailure(f"unexpected {tok_val!r}", line)
            items.append(self.parse_expr())


def read(source: str) -> Node:
    """Read a whole program (a single expression) into nodes.

    Raises ParseFailure on malformed input, on an empty program, and on
    anything left over after the first expression.
    """
    stream = TokenStream(lex(source))
    if stream.peek()[0] is None:
        raise ParseFailure("empty program", stream.peek()[2])
    expr = stream.parse_expr()
    tok_type, tok_val, line = stream.peek()
    if tok_type is not None:
        raise ParseFailure(f"unexpected {tok_val!r} after end of expression", line)
    return expr
