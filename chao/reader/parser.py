"""
  chao reader: lexer and recursive-descent parser

- Emits Python primitives where the data model allows:

    - nil -> Nil
    - true / false -> bool
    - integers (decimal, 0x hex, 0b binary) -> int
    - floats (digits "." digits, optional exponent) -> float
    - strings -> str
    - symbols -> Symbol
    - 'expr -> Quote(expr)
    - (a b c) -> Python list; () -> Nil

- `parse` reads exactly one expression and rejects trailing input;
  `parse_all` streams every top-level expression of a program.
"""

from __future__ import annotations

import math
import re
from typing import Iterator, NamedTuple, Optional

from chao import Expression
from chao.types.arithmetic import fits_int64
from chao.types.errors import ParseError
from chao.types.nil import Nil
from chao.types.quote import Quote
from chao.types.symbol import Symbol

MAX_PARSE_DEPTH = 256

TOKEN_RE = re.compile(
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<quote>')"  # '
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<open_string>")'  # a quote that never closes
    r"|(?P<atom>[^\s()'\"]+)",  # numbers, literals and symbols
    re.DOTALL,
)

WHITESPACE_RE = re.compile(r"\s*")

FLOAT_RE = re.compile(r"-?[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?")

INT_RE = re.compile(
    r"(?P<sign>-?)"
    r"(?:0b(?P<binary>[01]+)"
    r"|0x(?P<hex>[0-9a-fA-F]+)"
    r"|(?P<decimal>[0-9]+))"
)

LITERALS: dict[str, Expression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

ESCAPES: dict[str, str] = {
    '"': '"',
    "\\": "\\",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class Token(NamedTuple):
    kind: str
    text: str
    position: int


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields Tokens, skipping whitespace between them."""
    pos = WHITESPACE_RE.match(source).end()
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m.lastgroup == "open_string":
            raise ParseError("Unterminated string", source, pos, incomplete=True)
        yield Token(m.lastgroup, m.group(), pos)
        pos = WHITESPACE_RE.match(source, m.end()).end()


class TokenStream:
    def __init__(self, source: str):
        self.source = source
        self.tokens = lex(source)
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, position: int, incomplete: bool = False) -> ParseError:
        return ParseError(message, self.source, position, incomplete)

    def parse_expr(self, depth: int = 0) -> Expression:
        token = self.advance()
        if token is None:
            raise self.error("Unexpected end of input", len(self.source), incomplete=True)
        if depth > MAX_PARSE_DEPTH:
            raise self.error(f"Nesting deeper than {MAX_PARSE_DEPTH} levels", token.position)

        match token.kind:
            case "lparen":
                items = []
                while True:
                    nxt = self.peek()
                    if nxt is None:
                        raise self.error("Unmatched '('", token.position, incomplete=True)
                    if nxt.kind == "rparen":
                        self.advance()
                        break
                    items.append(self.parse_expr(depth + 1))
                return items if items else Nil

            case "rparen":
                raise self.error("Unexpected ')'", token.position)

            case "quote":
                nxt = self.peek()
                if nxt is None:
                    raise self.error("Expected an expression after quote", token.position, incomplete=True)
                if nxt.position != token.position + 1:
                    raise self.error("Quote must be followed immediately by an expression", token.position)
                return Quote(self.parse_expr(depth + 1))

            case "string":
                return self.read_string(token)

            case _:
                return self.read_atom(token)

    def read_string(self, token: Token) -> str:
        body = token.text[1:-1]
        out: list[str] = []
        i = 0
        while i < len(body):
            c = body[i]
            if c == "\\":
                escaped = body[i + 1]
                if escaped not in ESCAPES:
                    raise self.error(f"Unknown escape sequence \\{escaped}", token.position + 1 + i)
                out.append(ESCAPES[escaped])
                i += 2
            else:
                out.append(c)
                i += 1
        return "".join(out)

    def read_atom(self, token: Token) -> Expression:
        text = token.text
        if text in LITERALS:
            return LITERALS[text]

        if FLOAT_RE.fullmatch(text):
            value = float(text)
            if math.isinf(value):
                raise self.error(f"Float literal out of range: {text}", token.position)
            return value

        m = INT_RE.fullmatch(text)
        if m:
            if m.group("binary"):
                value = int(m.group("binary"), 2)
            elif m.group("hex"):
                value = int(m.group("hex"), 16)
            else:
                value = int(m.group("decimal"))
            if m.group("sign"):
                value = -value
            if not fits_int64(value):
                raise self.error(f"Integer literal out of range: {text}", token.position)
            return value

        if Symbol.is_valid_name(text):
            return Symbol(text)

        if text.lstrip("-")[:1].isdigit():
            raise self.error(f"Malformed number literal: {text}", token.position)
        raise self.error(f"Invalid token: {text}", token.position)

    def parse_all(self) -> Iterator[Expression]:
        while self.peek() is not None:
            yield self.parse_expr()


def parse(text: str) -> Expression:
    """Read exactly one expression from `text`; blank input reads as Nil.

    Raises ParseError for malformed input, including anything left over after
    the first expression.
    """
    stream = TokenStream(text)
    if stream.peek() is None:
        return Nil
    expr = stream.parse_expr()
    extra = stream.peek()
    if extra is not None:
        raise stream.error(f"Unexpected trailing input: {extra.text}", extra.position)
    return expr


def parse_all(text: str) -> Iterator[Expression]:
    """Read every top-level expression of `text`, in order."""
    return TokenStream(text).parse_all()
