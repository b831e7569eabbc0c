"""Rendering of expressions back to source text.

`render` gives the canonical form: every literal, quote and list renders to
text that `parse` reads back as an equal expression. Functions, specials and
errors render as opaque `<...>` placeholders. `colorize` is the same rendering
with ANSI colours, for terminal output.
"""

from __future__ import annotations

import math

from chao import Expression
from chao.types.fault import Error
from chao.types.function import Fixed, Function, Special
from chao.types.kind import Kind, kind_of

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_STRING = "\033[32m"
COLOR_NUMBER = "\033[36m"
COLOR_LITERAL = "\033[35m"
COLOR_CALLABLE = "\033[92m"
COLOR_ERROR = "\033[91m"

_COLORS = {
    Kind.NIL: COLOR_LITERAL,
    Kind.BOOL: COLOR_LITERAL,
    Kind.INT: COLOR_NUMBER,
    Kind.FLOAT: COLOR_NUMBER,
    Kind.STR: COLOR_STRING,
    Kind.SYMBOL: COLOR_SYMBOL,
    Kind.FUNCTION: COLOR_CALLABLE,
    Kind.SPECIAL: COLOR_CALLABLE,
    Kind.ERROR: COLOR_ERROR,
}

_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def render_float(value: float) -> str:
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    # repr drops the fraction for large/small magnitudes: 1e+20 -> 1.0e+20
    mantissa, e, exponent = text.partition("e")
    if "." not in mantissa:
        mantissa += ".0"
    return mantissa + e + exponent


def render_string(value: str) -> str:
    return '"' + "".join(_STRING_ESCAPES.get(c, c) for c in value) + '"'


def _render_callable(fn: Function | Special) -> str:
    label = "function" if isinstance(fn, Function) else "special"
    if fn.is_builtin:
        return f"<{label} {fn.name or fn.body.__name__}>"
    params = " ".join(fn.spec.names) if isinstance(fn.spec, Fixed) else "..."
    return f"<lambda ({params})>"


def _atom(expr: Expression, kind: Kind) -> str:
    match kind:
        case Kind.NIL:
            return "nil"
        case Kind.BOOL:
            return "true" if expr else "false"
        case Kind.INT:
            return str(expr)
        case Kind.FLOAT:
            return render_float(expr)
        case Kind.STR:
            return render_string(expr)
        case Kind.SYMBOL:
            return expr.id
        case Kind.FUNCTION | Kind.SPECIAL:
            return _render_callable(expr)
        case Kind.ERROR:
            return f"<error: {expr.message}>"
    raise ValueError(f"not an atom: {kind}")


def render(expr: Expression, color: bool = False) -> str:
    kind = kind_of(expr)
    if kind is Kind.QUOTE:
        return "'" + render(expr.expr, color)
    if kind is Kind.LIST:
        return "(" + " ".join(render(e, color) for e in expr) + ")"
    text = _atom(expr, kind)
    if color:
        return f"{_COLORS[kind]}{text}{RESET}"
    return text


def colorize(expr: Expression) -> str:
    return render(expr, color=True)


def describe(expr: Expression) -> str:
    """One-line description used in fault messages, e.g. `int 42`."""
    if isinstance(expr, Error):
        return render(expr)
    return f"{kind_of(expr)} {render(expr)}"
