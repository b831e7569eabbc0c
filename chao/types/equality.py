"""Structural equality and ordering of expressions.

Equality never crosses kinds: an Int is not equal to the Float of the same
magnitude, and a Bool is never equal to an Int. Ordering is partial; `compare`
returns None for pairs that have no order (mixed kinds other than Int/Float,
Lists, Errors, NaN).
"""

from __future__ import annotations

import math

from chao import Expression
from chao.types.function import Function, Special
from chao.types.kind import Kind, NUMERIC, kind_of


def equal(a: Expression, b: Expression) -> bool:
    ka, kb = kind_of(a), kind_of(b)
    if ka is not kb:
        return False
    match ka:
        case Kind.LIST:
            return len(a) == len(b) and all(equal(x, y) for x, y in zip(a, b))
        case Kind.QUOTE:
            return equal(a.expr, b.expr)
        case Kind.FUNCTION | Kind.SPECIAL:
            return a.spec == b.spec and _same_body(a.body, b.body)
        case _:
            return a == b


def _same_body(a, b) -> bool:
    if callable(a) or callable(b):
        return a is b
    return equal(a, b)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare(a: Expression, b: Expression) -> int | None:
    """Three-way comparison: negative, zero, positive, or None when unordered."""
    ka, kb = kind_of(a), kind_of(b)
    if ka in NUMERIC and kb in NUMERIC:
        if ka is Kind.FLOAT or kb is Kind.FLOAT:
            x, y = float(a), float(b)
            if math.isnan(x) or math.isnan(y):
                return None
            return _cmp(x, y)
        return _cmp(a, b)
    if ka is not kb:
        return None
    match ka:
        case Kind.NIL:
            return 0
        case Kind.BOOL | Kind.STR:
            return _cmp(a, b)
        case Kind.SYMBOL:
            return _cmp(a.id, b.id)
        case Kind.QUOTE:
            return compare(a.expr, b.expr)
        case Kind.FUNCTION | Kind.SPECIAL:
            return _compare_callables(a, b)
    return None


def _compare_callables(a: Function | Special, b: Function | Special) -> int | None:
    # Built-ins order by name and before any closure; closures order by body
    if a.is_builtin and b.is_builtin:
        if a.body is b.body:
            return 0
        return _cmp(_builtin_name(a), _builtin_name(b))
    if a.is_builtin != b.is_builtin:
        return -1 if a.is_builtin else 1
    return compare(a.body, b.body)


def _builtin_name(fn: Function | Special) -> str:
    return fn.name or getattr(fn.body, "__qualname__", "")
