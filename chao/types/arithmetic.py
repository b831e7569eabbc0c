"""Binary arithmetic on expressions.

Int op Int stays Int (checked against the signed 64-bit range), any Float
operand widens the other side to Float, and Str + Str concatenates. Every other
pairing, and division by zero of any numeric kind, returns an Error value. An
Error operand is returned unchanged so the first fault reaches the caller.
"""

from __future__ import annotations

import operator
from typing import Callable

from chao import Expression
from chao.types.fault import Error
from chao.types.kind import Kind, NUMERIC, kind_of

INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def _truncating_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def _numeric(
    symbol: str,
    a: Expression,
    b: Expression,
    int_op: Callable[[int, int], int],
    float_op: Callable[[float, float], float],
) -> Expression:
    if isinstance(a, Error):
        return a
    if isinstance(b, Error):
        return b
    ka, kb = kind_of(a), kind_of(b)
    if ka in NUMERIC and kb in NUMERIC:
        if symbol == "/" and b == 0:
            return Error("division by zero")
        if ka is Kind.INT and kb is Kind.INT:
            result = int_op(a, b)
            if not fits_int64(result):
                return Error(f"integer overflow in {symbol}")
            return result
        return float_op(float(a), float(b))
    if symbol == "+" and ka is Kind.STR and kb is Kind.STR:
        return a + b
    return Error(f"cannot apply {symbol} to {ka} and {kb}")


def add(a: Expression, b: Expression) -> Expression:
    return _numeric("+", a, b, operator.add, operator.add)


def sub(a: Expression, b: Expression) -> Expression:
    return _numeric("-", a, b, operator.sub, operator.sub)


def mul(a: Expression, b: Expression) -> Expression:
    return _numeric("*", a, b, operator.mul, operator.mul)


def div(a: Expression, b: Expression) -> Expression:
    return _numeric("/", a, b, _truncating_div, operator.truediv)
