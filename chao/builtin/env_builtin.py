from __future__ import annotations

from functools import reduce
from typing import Callable

from chao import Expression
from chao.printer import describe
from chao.types import arithmetic
from chao.types.environment import Environment
from chao.types.equality import compare, equal
from chao.types.fault import Error, first_error
from chao.types.function import Fixed, Function, VARARGS, VARIADIC
from chao.types.symbol import Symbol
from chao.evaluation.special_forms import SPECIAL_FORMS

BinaryOp = Callable[[Expression, Expression], Expression]


def _varargs(env: Environment) -> list[Expression]:
    return env.argument(VARARGS)


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(op: BinaryOp, identity: Expression, args: list[Expression], seed_strings: bool = False) -> Expression:
    if not args:
        return identity
    first = args[0]
    # Concatenation has no numeric identity: a leading string is its own seed
    if seed_strings and isinstance(first, str):
        seed = first
    else:
        seed = op(identity, first)
    return reduce(op, args[1:], seed)


def _fold_from_first(symbol: str, op: BinaryOp, identity: Expression, args: list[Expression]) -> Expression:
    if not args:
        return Error(f"{symbol} requires at least 1 argument")
    if len(args) == 1:
        return op(identity, args[0])
    return reduce(op, args[1:], args[0])


def add(env: Environment) -> Expression:
    return _fold(arithmetic.add, 0, _varargs(env), seed_strings=True)


def mul(env: Environment) -> Expression:
    return _fold(arithmetic.mul, 1, _varargs(env))


def sub(env: Environment) -> Expression:
    return _fold_from_first("-", arithmetic.sub, 0, _varargs(env))


def div(env: Environment) -> Expression:
    return _fold_from_first("/", arithmetic.div, 1, _varargs(env))


# -------------------------------
# Equality and ordering
# -------------------------------
def equals(env: Environment) -> Expression:
    args = _varargs(env)
    if not args:
        return Error("= requires at least 1 argument")
    fault = first_error(args)
    if fault is not None:
        return fault
    first = args[0]
    return all(equal(first, other) for other in args[1:])


def _ordered(symbol: str, env: Environment, test: Callable[[int], bool]) -> Expression:
    a, b = env.argument("a"), env.argument("b")
    fault = first_error((a, b))
    if fault is not None:
        return fault
    order = compare(a, b)
    if order is None:
        return Error(f"cannot compare {describe(a)} and {describe(b)} with {symbol}")
    return test(order)


def less_than(env: Environment) -> Expression:
    return _ordered("<", env, lambda order: order < 0)


def greater_than(env: Environment) -> Expression:
    return _ordered(">", env, lambda order: order > 0)


# -------------------------------
# Names
# -------------------------------
def set_global(env: Environment) -> Expression:
    """(set name value): bind `name` in the global scope and return `value`."""
    name, value = env.argument("name"), env.argument("value")
    fault = first_error((name, value))
    if fault is not None:
        return fault
    if not isinstance(name, Symbol):
        return Error(f"set requires a symbol name, got {describe(name)}")
    env.define_global(name, value)
    return value


def intern(env: Environment) -> Expression:
    """(intern string): the symbol spelled by `string`."""
    text = env.argument("string")
    if isinstance(text, Error):
        return text
    if not isinstance(text, str):
        return Error(f"intern requires a string, got {describe(text)}")
    return Symbol(text)


# -------------------------------
# Registration
# -------------------------------
BUILTINS = {
    "+": Function(add, VARIADIC, "+"),
    "-": Function(sub, VARIADIC, "-"),
    "*": Function(mul, VARIADIC, "*"),
    "/": Function(div, VARIADIC, "/"),
    "=": Function(equals, VARIADIC, "="),
    "<": Function(less_than, Fixed(["a", "b"]), "<"),
    ">": Function(greater_than, Fixed(["a", "b"]), ">"),
    "set": Function(set_global, Fixed(["name", "value"]), "set"),
    "intern": Function(intern, Fixed(["string"]), "intern"),
}


def register(env: Environment) -> None:
    """Install the built-in catalog, functions and special forms, into the global scope."""
    env.update(BUILTINS)
    env.update(SPECIAL_FORMS)
