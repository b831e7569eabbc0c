import math
import string

import pytest
from hypothesis import given, strategies as st

from chao.printer import render, colorize, describe, render_float, RESET
from chao.reader.parser import parse
from chao.types.equality import equal
from chao.types.fault import Error
from chao.types.function import Fixed, Function, Special, VARIADIC
from chao.types.nil import Nil
from chao.types.quote import Quote
from chao.types.symbol import Symbol


@pytest.mark.parametrize(
    "expr,expected",
    [
        (Nil, "nil"),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (3.5, "3.5"),
        (1e20, "1.0e+20"),
        (1e-07, "1.0e-07"),
        (float("inf"), "inf"),
        (float("-inf"), "-inf"),
        (float("nan"), "nan"),
        ("hi", '"hi"'),
        ('say "x"\n', '"say \\"x\\"\\n"'),
        ("back\\slash\t", '"back\\\\slash\\t"'),
        (Symbol("foo"), "foo"),
        (Quote(Symbol("a")), "'a"),
        (Quote(Nil), "'nil"),
        ([Symbol("+"), 1, 2], "(+ 1 2)"),
        ([[Nil], Quote([1])], "((nil) '(1))"),
        ([], "()"),
        (Error("boom"), "<error: boom>"),
    ]
)
def test_render(expr, expected):
    assert render(expr) == expected


def test_render_callables(env):
    assert render(env.lookup("+")) == "<function +>"
    assert render(env.lookup("if")) == "<special if>"
    assert render(Function([Symbol("a")], Fixed(["a", "b"]))) == "<lambda (a b)>"
    assert render(Function(1, Fixed())) == "<lambda ()>"
    assert render(Special(Nil, VARIADIC)) == "<lambda (...)>"


def test_colorize_wraps_atoms():
    text = colorize([Symbol("x"), 1])
    assert text.startswith("(")
    assert text.count(RESET) == 2
    assert "x" in text and "1" in text


def test_describe():
    assert describe(42) == "int 42"
    assert describe("a") == 'string "a"'
    assert describe(Error("bad")) == "<error: bad>"


@pytest.mark.parametrize("value", [0.1, -2.0, 5e-324, 1.7976931348623157e308, 123456789.125])
def test_render_float_reparses(value):
    assert parse(render_float(value)) == value


# -------------------------------
# Strategies
# -------------------------------
SYMBOL_ALPHABET = string.ascii_letters + "+-*/^&|%!=<>"

symbol_strat = (
    st.text(alphabet=SYMBOL_ALPHABET, min_size=1, max_size=8)
    .filter(lambda s: s not in ("nil", "true", "false"))
    .map(Symbol)
)

atom_strat = st.one_of(
    st.just(Nil),
    st.booleans(),
    st.integers(min_value=-(2 ** 63), max_value=2 ** 63 - 1),
    st.floats(allow_nan=False, allow_infinity=False),
    st.text(max_size=20),
    symbol_strat,
)

literal_strat = st.recursive(
    atom_strat,
    lambda children: st.one_of(
        st.lists(children, min_size=1, max_size=4),
        children.map(Quote),
    ),
    max_leaves=20,
)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(literal_strat)
def test_parse_render_roundtrip(expr):
    assert equal(parse(render(expr)), expr)


@given(literal_strat)
def test_render_is_stable(expr):
    assert render(parse(render(expr))) == render(expr)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_float_roundtrip_is_exact(value):
    parsed = parse(render(value))
    assert isinstance(parsed, float)
    assert parsed == value
    assert math.copysign(1.0, parsed) == math.copysign(1.0, value)
