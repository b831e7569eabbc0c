import pytest

from chao.types import arithmetic
from chao.types.arithmetic import INT_MAX, INT_MIN
from chao.types.fault import Error
from chao.types.nil import Nil
from chao.types.symbol import Symbol


def assert_same(result, expected):
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2)", 3),
        ("(+ 1 2.0)", 3.0),
        ("(+ 1.5 2.5)", 4.0),
        ('(+ "a" "b")', "ab"),
        ('(+ "a" "b" "c")', "abc"),
        ('(+ "a")', "a"),
        ("(+ 1 2 3)", 6),
        ("(- 10 3 2)", 5),
        ("(* 2 3 4)", 24),
        ("(/ 12 3)", 4),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(- (+ 10 5) (* 2 3))", 9),
        ("(+ 1 2.5 3)", 6.5),
        ("(* 1 2 3 4 5 6)", 720),
        ("(+ -1 5 -3)", 1),
        ("(- -10 -5)", -5),
        ("(* -2 3)", -6),
        ("(/ -12 3)", -4),
        ("(+)", 0),
        ("(*)", 1),
        ("(+ 5)", 5),
        ("(* 5)", 5),
        ("(- 5)", -5),
        ("(- 2.5)", -2.5),
        ("(/ 2)", 0),
        ("(/ 2.0)", 0.5),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 7 2.0)", 3.5),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_lisp_arithmetic(interp, source, expected):
    assert_same(interp.eval(source), expected)


@pytest.mark.parametrize(
    "source",
    [
        '(+ 1 "a")',
        '(+ "a" 1)',
        '(- "a" "b")',
        '(* "a" 2)',
        '(* "a")',
        '(* "a" "b")',
        "(+ true 1)",
        "(+ true)",
        "(+ nil 1)",
        "(+ 'a 1)",
        "(+ '(1) 1)",
        "(-)",
        "(/)",
    ]
)
def test_arithmetic_type_errors(interp, source):
    assert isinstance(interp.eval(source), Error)


# Division by zero is a fault value for every numeric kind; nothing traps or
# produces inf/nan.
@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 1.0 0)", "(/ 1 0.0)", "(/ 0)", "(/ 0.0)", "(/ 10 2 0)"])
def test_division_by_zero_is_error(interp, source):
    result = interp.eval(source)
    assert result == Error("division by zero")


def test_error_operand_propagates_unchanged(interp):
    result = interp.eval("(+ 1 (/ 1 0) (+ 1 \"a\"))")
    assert result == Error("division by zero")


def test_type_error_message(interp):
    assert interp.eval('(+ 1 "a")') == Error("cannot apply + to int and string")


def test_only_addition_concatenates_strings(interp):
    assert interp.eval('(+ "a")') == "a"
    assert interp.eval('(* "a")') == Error("cannot apply * to int and string")


# -------------------------------
# Binary operations
# -------------------------------
def test_binary_coercion():
    assert_same(arithmetic.add(1, 2), 3)
    assert_same(arithmetic.add(1, 2.0), 3.0)
    assert_same(arithmetic.mul(2.0, 3), 6.0)
    assert_same(arithmetic.sub(1.5, 1), 0.5)
    assert_same(arithmetic.add("x", "y"), "xy")
    assert isinstance(arithmetic.add(True, 1), Error)
    assert isinstance(arithmetic.add(Nil, Nil), Error)
    assert isinstance(arithmetic.add(Symbol("a"), 1), Error)
    assert isinstance(arithmetic.mul("a", "b"), Error)


def test_integer_overflow_is_error():
    assert arithmetic.add(INT_MAX, 1) == Error("integer overflow in +")
    assert arithmetic.sub(INT_MIN, 1) == Error("integer overflow in -")
    assert arithmetic.mul(INT_MAX, 2) == Error("integer overflow in *")
    assert arithmetic.div(INT_MIN, -1) == Error("integer overflow in /")
    assert_same(arithmetic.add(INT_MAX, 1.0), float(INT_MAX) + 1.0)


def test_float_overflow_follows_ieee():
    assert arithmetic.mul(1e308, 10.0) == float("inf")
