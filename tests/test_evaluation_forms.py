import pytest

from chao.types.fault import Error
from chao.types.function import Fixed, Function
from chao.types.nil import Nil
from chao.types.symbol import Symbol


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if true 1 2)", 1),
        ("(if false 1 2)", 2),
        ("(if (< 1 2) 'yes 'no)", Symbol("yes")),
        ("(if (= 1 2) 'yes 'no)", Symbol("no")),
        ("(if (> 2 1) (+ 1 1) (/ 1 0))", 2),
        ("(if true nil 1)", Nil),
        ("(if (if true false true) 1 2)", 2),
    ]
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_only_evaluates_the_taken_branch(interp):
    assert interp.eval("(if true 1 (/ 1 0))") == 1
    assert interp.eval("(if false (/ 1 0) 2)") == 2
    interp.eval("(if true (set 'a 1) (set 'b 2))")
    assert interp.env.find("a") is not None
    assert interp.env.find("b") is None


@pytest.mark.parametrize("cond", ["1", "nil", "'a", '"true"', "()"])
def test_if_requires_a_bool(interp, cond):
    result = interp.eval(f"(if {cond} 1 2)")
    assert isinstance(result, Error)
    assert result.message.startswith("if condition must be a bool")


def test_if_condition_error_propagates(interp):
    assert interp.eval("(if (/ 1 0) 1 2)") == Error("division by zero")


def test_if_arity(interp):
    assert interp.eval("(if true 1)") == Error("wrong number of arguments: expected 3, got 2")


# ------------------ lambda ------------------

def test_lambda_builds_a_closure(interp):
    fn = interp.eval("(lambda (a b) (+ a b))")
    assert fn == Function([Symbol("+"), Symbol("a"), Symbol("b")], Fixed(["a", "b"]))
    assert interp.eval("((lambda (a b) (+ a b)) 2 3)") == 5


def test_lambda_without_parameters(interp):
    assert interp.eval("(lambda () 1)") == Function(1, Fixed())
    assert interp.eval("((lambda () 42))") == 42


def test_lambda_body_is_not_evaluated(interp):
    assert isinstance(interp.eval("(lambda (x) (/ 1 0))"), Function)


@pytest.mark.parametrize(
    "source",
    [
        "(lambda 1 1)",
        "(lambda (1) 1)",
        '(lambda ("a") 1)',
        "(lambda (a a) 1)",
        "(lambda '(a) 1)",
        "(lambda (a))",
    ]
)
def test_malformed_lambda_is_error(interp, source):
    assert isinstance(interp.eval(source), Error)


@pytest.mark.parametrize(
    "source,message",
    [
        ("((lambda (a b) a) 1)", "wrong number of arguments: expected 2, got 1"),
        ("((lambda (a) a) 1 2)", "wrong number of arguments: expected 1, got 2"),
        ("((lambda () 1) 1)", "wrong number of arguments: expected 0, got 1"),
    ]
)
def test_lambda_arity_mismatch(interp, source, message):
    assert interp.eval(source) == Error(message)
    assert interp.env.height == 1


def test_named_recursion(interp):
    interp.eval("(set 'fact (lambda (n) (if (< n 2) 1 (* n (fact (- n 1))))))")
    assert interp.eval("(fact 10)") == 3628800
    interp.eval("(set 'fib (lambda (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))")
    assert interp.eval("(fib 15)") == 610


def test_higher_order_functions(interp):
    interp.eval("(set 'twice (lambda (f x) (f (f x))))")
    assert interp.eval("(twice (lambda (n) (* n 3)) 2)") == 18


# ------------------ Scoping ------------------

def test_dynamic_scoping(interp):
    # `y` is free in `get-y` and resolves against the caller's frame
    interp.eval("(set 'get-y (lambda () y))")
    assert interp.eval("((lambda (y) (get-y)) 5)") == 5
    assert interp.eval("(get-y)") == Error("unbound symbol: y")


def test_parameters_shadow_globals(interp):
    interp.eval("(set 'x 1)")
    assert interp.eval("((lambda (x) x) 2)") == 2
    assert interp.eval("x") == 1


def test_special_form_parameters_do_not_shadow(interp):
    # `if` binds cond/expr1/expr2 internally; callers must never see them
    assert interp.eval("((lambda (cond) (if cond 1 2)) false)") == 2
    assert interp.eval("((lambda (expr1 expr2) (if true expr2 expr1)) 1 2)") == 2


def test_frames_are_popped_after_faults(interp):
    interp.eval("(set 'bad (lambda (n) (+ n \"x\")))")
    assert isinstance(interp.eval("(bad 1)"), Error)
    assert interp.env.height == 1
