"""Application engine for chao.

Centralizes call semantics for the evaluator:
- A Function has its operands evaluated left to right, a Special receives them
  as written; both run inside a fresh frame that is popped on every exit path.
- Operands are bound per the callee's ArgumentSpec: Fixed binds one name per
  operand and requires an exact count, Variadic binds the whole list under
  VARARGS.
- The body is either a Python built-in, called with the environment, or a
  closure body expression, evaluated against the live scope stack.
"""

from __future__ import annotations

from typing import Callable

from chao import Expression
from chao.printer import describe
from chao.types.environment import Environment
from chao.types.fault import Error
from chao.types.function import ArgumentSpec, Fixed, Function, Special, VARARGS

EvaluatorFn = Callable[[Expression, Environment], Expression]


def bind_arguments(env: Environment, spec: ArgumentSpec, values: list[Expression]) -> Error | None:
    """Bind `values` into the innermost frame; return an Error on arity mismatch."""
    if isinstance(spec, Fixed):
        if len(values) != len(spec.names):
            return Error(
                f"wrong number of arguments: expected {len(spec.names)}, got {len(values)}"
            )
        for name, value in zip(spec.names, values):
            env.define(name, value)
        return None
    env.define(VARARGS, list(values))
    return None


def invoke(fn: Function | Special, env: Environment, evaluate_fn: EvaluatorFn) -> Expression:
    if fn.is_builtin:
        return fn.body(env)
    return evaluate_fn(fn.body, env)


def apply(
    head: Expression,
    operands: list[Expression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Expression:
    """Apply an evaluated head to the operand expressions of a call."""
    match head:
        case Function():
            with env.frame():
                values = [evaluate_fn(operand, env) for operand in operands]
                fault = bind_arguments(env, head.spec, values)
                if fault is not None:
                    return fault
                return invoke(head, env, evaluate_fn)

        case Special():
            with env.frame():
                fault = bind_arguments(env, head.spec, list(operands))
                if fault is not None:
                    return fault
                return invoke(head, env, evaluate_fn)

        case Error():
            return head

    return Error(f"cannot apply {describe(head)}")
