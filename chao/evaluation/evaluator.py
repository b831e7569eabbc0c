"""Core evaluator for chao.

Dispatches between self-evaluating literals, symbol lookup, quote, and
application of Functions and Specials. Evaluation is total: every fault is
returned as an Error value, and nesting deeper than the environment's
`max_depth` is itself reported as an Error.
"""

from __future__ import annotations

import logging

from chao import Expression
from chao.types.environment import Environment
from chao.types.errors import ChaoUnboundSymbol
from chao.types.fault import Error
from chao.types.nil import Nil
from chao.types.quote import Quote
from chao.types.symbol import Symbol
from chao.evaluation.apply import apply

logger = logging.getLogger(__name__)


def evaluate(expr: Expression, env: Environment) -> Expression:
    if env.depth >= env.max_depth:
        logger.warning("evaluation depth limit (%d) reached", env.max_depth)
        return Error(f"maximum evaluation depth ({env.max_depth}) exceeded")

    env.depth += 1
    try:
        match expr:
            case Symbol():
                try:
                    return env.lookup(expr)
                except ChaoUnboundSymbol:
                    return Error(f"unbound symbol: {expr.id}")

            case Quote():
                return expr.expr

            case list() if not expr:
                return Nil

            case [head, *rest]:
                return apply(evaluate(head, env), rest, env, evaluate)

        # --- Literals, callables and faults evaluate to themselves ---
        return expr
    finally:
        env.depth -= 1
