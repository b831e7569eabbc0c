from __future__ import annotations

import logging
from typing import Optional

from chao import Expression
from chao.reader.parser import parse_all
from chao.types.environment import Environment
from chao.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates chao source text.
    Keeps one Environment across calls, so `set` bindings persist.
    """

    def __init__(self, env: Optional[Environment] = None, max_depth: Optional[int] = None):
        self.env: Environment = env if env is not None else Environment(max_depth=max_depth)

    def eval_expr(self, expr: Expression) -> Expression:
        return self.env.eval(expr)

    def eval(self, code: str) -> Expression:
        """Evaluate every top-level expression in `code`; return the last result.

        The whole text is read before anything runs, so a ParseError leaves
        the environment untouched.
        """
        exprs = list(parse_all(code))
        result: Expression = Nil
        for expr in exprs:
            result = self.eval_expr(expr)
            logger.debug("evaluated %r -> %r", expr, result)
        return result
