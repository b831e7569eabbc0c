from __future__ import annotations

from dataclasses import dataclass

from chao import Expression


@dataclass(frozen=True)
class Quote:
    """An expression held back from evaluation. Evaluating it yields `expr`."""

    expr: Expression

    def __repr__(self) -> str:
        return f"Quote({self.expr!r})"
