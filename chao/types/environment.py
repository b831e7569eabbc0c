"""Runtime environment for chao.

The Environment is a stack of scopes. Frame 0 is the global scope, created once
per session and populated with the built-in catalog; every call pushes a frame
before its arguments are bound and pops it when the call returns. Name lookup
walks the stack from the innermost frame outwards, so free variables resolve
against whatever frames are live at the time (dynamic scoping).
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Mapping, Optional

from chao import Expression
from chao import config
from chao.types.errors import ChaoScopeError, ChaoUnboundSymbol
from chao.types.fault import Error
from chao.types.symbol import Symbol

logger = logging.getLogger(__name__)

Frame = dict[str, Expression]


def _name(name: str | Symbol) -> str:
    return name.id if isinstance(name, Symbol) else name


class Environment:
    """Scope stack plus evaluation state for one session."""

    __slots__ = ("frames", "depth", "max_depth")

    def __init__(self, builtins: bool = True, max_depth: Optional[int] = None):
        self.frames: list[Frame] = [{}]
        # Current evaluation nesting, maintained by the evaluator
        self.depth: int = 0
        self.max_depth: int = max_depth if max_depth is not None else config.get_max_depth()
        if builtins:
            # Lazy import: the catalog builds on this module
            from chao.builtin.env_builtin import register
            register(self)
        logger.debug("environment created with %d global bindings", len(self.frames[0]))

    @property
    def height(self) -> int:
        return len(self.frames)

    @property
    def globals(self) -> Frame:
        return self.frames[0]

    def define(self, name: str | Symbol, value: Expression) -> None:
        """Bind `name` in the innermost frame."""
        self.frames[-1][_name(name)] = value

    def define_global(self, name: str | Symbol, value: Expression) -> None:
        """Bind `name` in the global frame, whatever the current call depth."""
        self.frames[0][_name(name)] = value

    def update(self, mapping: Mapping[str, Expression]) -> None:
        """Bulk-define a mapping of name -> value in the global frame."""
        for k, v in mapping.items():
            self.define_global(k, v)

    def find(self, name: str | Symbol) -> Optional[Frame]:
        """Find the innermost frame that binds `name`."""
        key = _name(name)
        for frame in reversed(self.frames):
            if key in frame:
                return frame
        return None

    def lookup(self, name: str | Symbol) -> Expression:
        """Look up the value bound to `name`.

        Raises ChaoUnboundSymbol if no frame binds it.
        """
        frame = self.find(name)
        if frame is None:
            raise ChaoUnboundSymbol(f"Cannot lookup unbound symbol {_name(name)}")
        return frame[_name(name)]

    def argument(self, name: str) -> Expression:
        """Fetch a parameter bound in the innermost frame (used by built-ins)."""
        try:
            return self.frames[-1][name]
        except KeyError:
            raise ChaoUnboundSymbol(f"No argument {name} in the current frame") from None

    def enter(self) -> Frame:
        frame: Frame = {}
        self.frames.append(frame)
        return frame

    def exit(self) -> Frame:
        if len(self.frames) <= 1:
            raise ChaoScopeError("Attempted to pop the global scope")
        return self.frames.pop()

    @contextmanager
    def frame(self) -> Iterator[Frame]:
        """Push a call frame for the duration of the block; always pops it."""
        frame = self.enter()
        try:
            yield frame
        finally:
            self.exit()

    @contextmanager
    def caller_scope(self) -> Iterator[None]:
        """Hide the innermost frame for the duration of the block.

        Special forms evaluate their operands here, so their own parameter
        names never shadow the caller's bindings.
        """
        hidden = self.exit()
        try:
            yield
        finally:
            self.frames.append(hidden)

    def eval(self, expr: Expression) -> Expression:
        """Evaluate `expr`. Never raises: faults come back as Error values."""
        from chao.evaluation.evaluator import evaluate
        try:
            return evaluate(expr, self)
        except RecursionError:
            return Error("maximum recursion depth exceeded")
        except ChaoScopeError as ex:
            logger.error("scope stack corrupted: %s", ex)
            return Error(str(ex))

    def __repr__(self) -> str:
        return f"<Environment height={self.height} globals={len(self.frames[0])}>"
