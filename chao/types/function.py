"""Callable values and their argument-binding policies.

A `Function` has its arguments evaluated before they are bound; a `Special`
receives them unevaluated. Both carry a body and an ArgumentSpec:

- body: a Python callable taking the Environment (built-ins), or an
  unevaluated Expression (closures created by `lambda`);
- spec: `VARIADIC`, collecting every argument into one list bound under
  `VARARGS`, or `Fixed(names)`, binding one name per argument.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from chao import Expression, Builtin

VARARGS = "varargs"


class Variadic:
    __slots__ = ()

    _instance: Variadic | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Variadic"


VARIADIC = Variadic()


@dataclass(frozen=True)
class Fixed:
    names: tuple[str, ...]

    def __init__(self, names=()):
        object.__setattr__(self, "names", tuple(names))

    def __len__(self) -> int:
        return len(self.names)


ArgumentSpec = Union[Variadic, Fixed]


@dataclass(frozen=True)
class Function:
    body: Builtin | Expression
    spec: ArgumentSpec
    name: str | None = field(default=None, compare=False)

    @property
    def is_builtin(self) -> bool:
        return callable(self.body)


@dataclass(frozen=True)
class Special:
    body: Builtin | Expression
    spec: ArgumentSpec
    name: str | None = field(default=None, compare=False)

    @property
    def is_builtin(self) -> bool:
        return callable(self.body)
