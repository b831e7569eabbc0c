from __future__ import annotations

from enum import Enum

from chao import Expression
from chao.types.errors import ChaoTypeError
from chao.types.fault import Error
from chao.types.function import Function, Special
from chao.types.nil import NilType
from chao.types.quote import Quote
from chao.types.symbol import Symbol


class Kind(Enum):
    NIL = "nil"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STR = "string"
    SYMBOL = "symbol"
    QUOTE = "quote"
    LIST = "list"
    FUNCTION = "function"
    SPECIAL = "special"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


NUMERIC = frozenset({Kind.INT, Kind.FLOAT})

# bool before int: bool is an int subclass
_KINDS: tuple[tuple[type, Kind], ...] = (
    (NilType, Kind.NIL),
    (bool, Kind.BOOL),
    (int, Kind.INT),
    (float, Kind.FLOAT),
    (str, Kind.STR),
    (Symbol, Kind.SYMBOL),
    (Quote, Kind.QUOTE),
    (list, Kind.LIST),
    (Function, Kind.FUNCTION),
    (Special, Kind.SPECIAL),
    (Error, Kind.ERROR),
)


def kind_of(expr: Expression) -> Kind:
    for python_type, kind in _KINDS:
        if isinstance(expr, python_type):
            return kind
    raise ChaoTypeError(f"Not an expression: {expr!r} ({type(expr).__name__})")
