from __future__ import annotations
import sys

# Operator characters allowed in names, besides letters
SYMBOL_CHARS = frozenset("+-*/^&|%!=<>")


class Symbol:
    """A name. Spelled with letters and the operator characters in SYMBOL_CHARS.

    The reader only produces symbols that pass `is_valid_name`; `intern` may
    build any symbol from a string, including ones the reader cannot spell.
    """

    __slots__ = ("id",)

    def __init__(self, name: str):
        object.__setattr__(self, "id", sys.intern(name))

    @staticmethod
    def is_valid_name(text: str) -> bool:
        return bool(text) and all(c.isalpha() or c in SYMBOL_CHARS for c in text)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
