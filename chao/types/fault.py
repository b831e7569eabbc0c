"""The first-class fault value.

A failed computation evaluates to an `Error` instead of raising. It travels
through the evaluator like any other result until something prints it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    message: str

    def __repr__(self) -> str:
        return f"Error({self.message!r})"

    def __str__(self) -> str:
        return self.message


def first_error(values) -> Error | None:
    """Return the first Error among `values`, if any."""
    for value in values:
        if isinstance(value, Error):
            return value
    return None
