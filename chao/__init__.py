# Core type aliases for chao's data model.
# Plain Python values (bool, int, float, str, list) carry most expression kinds;
# the remaining kinds (Nil, Symbol, Quote, Function, Special, Error) are small
# immutable classes under chao.types.
#
# Naming guidance:
# - Expression: anything the reader produces or the evaluator returns. Code and
#   data share the one representation.
# - Builtin: a Python callable installed as the body of a Function or Special.
#   It receives the Environment with its arguments already bound in the
#   innermost frame.

from typing import Any, Callable

Expression = Any

Builtin = Callable[..., Expression]


# Public entry points. Imported last: the modules below import the aliases above.
from chao.reader.parser import parse, parse_all  # noqa: E402
from chao.types.environment import Environment  # noqa: E402
from chao.interpreter import Interpreter  # noqa: E402

__all__ = ["Expression", "Builtin", "parse", "parse_all", "Environment", "Interpreter"]
