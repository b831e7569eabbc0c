from chao.types.nil import Nil, NilType
from chao.types.symbol import Symbol
from chao.types.quote import Quote
from chao.types.fault import Error
from chao.types.function import Function, Special, Fixed, Variadic, VARIADIC, VARARGS, ArgumentSpec
from chao.types.kind import Kind, kind_of
from chao.types.environment import Environment
