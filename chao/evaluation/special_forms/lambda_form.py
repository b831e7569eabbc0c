from chao import Expression
from chao.printer import describe
from chao.types.environment import Environment
from chao.types.fault import Error
from chao.types.function import Fixed, Function
from chao.types.nil import Nil
from chao.types.symbol import Symbol


def lambda_form(env: Environment) -> Expression:
    """(lambda args body): build a closure over `body`, unevaluated.

    `args` is nil or a list of distinct symbols. The body's free variables are
    resolved when the closure runs, against the scopes live at that time.
    """
    params = env.argument("args")
    body = env.argument("body")

    if params is Nil:
        return Function(body, Fixed())
    if not isinstance(params, list):
        return Error(f"lambda parameters must be nil or a list of symbols, got {describe(params)}")

    names: list[str] = []
    for param in params:
        if not isinstance(param, Symbol):
            return Error(f"lambda parameter must be a symbol, got {describe(param)}")
        if param.id in names:
            return Error(f"duplicate lambda parameter: {param.id}")
        names.append(param.id)
    return Function(body, Fixed(names))
