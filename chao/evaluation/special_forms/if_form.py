from chao import Expression
from chao.printer import describe
from chao.types.environment import Environment
from chao.types.fault import Error


def if_form(env: Environment) -> Expression:
    """(if cond expr1 expr2): evaluate cond, then exactly one branch.

    The condition must evaluate to a Bool; the branch not taken is never
    evaluated.
    """
    cond = env.argument("cond")
    then_expr = env.argument("expr1")
    else_expr = env.argument("expr2")

    with env.caller_scope():
        test = env.eval(cond)
        match test:
            case True:
                return env.eval(then_expr)
            case False:
                return env.eval(else_expr)
            case Error():
                return test
    return Error(f"if condition must be a bool, got {describe(test)}")
