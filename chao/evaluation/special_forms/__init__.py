"""Registry of special forms for the chao evaluator.

Maps names to Special values: callables that receive their operands
unevaluated. `chao.builtin.env_builtin.register` installs them into the global
scope alongside the ordinary built-in functions.
"""

from chao.types.function import Fixed, Special
from chao.evaluation.special_forms.if_form import if_form
from chao.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "if": Special(if_form, Fixed(["cond", "expr1", "expr2"]), "if"),
    "lambda": Special(lambda_form, Fixed(["args", "body"]), "lambda"),
}
