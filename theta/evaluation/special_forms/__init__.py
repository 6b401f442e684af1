"""Registry of special forms for the Theta evaluator.

Maps names to the natives that implement non-standard evaluation rules.
They are ordinary values in the default environment; the evaluator tells
them apart from eager builtins by their callable kind.
"""

from theta.types.native import EnvMutatingFunction, LazyFunction
from theta.evaluation.special_forms.if_form import if_form
from theta.evaluation.special_forms.let_form import let_form
from theta.evaluation.special_forms.lambda_form import lambda_form
from theta.evaluation.special_forms.list_form import list_form
from theta.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    "if": LazyFunction("if", if_form, 3),
    "let": LazyFunction("let", let_form, 3),
    "lambda": LazyFunction("lambda", lambda_form, 2),
    "list": LazyFunction("list", list_form),
    "defun": EnvMutatingFunction("defun", defun_form),
}
