from theta import EvaluatorFn
from theta import ThetaValue
from theta.errors import ThetaTypeError
from theta.types.ast import ASTNode
from theta.types.context import Context
from theta.types.environment import Scope
from theta.types.value import type_name


def if_form(
    tail: list[ASTNode],
    env: Scope,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    """(if condition then-branch else-branch); only the chosen branch is evaluated."""
    cond = evaluate_fn(tail[0], env, context)
    if not isinstance(cond, bool):
        raise ThetaTypeError(
            f"Could not evaluate {type_name(cond)} value {cond!r} as a Boolean condition."
        )
    return evaluate_fn(tail[1] if cond else tail[2], env, context)
