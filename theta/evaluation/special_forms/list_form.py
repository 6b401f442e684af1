from theta import EvaluatorFn
from theta import ThetaValue
from theta.types.ast import ASTNode
from theta.types.context import Context
from theta.types.environment import Scope


def list_form(
    tail: list[ASTNode],
    env: Scope,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    return tuple(evaluate_fn(e, env, context) for e in tail)
