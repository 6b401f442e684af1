from theta import EvaluatorFn
from theta import ThetaValue
from theta.errors import ThetaTypeError
from theta.types.ast import ASTNode, Identifier
from theta.types.context import Context
from theta.types.environment import Scope


def let_form(
    tail: list[ASTNode],
    env: Scope,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    """
    (let name value body)
    `value` is evaluated in the enclosing scope, `body` in that scope extended
    with the new binding. The binding is gone once the body returns.
    """
    id_node, value_expr, body = tail
    if not isinstance(id_node, Identifier):
        raise ThetaTypeError(f"Expected identifier as first argument to 'let', found {id_node!r}")
    value = evaluate_fn(value_expr, env, context)
    return evaluate_fn(body, env.extend(id_node.name, value), context)
