import logging

from theta import EvaluatorFn
from theta import ThetaValue
from theta.errors import ThetaDefinitionError
from theta.evaluation.special_forms.lambda_form import expect_id_list
from theta.types.ast import ASTNode, Identifier
from theta.types.closure import Closure
from theta.types.context import Context
from theta.types.environment import TopLevelEnvironment
from theta.types.unit import Unit

logger = logging.getLogger(__name__)


def defun_form(
    tail: list[ASTNode],
    env: TopLevelEnvironment,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    """
    (defun name (params...) body...)
    Installs a closure under `name` in the top-level scope, visible to every
    later statement. The closure captures the top-level scope itself, so it
    can call itself and any function defined after it.
    """
    if len(tail) < 2:
        raise ThetaDefinitionError("defun requires a name and a parameter list")

    name_node, params_node, *body = tail
    if not isinstance(name_node, Identifier):
        raise ThetaDefinitionError(
            f"Expected identifier as first argument to defun. Found {name_node!r}"
        )
    params = expect_id_list(params_node, name_node.name)
    env.define(name_node.name, Closure(params, body, env, name=name_node.name))
    logger.debug("defined %s (%s)", name_node.name, " ".join(params))
    return Unit
