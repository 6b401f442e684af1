from theta import EvaluatorFn
from theta import ThetaValue
from theta.errors import ThetaTypeError
from theta.types.ast import ASTNode, Identifier, SExpr
from theta.types.closure import Closure
from theta.types.context import Context
from theta.types.environment import Scope


def expect_id_list(node: ASTNode, form: str) -> list[str]:
    """Return the names in a parenthesized parameter list."""
    if not isinstance(node, SExpr):
        raise ThetaTypeError(f"Expected a parameter list in '{form}', found {node!r}")
    ids: list[str] = []
    for child in node.children:
        if not isinstance(child, Identifier):
            raise ThetaTypeError(
                f"Found expression in '{form}' arg list that isn't an identifier: {child!r}"
            )
        ids.append(child.name)
    return ids


def lambda_form(
    tail: list[ASTNode],
    env: Scope,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    # (lambda (params) body): nothing is evaluated here. The closure keeps the
    # scope it was created in and evaluates its body there when called.
    params = expect_id_list(tail[0], "lambda")
    return Closure(params, [tail[1]], env)
