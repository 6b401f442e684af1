"""Core tree-walking evaluator for the Theta interpreter.

`evaluate` never mutates the scope it is given; nested scopes are derived by
extension. `eval_statement` and `eval_program` are the only entry points that
hold the mutable top-level scope, and the only path through which a
definition form installs a name.
"""

from __future__ import annotations

from theta import ThetaValue
from theta.debug_utils.pprint import format_ast
from theta.errors import ThetaDefinitionError, ThetaInternalError, ThetaNotCallable
from theta.evaluation.apply import apply
from theta.reader.parser import DEFINITION_KEYWORD
from theta.types.ast import ASTNode, Defun, Identifier, Program, SExpr, Terminal
from theta.types.context import Context
from theta.types.environment import Scope, TopLevelEnvironment
from theta.types.native import EnvMutatingFunction
from theta.types.unit import Unit
from theta.types.value import from_token, is_callable, type_name


def evaluate(node: ASTNode, env: Scope, context: Context) -> ThetaValue:
    match node:
        case Terminal(token=token):
            return from_token(token)

        case Identifier(name=name):
            return env.lookup(name)

        case SExpr(children=()):
            # () evaluates to the empty list
            return ()

        case SExpr(children=(head, *operands)):
            fn = evaluate(head, env, context)
            if not is_callable(fn):
                raise ThetaNotCallable(
                    f"First argument, {format_ast(head)} to function call is not "
                    f"a function value (found {type_name(fn)})."
                )
            return apply(fn, operands, env, context, evaluate)

        case Program() | Defun():
            raise ThetaInternalError(
                f"Found {type(node).__name__} node which should've been handled already."
            )

    raise ThetaInternalError(f"Unknown AST node {node!r}")


def _definition_form(env: TopLevelEnvironment, node: ASTNode) -> EnvMutatingFunction | None:
    """Return the definition native `node` invokes, if it is a top-level definition."""
    if isinstance(node, SExpr) and isinstance(node.operator, Identifier):
        name = node.operator.name
        if name in env:
            value = env.lookup(name)
            if isinstance(value, EnvMutatingFunction):
                return value
    return None


def eval_statement(env: TopLevelEnvironment, context: Context, node: ASTNode) -> ThetaValue:
    """Evaluate one top-level statement, letting definition forms extend `env`."""
    match node:
        case Program():
            return eval_program(env, context, node)

        case Defun():
            definer = env.lookup(DEFINITION_KEYWORD)
            if not isinstance(definer, EnvMutatingFunction):
                raise ThetaDefinitionError(
                    f"'{DEFINITION_KEYWORD}' is bound to {type_name(definer)}, "
                    "not a definition form."
                )
            return definer.fn(node.as_operands(), env, context, evaluate)

    definer = _definition_form(env, node)
    if definer is not None:
        return definer.fn(node.operands, env, context, evaluate)
    return evaluate(node, env, context)


def eval_program(env: TopLevelEnvironment, context: Context, program: Program) -> ThetaValue:
    """Evaluate each statement in order; the first error aborts the rest."""
    for statement in program.statements:
        eval_statement(env, context, statement)
    return Unit
