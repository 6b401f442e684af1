"""Application engine for Theta.

Centralizes how each callable kind receives its operands:
- Function and Closure operands are evaluated left to right before the call.
- LazyFunction operands are handed over unevaluated.
- EnvMutatingFunction is never applied here; definitions are installed by
  `eval_statement`, the only caller holding the mutable top-level scope.
"""

from __future__ import annotations

from typing import Optional, Sequence

from theta import EvaluatorFn, ThetaValue
from theta.errors import ThetaArityError, ThetaDefinitionError, ThetaNotCallable, ThetaRuntimeError
from theta.types.ast import ASTNode
from theta.types.closure import Closure
from theta.types.context import Context
from theta.types.environment import Scope
from theta.types.native import EnvMutatingFunction, Function, LazyFunction
from theta.types.unit import Unit


def check_arity(name: str, arity: Optional[int], provided: int) -> None:
    if arity is not None and provided != arity:
        raise ThetaArityError(
            f"'{name}' expects {arity} argument{'s' if arity != 1 else ''}, found {provided}."
        )


def evaluate_operands(
    operands: Sequence[ASTNode], env: Scope, context: Context, evaluate_fn: EvaluatorFn
) -> list[ThetaValue]:
    return [evaluate_fn(op, env, context) for op in operands]


def apply_closure(
    fn: Closure, args: Sequence[ThetaValue], context: Context, evaluate_fn: EvaluatorFn
) -> ThetaValue:
    """Evaluate each body form in turn in the bound scope; the last value is the result."""
    new_env = fn.bind(args)
    if not fn.body:
        raise ThetaRuntimeError(
            f"Not enough expressions in the body of {fn.name or 'lambda expression'} to evaluate."
        )
    result: ThetaValue = Unit
    for expr in fn.body:
        result = evaluate_fn(expr, new_env, context)
    return result


def apply(
    fn: ThetaValue,
    operands: Sequence[ASTNode],
    env: Scope,
    context: Context,
    evaluate_fn: EvaluatorFn,
) -> ThetaValue:
    """Apply a callable value to unevaluated operand nodes."""
    match fn:
        case Function():
            check_arity(fn.name, fn.arity, len(operands))
            args = evaluate_operands(operands, env, context, evaluate_fn)
            return fn.fn(context, args)
        case LazyFunction():
            check_arity(fn.name, fn.arity, len(operands))
            return fn.fn(operands, env, context, evaluate_fn)
        case Closure():
            args = evaluate_operands(operands, env, context, evaluate_fn)
            return apply_closure(fn, args, context, evaluate_fn)
        case EnvMutatingFunction():
            raise ThetaDefinitionError(
                f"'{fn.name}' may only appear as a top-level statement."
            )
        case _:
            raise ThetaNotCallable(f"Could not evaluate {fn!r} as a function call.")
