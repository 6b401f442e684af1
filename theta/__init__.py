# Core type aliases for Theta's data model.
# Runtime values are plain Python objects (int, bool, str, tuple) plus the Unit
# singleton and the four callable kinds. Syntax is represented by the AST node
# dataclasses in theta.types.ast, never by runtime values.
#
# Naming guidance:
# - ThetaValue:  Use in evaluator/runtime code to denote evaluated values.
# - EvaluatorFn: The evaluator callable handed to special forms, so that they
#   can evaluate operands without importing the evaluator module.

from typing import Any, Callable

# Runtime value alias
ThetaValue = Any

# Evaluator function type: (node, env, context) -> ThetaValue
EvaluatorFn = Callable[..., ThetaValue]

from theta.errors import ThetaError  # noqa: E402
from theta.interpreter import Interpreter, run_program  # noqa: E402

__all__ = [
    "ThetaValue",
    "EvaluatorFn",
    "ThetaError",
    "Interpreter",
    "run_program",
]
