"""Native (Python-implemented) callables.

Three kinds, each with its own evaluation contract, dispatched on by the
evaluator according to their class:

- Function:            operands are evaluated left to right first; the native
                       receives (context, values).
- LazyFunction:        operands are passed unevaluated; the native receives
                       (operands, env, context, evaluate_fn) and decides what
                       to evaluate and where.
- EnvMutatingFunction: like LazyFunction, but handed the mutable top-level
                       environment. Only reachable from a top-level statement.

`arity` is the exact number of operands expected, or None for any number.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True, eq=False)
class Function:
    name: str
    fn: Callable
    arity: Optional[int] = None

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"


@dataclass(frozen=True, eq=False)
class LazyFunction:
    name: str
    fn: Callable
    arity: Optional[int] = None

    def __repr__(self) -> str:
        return f"<special form {self.name}>"


@dataclass(frozen=True, eq=False)
class EnvMutatingFunction:
    name: str
    fn: Callable

    def __repr__(self) -> str:
        return f"<definition form {self.name}>"
