"""Built-in functions for the Theta runtime environment.

This module defines the eager natives (arithmetic, comparison, string
conversion and console I/O) and assembles them, together with the special
forms, into the default environment every program starts from.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable

from theta import ThetaValue
from theta.errors import ThetaTypeError
from theta.evaluation.special_forms import SPECIAL_FORMS
from theta.types.context import Context
from theta.types.environment import TopLevelEnvironment
from theta.types.native import Function
from theta.types.unit import Unit
from theta.types.value import check_int64, is_int, runtime_to_str, type_name


def _binary_int(name: str, lhs: ThetaValue, rhs: ThetaValue) -> tuple[int, int]:
    if is_int(lhs) and is_int(rhs):
        return lhs, rhs
    raise ThetaTypeError(
        f"Expected both args to '{name}' to be integers. "
        f"Found {type_name(lhs)} {lhs!r} and {type_name(rhs)} {rhs!r}."
    )


# -------------------------------
# Arithmetic
# -------------------------------
def plus(context: Context, args: list[ThetaValue]) -> int:
    """Return the sum of two integers."""
    lhs, rhs = _binary_int("+", *args)
    return check_int64(lhs + rhs, "+")


def minus(context: Context, args: list[ThetaValue]) -> int:
    """Subtract the second integer from the first."""
    lhs, rhs = _binary_int("-", *args)
    return check_int64(lhs - rhs, "-")


# -------------------------------
# Comparison
# -------------------------------
def less_than(context: Context, args: list[ThetaValue]) -> bool:
    """Return true if the first integer is smaller than the second."""
    lhs, rhs = _binary_int("<", *args)
    return lhs < rhs


# -------------------------------
# Strings and I/O
# -------------------------------
def to_str(context: Context, args: list[ThetaValue]) -> str:
    """Convert a printable value to its text form without writing it."""
    return runtime_to_str(args[0])


def write(context: Context, args: list[ThetaValue]) -> ThetaValue:
    """Write the text form of a value plus a newline to the context output."""
    context.write_line(runtime_to_str(args[0]))
    return Unit


def readline(context: Context, args: list[ThetaValue]) -> str:
    """Read one line of input, without its line terminator."""
    return context.read_line()


BUILTINS: dict[str, tuple[Callable, int]] = {
    "+": (plus, 2),
    "-": (minus, 2),
    "<": (less_than, 2),
    "str": (to_str, 1),
    "write": (write, 1),
    "readline": (readline, 0),
}

DEFAULT_BINDINGS = MappingProxyType({
    **{name: Function(name, fn, arity) for name, (fn, arity) in BUILTINS.items()},
    **SPECIAL_FORMS,
})


def register(env: TopLevelEnvironment) -> None:
    """Install every builtin and special form into `env`."""
    for name, value in DEFAULT_BINDINGS.items():
        env.define(name, value)


def default_environment() -> TopLevelEnvironment:
    """A fresh top-level scope holding only the defaults."""
    return TopLevelEnvironment(DEFAULT_BINDINGS)
