"""Runtime value helpers for Theta.

Values are plain Python objects:

    Int      -> int (never bool), kept within the signed 64-bit range
    Boolean  -> bool
    Str      -> str
    List     -> tuple of values, possibly mixed
    Unit     -> theta.types.unit.Unit
    callable -> Function | LazyFunction | EnvMutatingFunction | Closure

Values are never mutated after construction, so they are shared freely
between scopes.
"""

from __future__ import annotations

from theta import ThetaValue
from theta.errors import ThetaInternalError, ThetaNotPrintable, ThetaOverflowError
from theta.reader.lexer import INT64_MAX, INT64_MIN, Token
from theta.types.closure import Closure
from theta.types.native import EnvMutatingFunction, Function, LazyFunction
from theta.types.unit import UnitType

CALLABLE_TYPES = (Function, LazyFunction, EnvMutatingFunction, Closure)


def is_callable(value: ThetaValue) -> bool:
    return isinstance(value, CALLABLE_TYPES)


def is_int(value: ThetaValue) -> bool:
    # bool is a subclass of int; Booleans are not Ints
    return isinstance(value, int) and not isinstance(value, bool)


def check_int64(value: int, op: str) -> int:
    if not INT64_MIN <= value <= INT64_MAX:
        raise ThetaOverflowError(f"Result of '{op}' overflows a 64-bit integer.")
    return value


def type_name(value: ThetaValue) -> str:
    """Return the Theta type name of a runtime value."""
    if isinstance(value, bool):
        return "Boolean"
    if isinstance(value, int):
        return "Int"
    if isinstance(value, str):
        return "Str"
    if isinstance(value, tuple):
        return "List"
    if isinstance(value, UnitType):
        return "Unit"
    if isinstance(value, Function):
        return "Function"
    if isinstance(value, LazyFunction):
        return "LazyFunction"
    if isinstance(value, EnvMutatingFunction):
        return "EnvMutatingFunction"
    if isinstance(value, Closure):
        return "Closure"
    return type(value).__name__


def from_token(token: Token) -> ThetaValue:
    """Convert a literal token to the value it denotes."""
    if token.kind in ("integer", "string"):
        return token.value
    raise ThetaInternalError(f"Could not convert token {token!r} to a value.")


def runtime_to_str(value: ThetaValue) -> str:
    """Convert a value to the text `write` and `str` produce.

    Unit and callables have no printed form.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, tuple):
        return "(" + " ".join(runtime_to_str(v) for v in value) + ")"
    raise ThetaNotPrintable(f"Could not convert {type_name(value)} value to a string: {value!r}")
