"""User-defined closures and their argument binding."""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from theta import ThetaValue
from theta.errors import ThetaArityError
from theta.types.ast import ASTNode
from theta.types.environment import Scope


class Closure:
    """A first-class function with parameter names, body forms and the scope it was created in."""

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: Sequence[str],
        body: Sequence[ASTNode],
        env: Scope,
        name: Optional[str] = None,
    ):
        self.params: tuple[str, ...] = tuple(params)
        self.body: tuple[ASTNode, ...] = tuple(body)
        self.env: Scope = env
        self.name = name

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<closure {self.name}" if self.name else "<lambda")
            buffer.write(" (")
            buffer.write(" ".join(self.params))
            buffer.write(")>")
            return buffer.getvalue()

    def bind(self, args: Sequence[ThetaValue]) -> Scope:
        """
        Bind argument values to the parameters, in order, on top of the
        captured scope and return the scope for evaluating the body.
        The argument count must match the parameter count exactly.
        """
        if len(args) != len(self.params):
            raise ThetaArityError(
                "Invalid number of arguments passed to "
                f"{self.name or 'lambda expression'}. "
                f"Expected: {len(self.params)} Found: {len(args)}"
            )
        env = self.env
        for param, value in zip(self.params, args):
            env = env.extend(param, value)
        return env
