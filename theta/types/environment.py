"""Runtime environments for Theta.

Two kinds of scope share one interface (`lookup`, `extend`, `in`):

- TopLevelEnvironment: the single mutable table a program run accumulates
  `defun` definitions into. It is the root of every scope chain.
- Environment: an immutable frame holding exactly one binding and a link to
  its outer scope. `extend` allocates one frame and never copies, so a
  derived scope can never be observed through its parent or its siblings.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional, Union

from theta import ThetaValue
from theta.errors import ThetaUnboundSymbol


class TopLevelEnvironment:
    """Mutable root scope; only the program driver writes to it."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, ThetaValue]] = None):
        self.vars: dict[str, ThetaValue] = dict(bindings or {})

    def define(self, name: str, value: ThetaValue) -> None:
        """Bind `name` to `value`, replacing any existing binding."""
        self.vars[name] = value

    def lookup(self, name: str) -> ThetaValue:
        try:
            return self.vars[name]
        except KeyError:
            raise ThetaUnboundSymbol(
                f"Failed to find identifier {name!r} in environment."
            ) from None

    def extend(self, name: str, value: ThetaValue) -> Environment:
        return Environment(name, value, self)

    def __contains__(self, name: str) -> bool:
        return name in self.vars

    def __repr__(self) -> str:
        return f"<TopLevelEnvironment {sorted(self.vars)}>"


class Environment:
    """Immutable scope: one binding layered over an outer scope."""

    __slots__ = ("name", "value", "outer")

    def __init__(self, name: str, value: ThetaValue, outer: Scope):
        self.name = name
        self.value = value
        self.outer = outer

    def extend(self, name: str, value: ThetaValue) -> Environment:
        return Environment(name, value, self)

    def frames(self) -> Iterator[Environment]:
        """Frames from innermost outwards, stopping before the top level."""
        env: Scope = self
        while isinstance(env, Environment):
            yield env
            env = env.outer

    def root(self) -> TopLevelEnvironment:
        env: Scope = self
        while isinstance(env, Environment):
            env = env.outer
        return env

    def lookup(self, name: str) -> ThetaValue:
        for frame in self.frames():
            if frame.name == name:
                return frame.value
        return self.root().lookup(name)

    def __contains__(self, name: str) -> bool:
        return any(f.name == name for f in self.frames()) or name in self.root()

    def __repr__(self) -> str:
        """Chain representation for debugging; inner frames first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            buffer.write(" -> ".join(f"{{{f.name}: {f.value!r}}}" for f in self.frames()))
            buffer.write(f" -> {self.root()!r}>")
            return buffer.getvalue()


Scope = Union[Environment, TopLevelEnvironment]
