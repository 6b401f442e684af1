"""Abstract syntax tree produced by the parser and walked by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from theta.reader.lexer import Token


@dataclass(frozen=True)
class Terminal:
    """An integer or string literal."""
    token: Token


@dataclass(frozen=True)
class Identifier:
    """A bare name; a reference to a binding, or the operator of a call."""
    name: str


@dataclass(frozen=True)
class SExpr:
    """A parenthesized call: the first child is the operator, the rest are operands."""
    children: tuple["ASTNode", ...] = ()

    @property
    def operator(self) -> "ASTNode | None":
        return self.children[0] if self.children else None

    @property
    def operands(self) -> tuple["ASTNode", ...]:
        return self.children[1:]


@dataclass(frozen=True)
class Program:
    statements: tuple["ASTNode", ...] = ()


@dataclass(frozen=True)
class Defun:
    """A top-level `(defun name (params...) body...)` definition."""
    name: str
    params: tuple[str, ...]
    body: tuple["ASTNode", ...]

    def as_operands(self) -> tuple["ASTNode", ...]:
        """Operands in the shape the definition native receives from a call."""
        return (
            Identifier(self.name),
            SExpr(tuple(Identifier(p) for p in self.params)),
            *self.body,
        )


ASTNode = Union[Terminal, Identifier, SExpr, Program, Defun]
