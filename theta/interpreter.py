from __future__ import annotations

import logging

from theta import ThetaValue
from theta.builtin.env_builtin import default_environment
from theta.debug_utils.pprint import format_value, pprint_ast
from theta.errors import ThetaRecursionError
from theta.evaluation.evaluator import eval_program, eval_statement
from theta.reader.lexer import TokenStream, lex
from theta.reader.parser import parse
from theta.types.ast import Program
from theta.types.context import Context
from theta.types.environment import TopLevelEnvironment
from theta.types.unit import Unit

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Theta programs.
    Keeps one top-level environment and one Context across calls, so
    definitions from an earlier `eval` remain visible to later ones.
    """

    def __init__(
        self,
        context: Context | None = None,
        env: TopLevelEnvironment | None = None,
    ):
        self.context: Context = context if context is not None else Context()
        self.env: TopLevelEnvironment = env if env is not None else default_environment()

    def parse(self, code: str) -> Program:
        program = parse(TokenStream(lex(code)))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("AST:\n%s", pprint_ast(program))
        return program

    def eval(self, code: str) -> ThetaValue:
        """Run every statement in `code`; return the value of the last one."""
        result: ThetaValue = Unit
        try:
            program = self.parse(code)
            for statement in program.statements:
                result = eval_statement(self.env, self.context, statement)
                logger.debug("=> %s", format_value(result))
        except RecursionError:
            raise ThetaRecursionError("Maximum evaluation depth exceeded.") from None
        return result

    def run(self, code: str) -> ThetaValue:
        """Parse then evaluate `code` as a whole program; returns Unit."""
        try:
            program = self.parse(code)
            return eval_program(self.env, self.context, program)
        except RecursionError:
            raise ThetaRecursionError("Maximum evaluation depth exceeded.") from None

    @property
    def output(self) -> str:
        return self.context.output


def run_program(source: str, context: Context | None = None) -> Context:
    """Run `source` against a fresh default environment; return its Context."""
    interpreter = Interpreter(context)
    interpreter.run(source)
    return interpreter.context
