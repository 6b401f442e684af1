"""CLI entry point for the Theta interpreter.

Usage:
    python -m theta [--debug] <program_file>
    python -m theta [--debug] --emit-ast <program_file>

Options:
  --debug       Log tokens, the AST and definitions to stderr
  --emit-ast    Parse the program and print it back as normalized source

Language errors are reported on stderr and exit with status 1; a program
file that cannot be read exits with status 2.
"""

import argparse
import logging
import sys
from pathlib import Path

from theta import config
from theta.debug_utils.pprint import pprint_ast
from theta.errors import ThetaError
from theta.interpreter import Interpreter
from theta.reader.lexer import tokenize

logger = logging.getLogger(__name__)


def format_error(exc: ThetaError) -> str:
    return f"Encountered {exc.kind}.\nMessage: {exc}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="theta", description="Theta language interpreter")
    parser.add_argument("--debug", action="store_true", help="log tokens, AST and definitions")
    parser.add_argument("--emit-ast", action="store_true", help="print the parsed program instead of running it")
    parser.add_argument("program", help="Theta program file to execute")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else config.get_log_level())
    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))

    program_file = Path(args.program)
    try:
        source = program_file.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Error: could not read {program_file}: {e.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"Error: could not read {program_file}: {e.reason} at byte {e.start}", file=sys.stderr)
        return 2

    interpreter = Interpreter()
    try:
        if args.debug:
            logger.debug("Tokens: %s", tokenize(source))
        if args.emit_ast:
            print(pprint_ast(interpreter.parse(source)))
            return 0
        interpreter.run(source)
    except ThetaError as e:
        print(format_error(e), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
