import pytest

from theta.builtin.env_builtin import default_environment
from theta.evaluation.evaluator import evaluate
from theta.interpreter import Interpreter
from theta.reader.parser import parse_source
from theta.types.context import Context

# Most tests evaluate against a fresh default environment and a Context that
# captures output in memory, so that what `write` produced can be asserted on.


@pytest.fixture
def env():
    """Fresh top-level environment with builtins and special forms loaded."""
    return default_environment()


@pytest.fixture
def context():
    return Context.in_memory()


@pytest.fixture
def interp(context):
    return Interpreter(context)


@pytest.fixture
def ev(env, context):
    """Evaluate the single expression in `source` with `evaluate`."""
    def _ev(source, scope=None):
        (node,) = parse_source(source).statements
        return evaluate(node, env if scope is None else scope, context)
    return _ev
