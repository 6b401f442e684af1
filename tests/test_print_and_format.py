import pytest

from theta.builtin.env_builtin import default_environment
from theta.debug_utils.pprint import format_ast, format_value, pprint_ast
from theta.errors import ThetaNotPrintable
from theta.reader.lexer import Token
from theta.reader.parser import parse_source
from theta.types.closure import Closure
from theta.types.unit import Unit
from theta.types.value import from_token, is_callable, is_int, runtime_to_str, type_name


@pytest.mark.parametrize(
    "value,expected",
    [
        (42, "42"),
        (-7, "-7"),
        ("hi", "hi"),
        (True, "true"),
        (False, "false"),
        ((1, 2), "(1 2)"),
        ((), "()"),
        ((1, ("a", (True,)), "b c"), "(1 (a (true)) b c)"),
    ]
)
def test_runtime_to_str(value, expected):
    assert runtime_to_str(value) == expected


def test_runtime_to_str_rejects_unprintable():
    env = default_environment()
    for value in (Unit, env.lookup("+"), env.lookup("if"), env.lookup("defun"), Closure([], [], env)):
        with pytest.raises(ThetaNotPrintable):
            runtime_to_str(value)


def test_is_callable():
    env = default_environment()
    assert all(is_callable(v) for v in env.vars.values())
    assert is_callable(Closure(["x"], [], env))
    for value in (1, "s", True, (), Unit):
        assert not is_callable(value)


def test_is_int_excludes_booleans():
    assert is_int(3)
    assert not is_int(True)
    assert not is_int("3")


@pytest.mark.parametrize(
    "value,expected",
    [(1, "Int"), (True, "Boolean"), ("s", "Str"), ((1,), "List"), (Unit, "Unit")],
)
def test_type_name(value, expected):
    assert type_name(value) == expected


def test_from_token():
    assert from_token(Token("integer", 5)) == 5
    assert from_token(Token("string", "x")) == "x"


def test_format_ast_normalizes_source():
    program = parse_source('(defun inc  (x)\n   (+ x 1))\n\n(write   (inc "a"))  ()')
    assert format_ast(program) == '(defun inc (x) (+ x 1))\n(write (inc "a"))\n()'


def test_pprint_ast_breaks_long_lines():
    program = parse_source("(defun f (a b) (list a b a b a b a b) (list b a b a b a b a))")
    text = pprint_ast(program, options={"max_line_length": 30})
    assert text.splitlines() == [
        "(defun f (a b)",
        "  (list a b a b a b a b)",
        "  (list b a b a b a b a))",
    ]


def test_format_value_handles_everything():
    env = default_environment()
    assert format_value(Unit) == "Unit"
    assert format_value(("a", 1, Unit)) == '("a" 1 Unit)'
    assert format_value(env.lookup("+")) == "<builtin +>"
    assert format_value(Closure(["x"], [], env, name="id")) == "<closure id (x)>"
    assert format_value(Closure(["x", "y"], [], env)) == "<lambda (x y)>"
