import pytest

from theta.errors import (
    ThetaArityError,
    ThetaDefinitionError,
    ThetaInternalError,
    ThetaNotCallable,
    ThetaRuntimeError,
    ThetaTypeError,
    ThetaUnboundSymbol,
)
from theta.evaluation.apply import apply_closure
from theta.evaluation.evaluator import evaluate
from theta.reader.parser import parse_source
from theta.types.ast import Defun, Program
from theta.types.closure import Closure
from theta.types.unit import Unit

# -----------------------------------------------------
# Tests
# -----------------------------------------------------


def test_self_evaluating_literals(ev):
    assert ev("1") == 1
    assert ev('"hello"') == "hello"
    assert ev('""') == ""


def test_symbol_lookup(ev, env):
    scope = env.extend("x", 42).extend("y", 100)
    assert ev("x", scope) == 42
    assert ev("y", scope) == 100
    with pytest.raises(ThetaUnboundSymbol):
        ev("z", scope)


def test_simple_expression(ev):
    assert ev("(+ 1 2)") == 3


def test_empty_expression_is_empty_list(ev):
    assert ev("()") == ()


def test_unbound_operator(ev):
    with pytest.raises(ThetaUnboundSymbol) as exc_info:
        ev("(foo)")
    assert "foo" in str(exc_info.value)


@pytest.mark.parametrize("source", ["(5 1 2)", '("f" 1)', "((list 1) 2)", "((< 1 2))"])
def test_not_callable(ev, source):
    with pytest.raises(ThetaNotCallable):
        ev(source)


def test_not_callable_names_the_operator(ev):
    with pytest.raises(ThetaNotCallable) as exc_info:
        ev("(5 1 2)")
    assert "5" in str(exc_info.value)
    assert "Int" in str(exc_info.value)


def test_type_error(ev):
    with pytest.raises(ThetaTypeError):
        ev('(+ 1 "x")')


def test_operator_may_be_an_expression(ev):
    assert ev("((lambda (x) (+ x 1)) 3)") == 4
    assert ev("((if (< 1 2) + -) 10 4)") == 14


def test_operands_evaluated_left_to_right(ev, context):
    with pytest.raises(ThetaTypeError):
        ev("(+ (write 1) (write 2))")
    assert context.output == "1\n2\n"


def test_evaluate_does_not_mutate_environment(ev, env):
    assert ev("(let y 1 y)") == 1
    assert "y" not in env
    with pytest.raises(ThetaUnboundSymbol):
        ev("y")


def test_lambda_simple(ev):
    assert ev("((lambda (x y) (+ x y)) 3 4)") == 7


def test_lambda_arity(ev):
    with pytest.raises(ThetaArityError):
        ev("((lambda (x y) (+ x y)) 3)")
    with pytest.raises(ThetaArityError):
        ev("((lambda (x y) (+ x y)) 3 4 5)")


def test_apply_closure(ev, context):
    lam = ev("(lambda (x y) (+ x y))")
    assert isinstance(lam, Closure)
    assert apply_closure(lam, [3, 4], context, evaluate) == 7
    with pytest.raises(ThetaArityError):
        apply_closure(lam, [3], context, evaluate)


def test_closure_returns_last_body_value(env, context):
    (a, b, c) = parse_source("(write 1) (write 2) (+ x 1)").statements
    fn = Closure(["x"], [a, b, c], env)
    assert apply_closure(fn, [41], context, evaluate) == 42
    assert context.output == "1\n2\n"


def test_closure_with_empty_body(env, context):
    fn = Closure([], [], env)
    with pytest.raises(ThetaRuntimeError) as exc_info:
        apply_closure(fn, [], context, evaluate)
    assert "Not enough expressions" in str(exc_info.value)


def test_closures_capture_definition_scope(ev):
    # x is 1 where f is created and 100 where f is called
    assert ev("(let x 1 (let f (lambda (y) (+ x y)) (let x 100 (f 1))))") == 2


def test_closure_outlives_its_let(ev):
    assert ev("(let add (let n 10 (lambda (y) (+ n y))) (add 5))") == 15


def test_parameters_shadow_outer_bindings(ev):
    assert ev("(let x 1 ((lambda (x) (+ x x)) 20))") == 40


def test_nested_definition_is_rejected(ev):
    with pytest.raises(ThetaDefinitionError):
        ev("(if (< 1 2) (defun f (x) x) 0)")


def test_program_and_defun_nodes_rejected(env, context):
    with pytest.raises(ThetaInternalError):
        evaluate(Program(()), env, context)
    with pytest.raises(ThetaInternalError):
        evaluate(Defun("f", (), ()), env, context)


def test_write_returns_unit(ev, context):
    assert ev("(write 42)") is Unit
    assert context.output == "42\n"
