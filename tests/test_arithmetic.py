import pytest

from l1.config import EvalOptions
from l1.builtins import PRIMITIVES
from l1.errors import L1TypeMismatch, L1DivisionByZero, L1UnknownOperator, L1ArithmeticOverflow
from l1.evaluation.apply import apply_primitive
from l1.evaluation.evaluator import evaluate
from l1.syntax import PRIMITIVE_OPS, PrimOp
from l1.types.result import Ok, Failure

from helpers import num, boolean, app, op


@pytest.mark.parametrize(
    "expr,expected",
    [
        (app("+", num(1), num(2), num(3)), 6),
        (app("-", num(10), num(3), num(2)), -15),   # 0 - 10 - 3 - 2
        (app("*", num(2), num(3), num(4)), 24),
        (app("/", num(12), num(3)), 1 / 12 / 3),     # 1 / 12 / 3
        (app("+", num(1), num(2.5), num(3)), 6.5),
        (app("*", num(1), num(2), num(3), num(4), num(5), num(6)), 720),
        (app("+", num(-1), num(5), num(-3)), 1),
        (app("*", num(-2), num(3)), -6),
        (app("+"), 0),
        (app("*"), 1),
        (app("-"), 0),
        (app("/"), 1),
        (app("-", num(5)), -5),
        (app("/", num(5)), 0.2),
        (app("/", num(4)), 0.25),
    ],
)
def test_arithmetic(empty_env, expr, expected):
    result = evaluate(expr, empty_env)
    assert isinstance(result, Ok)
    assert result.value == pytest.approx(expected)


def test_nested_fold_of_negation(empty_env):
    # (- 10 4) = 0 - 10 - 4
    assert evaluate(app("-", num(10), num(4)), empty_env) == Ok(-14)
    # (+ (* 2 3) (- 10 4)) = 6 + -14
    assert evaluate(app("+", app("*", num(2), num(3)), app("-", num(10), num(4))), empty_env) == Ok(-8)


@pytest.mark.parametrize(
    "expr,expected",
    [
        (app(">", num(2), num(1)), True),
        (app(">", num(1), num(2)), False),
        (app("<", num(1), num(2)), True),
        (app("<", num(2), num(2)), False),
        (app("=", num(3), num(3)), True),
        (app("=", num(3), num(3.0)), True),
        (app("=", num(3), num(4)), False),
        (app("not", boolean(True)), False),
        (app("not", boolean(False)), True),
        (app("not", app(">", num(1), num(2))), True),
    ],
)
def test_comparison_and_logic(empty_env, expr, expected):
    assert evaluate(expr, empty_env) == Ok(expected)


@pytest.mark.parametrize(
    "expr",
    [
        app(">", num(1)),
        app("<"),
        app("=", num(1), num(2), num(3)),
        app(">", num(1), boolean(True)),
        app("=", boolean(True), boolean(True)),
        app("+", num(1), boolean(True)),
        app("-", boolean(False)),
        app("*", num(2), op("+")),
        app("/", boolean(True)),
        app("not", num(0)),
        app("not"),
        app("not", boolean(True), boolean(False)),
    ],
)
def test_type_mismatch(empty_env, expr):
    result = evaluate(expr, empty_env)
    assert isinstance(result, Failure)
    assert isinstance(result.error, L1TypeMismatch)
    assert result.error.op == expr.rator.op


@pytest.mark.parametrize(
    "expr",
    [
        app("/", num(0)),
        app("/", num(5), num(0)),
        app("/", num(5), num(0.0)),
        app("/", num(5), num(1), num(0)),
    ],
)
def test_division_by_zero(empty_env, expr):
    result = evaluate(expr, empty_env)
    assert result == Failure(L1DivisionByZero())


def test_unknown_operator():
    result = apply_primitive(PrimOp("%"), [1, 2])
    assert result == Failure(L1UnknownOperator("%"))
    assert "%" in result.message


def test_apply_primitive_takes_values_not_expressions():
    assert apply_primitive(PrimOp("+"), [1, 2, 3]) == Ok(6)
    assert apply_primitive(PrimOp("not"), [False]) == Ok(True)


@pytest.mark.parametrize(
    "arg,expected",
    [(0, True), (5, False), (1.5, False), (PrimOp("+"), False), (True, False)],
)
def test_truthy_not_option(arg, expected):
    options = EvalOptions(truthy_not=True)
    assert apply_primitive(PrimOp("not"), [arg], options) == Ok(expected)


def test_strict_not_is_default():
    result = apply_primitive(PrimOp("not"), [0])
    assert isinstance(result, Failure)
    assert isinstance(result.error, L1TypeMismatch)


HUGE = 10**400


@pytest.mark.parametrize(
    "expr",
    [
        app("+", num(1.0), num(HUGE)),
        app("-", num(1.5), num(HUGE)),
        app("*", num(2.0), num(HUGE)),
        app("/", num(0.5), num(HUGE)),
    ],
)
def test_overflow_mixing_huge_ints_and_floats(empty_env, expr):
    result = evaluate(expr, empty_env)
    assert isinstance(result, Failure)
    assert isinstance(result.error, L1ArithmeticOverflow)
    assert result.error.op == expr.rator.op
    assert result.error.operands == [rand.val for rand in expr.rands]


def test_huge_int_arithmetic_stays_exact(empty_env):
    assert evaluate(app("+", num(HUGE), num(1)), empty_env) == Ok(HUGE + 1)
    assert evaluate(app("*", num(HUGE), num(HUGE)), empty_env) == Ok(HUGE * HUGE)


@pytest.mark.parametrize(
    "expr,expected",
    [
        (app(">", num(HUGE), num(1.5)), True),
        (app("<", num(1e308), num(HUGE)), True),
        (app("=", num(HUGE), num(1e308)), False),
    ],
)
def test_comparisons_with_huge_ints(empty_env, expr, expected):
    assert evaluate(expr, empty_env) == Ok(expected)


def test_every_recognised_operator_has_an_implementation():
    assert sorted(PRIMITIVES) == sorted(PRIMITIVE_OPS)
