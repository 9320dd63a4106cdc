import math

import pytest

from calculator_engine import factorial
from calculator_errors import CalculatorError, DomainError, EvaluationError
from formula_evaluator import DEG, GRAD, RAD, FormulaEvaluator


@pytest.fixture
def evaluator():
    return FormulaEvaluator()


def test_operator_precedence(evaluator):
    assert evaluator.evaluate("2 + 3 * 4") == 14
    assert evaluator.evaluate("(2 + 3) * 4") == 20
    assert evaluator.evaluate("2 * 3 ^ 2") == 18
    assert evaluator.evaluate("10 - 4 - 3") == 3
    assert evaluator.evaluate("16 / 4 / 2") == 2
    assert evaluator.evaluate("2 ^ 3 ^ 2") == 64


def test_power_chains_group_left_to_right(evaluator):
    assert evaluator.evaluate("2 ^ 2 ^ 3") == 64
    assert evaluator.evaluate("2 ^ (3 ^ 2)") == 512
    assert evaluator.evaluate("(2 ^ 3) ^ 2") == 64
    assert evaluator.evaluate("2 ^ (3) ^ 2") == 64
    assert evaluator.evaluate("2 ^ 3 ^ 2 * 2") == 128
    assert evaluator.evaluate("sqrt(2 ^ 2 ^ 2)") == 4
    assert evaluator.evaluate("-2 ^ 2") == -4
    assert evaluator.evaluate("π ^ 1 ^ 2") == pytest.approx(math.pi ** 2)


def test_leading_zeros_in_numbers(evaluator):
    assert evaluator.evaluate("-07") == -7
    assert evaluator.evaluate("2 * 007 + 0.5") == 14.5
    assert evaluator.evaluate("100 + 0.05") == 100.05
    assert evaluator.evaluate("00.5") == 0.5


def test_modulo_and_division(evaluator):
    assert evaluator.evaluate("10 % 4") == 2
    assert evaluator.evaluate("7 / 2") == 3.5


def test_unary_minus_from_toggled_operand(evaluator):
    assert evaluator.evaluate("5 - -3") == 8


def test_decimal_literals_are_evaluated_exactly(evaluator):
    assert evaluator.evaluate("0.1 + 0.2") == 0.3


def test_display_symbols_are_normalised(evaluator):
    assert evaluator.evaluate("6 × 2 ÷ 3 − 1") == 3


def test_constants_and_functions(evaluator):
    assert evaluator.evaluate("sqrt(16) + abs(-2)") == 6
    assert evaluator.evaluate("factorial(5)") == 120
    assert evaluator.evaluate("log(1000)") == pytest.approx(3)
    assert evaluator.evaluate("cbrt(-8)") == pytest.approx(-2)
    assert evaluator.evaluate("2 * pi") == pytest.approx(6.283185307179586)
    assert evaluator.evaluate("π") == pytest.approx(3.141592653589793)


def test_degree_rewrite(evaluator):
    assert evaluator.preprocess("sin(30)", DEG) == "sin((30) * pi / 180)"
    assert evaluator.evaluate("sin(30)", DEG) == pytest.approx(0.5)


def test_gradian_rewrite(evaluator):
    assert evaluator.preprocess("cos(100)", GRAD) == "cos((100) * pi / 200)"
    assert evaluator.evaluate("cos(100)", GRAD) == pytest.approx(0, abs=1e-12)


def test_radian_mode_leaves_trig_untouched(evaluator):
    assert evaluator.preprocess("tan(1) + 1", RAD) == "tan(1) + 1"


def test_inverse_trig_is_not_rewritten(evaluator):
    assert evaluator.preprocess("asin(1)", DEG) == "asin(1)"


@pytest.mark.parametrize(
    "expression",
    [
        "1 / 0",
        "5 % 0",
        "(2 + 3",
        "2 +",
        "",
        "sqrt(-1)",
        "ln(0)",
        "foo(2)",
        "pi(2)",
        "x + 1",
        "__import__('os')",
        "2 < 3",
        "1j",
    ],
)
def test_invalid_expressions_raise_evaluation_error(evaluator, expression):
    with pytest.raises(EvaluationError):
        evaluator.evaluate(expression)


def test_factorial_domain_error_in_expression(evaluator):
    with pytest.raises(DomainError):
        evaluator.evaluate("factorial(-1)")
    with pytest.raises(CalculatorError):
        evaluator.evaluate("factorial(2.5)")


def test_factorial_in_expression_matches_unary_factorial(evaluator):
    assert evaluator.evaluate("factorial(170)") == factorial(170)
    with pytest.raises(EvaluationError):
        evaluator.evaluate("factorial(171)")
