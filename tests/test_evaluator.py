# axcalc, a simple calculator.
#
# Copyright (c) 2024 zhengxyz123
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Unit tests for the evaluator and the full pipeline."""

import math

import pytest

from axcalc import calculate
from axcalc.constants import builtin_constants
from axcalc.errors import (
    ArityError,
    DivisionByZeroError,
    DomainError,
    EvalError,
    InvalidLiteralError,
    NumericOverflowError,
    UndefinedResultError,
    UndefinedVariableError,
    UnknownFunctionError,
)
from axcalc.evaluator import evaluate
from axcalc.nodes import Number


def run(code, env=None):
    return calculate(code, {} if env is None else env, builtin_constants)


@pytest.mark.parametrize(
    "code, expected",
    [
        ("2 + 3 * 4", 14),
        ("(2 + 3) * 4", 20),
        ("2^3^2", 512),
        ("8/4/2", 1),
        ("2sin(90)", 2),
        ("2(3+4)", 14),
        ("-3^2", -9),
        ("(-3)^2", 9),
        ("2^-1", 0.5),
        ("--5", 5),
        ("---5", -5),
        ("-3*-4", 12),
        ("-(3+4)", -7),
        ("0/5", 0),
        ("3!+2!", 8),
        ("5!!", math.factorial(120)),
        ("0!", 1),
        ("1!", 1),
        ("(-0)!", 1),
        ("1e308", 1e308),
        ("1e-308", 1e-308),
        ("6.022e23", 6.022e23),
        ("0 || 1 && 0", 0),
        ("1 || 0 && 0", 1),
        ("2pi", 2 * math.pi),
        ("(-2)^3", -8),
    ],
)
def test_arithmetic(code, expected):
    assert run(code) == pytest.approx(expected)


def test_factorial_limit():
    assert run("170!") == float(math.factorial(170))
    with pytest.raises(NumericOverflowError, match="too large"):
        run("171!")
    with pytest.raises(DomainError, match="non-negative integers"):
        run("3.5!")
    with pytest.raises(DomainError, match="non-negative integers"):
        run("(-5)!")


@pytest.mark.parametrize(
    "code, expected",
    [
        ("5 > 3", 1),
        ("3 > 5", 0),
        ("5 > 5", 0),
        ("3 < 5", 1),
        ("5 < 5", 0),
        ("5 >= 5", 1),
        ("3 >= 5", 0),
        ("5 <= 5", 1),
        ("5 <= 3", 0),
        ("5 == 5", 1),
        ("5 == 3", 0),
        ("5 != 3", 1),
        ("5 != 5", 0),
        ("2.5 != 2.50001", 1),
        ("-5 < 0", 1),
        ("-5 > -3", 0),
        ("1 && 1", 1),
        ("5 && 3", 1),
        ("5 && 0", 0),
        ("-5 && 3", 1),
        ("0 || 0", 0),
        ("0 || 5", 1),
        ("(5 > 3) && (2 < 4) || (1 > 2)", 1),
        ("2 + 3 == 1 + 4", 1),
        ("(2 + 3) * 2 > 8", 1),
        ("2 + 3 < 4 || 1", 1),
        ("(2 + 3) > 4 && (5 - 2) < 4", 1),
        ("1 < 2 < 3", 1),
        ("3 > 2 > 1", 0),
    ],
)
def test_comparison_and_logic(code, expected):
    result = run(code)
    assert result == expected
    assert result in (0.0, 1.0)


def test_logical_operators_do_not_short_circuit():
    env = {}
    assert run("0 && (x = 5)", env) == 0
    assert env == {"x": 5}
    with pytest.raises(DivisionByZeroError):
        run("1 || 1/0")


def test_assignment_yields_value_and_persists():
    env = {}
    assert run("x = 10", env) == 10
    assert run("x + 5", env) == 15
    assert run("x = 20", env) == 20
    assert run("x", env) == 20
    assert run("x", env) == 20
    assert run("x = 5 > 3", env) == 1


def test_assignment_is_visible_later_in_the_same_expression():
    env = {}
    assert run("max(y = 3, y + 1)", env) == 4
    assert env == {"y": 3}


def test_failed_evaluation_leaves_env_unchanged():
    env = {"x": 1.0}
    with pytest.raises(DivisionByZeroError):
        run("x = 1/0", env)
    with pytest.raises(DivisionByZeroError):
        run("max(x = 3, y = 4, 1/0)", env)
    assert env == {"x": 1.0}


def test_variables_shadow_constants():
    assert run("pi") == pytest.approx(math.pi)
    env = {}
    assert run("pi = 3", env) == 3
    assert run("pi * 2", env) == 6


def test_evaluate_without_constants():
    env = {"r": 2.0}
    node = Number("4")
    assert evaluate(node, env) == 4
    with pytest.raises(UndefinedVariableError):
        calculate("pi", {})


def test_undefined_variable():
    with pytest.raises(UndefinedVariableError, match="undefined variable") as info:
        run("undefined_var + 1")
    assert info.value.name == "undefined_var"
    assert info.value.position == (0, 13)


def test_division_by_zero():
    with pytest.raises(DivisionByZeroError, match="division by zero") as info:
        run("1 + 5/0")
    assert info.value.position == (5, 6)
    assert info.value.code == "1 + 5/0"


@pytest.mark.parametrize("code", ["0^-1", "(-8)^(1/3)", "pow(-2, 0.5)"])
def test_power_domain(code):
    with pytest.raises(DomainError):
        run(code)


@pytest.mark.parametrize("code", ["10^400", "pow(10, 400)", "exp(710)"])
def test_overflow(code):
    with pytest.raises(NumericOverflowError, match="overflow"):
        run(code)


def test_unknown_function():
    with pytest.raises(UnknownFunctionError) as info:
        run("foo(1)")
    assert info.value.name == "foo"


@pytest.mark.parametrize(
    "code, expected, got",
    [
        ("sin()", "1", 0),
        ("sin", "1", 0),
        ("pow(2)", "2", 1),
        ("max(5)", "at least 2", 1),
        ("log(10, 2, 3)", "1 or 2", 3),
        ("sum()", "at least 1", 0),
    ],
)
def test_arity(code, expected, got):
    with pytest.raises(ArityError) as info:
        run(code)
    assert info.value.expected == expected
    assert info.value.got == got


def test_arity_message():
    with pytest.raises(ArityError, match="requires 1 argument, got 0"):
        run("sin()")


def test_arity_is_checked_before_arguments_are_evaluated():
    with pytest.raises(ArityError):
        run("sin(1/0, 2)")


def test_invalid_literal():
    with pytest.raises(InvalidLiteralError):
        evaluate(Number("1.2.3"), {})


def test_eval_errors_share_a_base():
    for code in ["1/0", "sqrt(-1)", "171!", "tan(90)", "nope", "sin()", "nope(1)"]:
        with pytest.raises(EvalError):
            run(code)


def test_undefined_result():
    with pytest.raises(UndefinedResultError, match="undefined"):
        run("tan(90)")


@pytest.mark.parametrize(
    "code, expected",
    [
        ("1e400 > 1e308", 1),
        ("1e400 == 1e308*10", 1),
        ("-1e400 < 0", 1),
        ("(1e400 - 1e400) == (1e400 - 1e400)", 0),
        ("(1e400 - 1e400) != 0", 1),
        ("(1e400 - 1e400) && 1", 1),
        ("1e400 || 0", 1),
    ],
)
def test_comparisons_with_non_finite_values(code, expected):
    assert run(code) == expected


def test_non_finite_arithmetic():
    assert run("1e400") == math.inf
    assert run("1e308 * 10") == math.inf
    assert run("-1e400 * 2") == -math.inf
    assert math.isnan(run("1e400 - 1e400"))
    assert math.isnan(run("1e400 / 1e400"))
    assert run("1e400^2") == math.inf
