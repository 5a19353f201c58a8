from functools import reduce

import pytest
from hypothesis import given, strategies as st

from rlisp.builtin.env_builtin import default_env
from rlisp.errors import RlispArityError, RlispTypeError, RlispZeroDivisionError
from rlisp.evaluation.evaluator import evaluate
from rlisp.reader.parser import parse
from rlisp.types.nil import Nil, T


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", 6),
        ("(+)", 0),
        ("(+ 5)", 5),
        ("(- 10 3 2)", 5),
        ("(- 4)", -4),
        ("(- -4)", 4),
        ("(* 2 3 4)", 24),
        ("(* 7)", 7),
        ("(/ 12 3)", 4),
        ("(/ 12 3 2)", 2),
        ("(/ 5)", 5),
        ("(/ 0 5)", 0),
        ("(+ (* 2 3) (- 10 4))", 12),
        ("(/ (+ 20 10) (* 2 5))", 3),
        ("(+ 1 2.5 3)", 6.5),
        ("(+ -1 5 -3)", 1),
        ("(+ .5 .25)", 0.75),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", 57),
    ]
)
def test_arithmetic(env, source, expected):
    result = evaluate(parse(source), env)
    assert isinstance(result, float)
    assert result == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", T),
        ("(< 1 3 2)", Nil),
        ("(< 1 1)", Nil),
        ("(< 5)", T),
        ("(<= 1 1 2)", T),
        ("(<= 2 1)", Nil),
        ("(<= 5)", T),
        ("(numberp 1)", T),
        ('(numberp "1")', Nil),
        ("(numberp (quote a))", Nil),
        ("(numberp t)", Nil),
        ("t", T),
    ]
)
def test_comparison_and_predicates(env, source, expected):
    assert evaluate(parse(source), env) is expected


@pytest.mark.parametrize("source", ["(-)", "(*)", "(/)", "(<)", "(<=)", "(numberp)", "(numberp 1 2)"])
def test_arity_errors(env, source):
    with pytest.raises(RlispArityError):
        evaluate(parse(source), env)


@pytest.mark.parametrize(
    "source",
    ['(+ 1 "3")', "(- 1 t)", "(* (quote a) 2)", '(/ 1 "x")', "(< 1 (quote (1)))", '(<= "a" "b")'],
)
def test_type_errors(env, source):
    with pytest.raises(RlispTypeError, match="is not a number"):
        evaluate(parse(source), env)


def test_type_error_names_the_offending_value(env):
    with pytest.raises(RlispTypeError, match='Argument "3" is not a number'):
        evaluate(parse('(+ 1 2 "3")'), env)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 8 0 2)", "(/ 8 2 0)", "(/ 0 0)", "(/ 1 -0.0)"])
def test_division_by_zero(env, source):
    with pytest.raises(RlispZeroDivisionError):
        evaluate(parse(source), env)


def test_zero_dividend_is_not_a_divisor(env):
    assert evaluate(parse("(/ 0 2)"), env) == 0


# -------------------------------
# Properties
# -------------------------------
ints = st.integers(min_value=-10**6, max_value=10**6)


def _call(op, numbers):
    return f"({op} {' '.join(str(n) for n in numbers)})"


def _eval(source):
    # Hypothesis tests build their own env rather than sharing a function-scoped fixture
    return evaluate(parse(source), default_env())


@given(st.lists(ints, min_size=1, max_size=8))
def test_sum_matches_python(numbers):
    assert _eval(_call("+", numbers)) == sum(numbers)


@given(ints)
def test_unary_minus_negates(n):
    assert _eval(_call("-", [n])) == -n


@given(st.lists(ints, min_size=2, max_size=8))
def test_subtraction_folds_left(numbers):
    expected = reduce(lambda acc, x: acc - x, numbers)
    assert _eval(_call("-", numbers)) == expected


@given(st.lists(ints, min_size=1, max_size=6), st.data())
def test_zero_divisor_anywhere_fails(numbers, data):
    position = data.draw(st.integers(min_value=1, max_value=len(numbers)))
    numbers = numbers[:position] + [0] + numbers[position:]
    with pytest.raises(RlispZeroDivisionError):
        _eval(_call("/", numbers))


@given(st.lists(ints, min_size=1, max_size=8))
def test_less_than_iff_strictly_increasing(numbers):
    increasing = all(a < b for a, b in zip(numbers, numbers[1:]))
    assert _eval(_call("<", numbers)) is (T if increasing else Nil)


@given(st.lists(ints, min_size=1, max_size=8))
def test_less_equal_iff_non_decreasing(numbers):
    non_decreasing = all(a <= b for a, b in zip(numbers, numbers[1:]))
    assert _eval(_call("<=", numbers)) is (T if non_decreasing else Nil)
