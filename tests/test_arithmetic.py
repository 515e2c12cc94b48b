import pytest

from lispy.builtin.env_builtin import add, div, mul, sub
from lispy.evaluation.apply import apply
from lispy.evaluation.evaluator import evaluate
from lispy.types import Builtin, Error


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(/ (+ 20 10) (* 2 5))", "3"),
        ("(- (+ 10 5) (* 2 3))", "9"),
        ("(+ -1 5 -3)", "1"),
        ("(- -10 -5)", "-5"),
        ("(* -2 3)", "-6"),
        ("(- 5)", "-5"),
        ("(- -5)", "5"),
        ("(+ 7)", "7"),
        ("(/ 7 2)", "3"),
        ("(/ -7 2)", "-3"),
        ("(/ 7 -2)", "-3"),
        ("(/ -7 -2)", "3"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(/ 1 0)", "Error: Division by zero"),
        ("(/ 100 5 0 2)", "Error: Division by zero"),
        ("(+ 1 '2)", "Error: Non-number"),
        ("(* 2 T)", "Error: Non-number"),
        ("(* 9223372036854775807 2)", "Error: Integer overflow"),
        ("(- -9223372036854775808)", "Error: Integer overflow"),
        ("(+ 9223372036854775806 1)", "9223372036854775807"),
    ],
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("a,b", [(0, 0), (1, 2), (-5, 3), (123456, -654321), (2 ** 40, 2 ** 40)])
def test_addition_matches_integers(run, a, b):
    assert run(f"(+ {a} {b})") == str(a + b)
    assert run(f"(/ {a} 0)") == "Error: Division by zero"


def test_no_arguments_is_an_error(env):
    for fn in (add, sub, mul, div):
        assert apply(Builtin("op", fn), [], env, evaluate) == Error("No arguments")


def test_non_ascii_digits_are_symbols(run):
    assert run("(+ ١٢ 0)") == "Error: Unbound symbol '١٢'"
