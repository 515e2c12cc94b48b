"""End-to-end behaviour of the language as seen at the prompt."""

import pytest
from hypothesis import given, strategies as st

from lispy.interpreter import Interpreter


def test_currying_example(run):
    assert run("((\\ (a b c) (+ a b c)) 1)") == "(\\ 'b c)"
    run("(def '(f) ((\\ (a b c) (+ a b c)) 1))")
    assert run("(f 2 3)") == "6"


def test_list_access_examples(run):
    assert run("(car '(1 2 3))") == "1"
    assert run("(cdr '(1 2 3))") == "(2 3)"
    assert run("(car '())").startswith("Error: ")


def test_cond_examples(run):
    assert run("(cond (nil 1) (T 2))") == "2"
    assert run("(cond (nil 1) (nil 2))") == "()"


def test_unbound_symbol_example(run):
    assert run("(foo)") == "Error: Unbound symbol 'foo'"


def test_eval_idempotence_examples(run):
    assert run("(eval '5)") == "5"
    assert run("(eval (eval '(+ 1 2)))") == "3"


def test_equal_vs_eq_examples(run):
    assert run("(equal '(1 2) '(1 2))") == "T"
    assert run("(eq '(1 2) '(1 2))") == "NIL"


def test_map_over_list_with_recursion(run):
    run("""
    (defun map (f xs)
      (cond ((null xs) nil)
            (T (cons (list (f (car xs))) (map f (cdr xs))))))
    """)
    assert run("(map (\\ (x) (* x x)) '(1 2 3))") == "'1 4 9"


def test_fibonacci(run):
    run("(defun fib (n) (cond ((eq n 0) 0) ((eq n 1) 1) (T (+ (fib (- n 1)) (fib (- n 2))))))")
    assert run("(fib 15)") == "610"


@pytest.mark.parametrize("n", [0, 1, 5])
def test_length(run, n):
    run("(defun len (xs) (cond ((null xs) 0) (T (+ 1 (len (cdr xs))))))")
    items = " ".join(str(i) for i in range(n))
    assert run(f"(len '({items}))") == str(n)


# -------------------------------
# Hypothesis tests
# -------------------------------
def _to_lisp_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_lisp_source(e) for e in expr)})"
    return str(expr)


def _last(source: str) -> str:
    return Interpreter().run(source)[-1]


int_strat = st.integers(min_value=-2**62, max_value=2**62 - 1)

atom_strat = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.sampled_from(["a", "b", "foo", "x1", "+"]),
)

nested_list_strat = st.lists(
    st.recursive(atom_strat, lambda children: st.lists(children, max_size=4), max_leaves=10),
    max_size=4,
)


@given(int_strat, int_strat)
def test_addition_is_integer_addition(a, b):
    assert _last(f"(+ {a} {b})") == str(a + b)


@given(int_strat)
def test_division_by_zero_is_always_an_error(a):
    assert _last(f"(/ {a} 0)") == "Error: Division by zero"


@given(nested_list_strat)
def test_equal_is_reflexive(xs):
    src = _to_lisp_source(xs)
    assert _last(f"(equal '{src} '{src})") == "T"
    assert _last(f"(def 'v '{src}) (equal v v)") == "T"


@given(nested_list_strat, nested_list_strat)
def test_equal_is_symmetric(xs, ys):
    a, b = _to_lisp_source(xs), _to_lisp_source(ys)
    forward = _last(f"(equal '{a} '{b})")
    assert forward == _last(f"(equal '{b} '{a})")
    assert forward == ("T" if xs == ys else "NIL")


@given(nested_list_strat)
def test_eq_never_matches_lists(xs):
    src = _to_lisp_source(xs)
    assert _last(f"(eq '{src} '{src})") == "NIL"
    assert _last(f"(def 'v '{src}) (eq v v)") == "NIL"
