def test_lambda_renders_formals(run):
    assert run("(\\ (a b) (+ a b))") == "(\\ 'a b)"
    assert run("(lambda '(a) '(+ a 1))") == "(\\ 'a)"


def test_currying_returns_lambda_with_remaining_formals(run):
    assert run("((\\ (a b c) (+ a b c)) 1)") == "(\\ 'b c)"
    assert run("(((\\ (a b c) (+ a b c)) 1) 2 3)") == "6"
    assert run("((((\\ (a b c) (+ a b c)) 1) 2) 3)") == "6"


def test_partial_application_can_be_reused(run):
    run("(def '(add10) ((\\ (a b) (+ a b)) 10))")
    assert run("(add10 1)") == "11"
    assert run("(add10 5)") == "15"


def test_too_many_arguments(run):
    assert run("((\\ (a) (+ a 0)) 1 2)") == "Error: Function passed too many arguments. Got 2, Expected 1."
    run("(def '(half) ((\\ (a b) (+ a b)) 1))")
    assert run("(half 2 3)") == "Error: Function passed too many arguments. Got 2, Expected 1."


def test_closures_capture_defining_scope(run):
    run("(defun adder (n) (\\ (x) (+ x n)))")
    run("(def '(add3 add7) (adder 3) (adder 7))")
    assert run("(add3 1)") == "4"
    assert run("(add7 1)") == "8"
    assert run("n") == "Error: Unbound symbol 'n'"


def test_call_frames_do_not_see_caller_locals(run):
    run("(defun peek (x) (+ x hidden))")
    run("(defun outer (hidden) (peek 1))")
    assert run("(outer 5)") == "Error: Unbound symbol 'hidden'"


def test_global_rebinding_is_visible_to_closures(run):
    run("(def '(k) 1)")
    run("(defun getk (x) (+ x k))")
    assert run("(getk 0)") == "1"
    run("(def '(k) 2)")
    assert run("(getk 0)") == "2"


def test_lambda_builtin_via_indirection(run):
    run("(def '(mk) \\)")
    assert run("((mk '(x) '(* x 2)) 21)") == "42"
    assert run("(mk '(x))") == "Error: lambda expects exactly 2 arguments, got 1"
    assert run("(mk 1 '(x))") == "Error: Formals must be a list, got 1"


def test_lambda_form_errors(run):
    assert run("(\\ (a))") == "Error: lambda expects exactly 2 arguments: formals and body"
    assert run("(\\ (a 2) (a))") == "Error: Formal should be a symbol, got 2"


def test_nested_quote_formals_are_unwrapped(run):
    assert run("((\\ ('(a b)) (+ a b)) 1 2)") == "3"
