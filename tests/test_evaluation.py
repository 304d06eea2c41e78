import pytest

from sail.types import Environment, Symbol, Nil, T, F, Pair, make_list, Primitive
from sail.evaluation.evaluator import evaluate
from sail import errors

S = Symbol
L = make_list


# -----------------------------------------------------
# Atoms and symbols
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    assert evaluate(Nil, env) is Nil
    assert evaluate(T, env) is T
    assert evaluate(F, env) is F


def test_vector_is_an_atom(env):
    vec = [S("x"), L(S("+"), 1, 2)]
    # Elements are not evaluated.
    assert evaluate(vec, env) is vec


def test_callables_self_evaluate(env):
    plus = env.lookup(S("+"))
    assert evaluate(plus, env) is plus


def test_symbol_lookup(env):
    env.define(S("x"), 42)
    assert evaluate(S("x"), env) == 42
    with pytest.raises(errors.UnboundSymbol) as info:
        evaluate(S("z"), env)
    assert info.value.name == S("z")


@pytest.mark.parametrize("expr", [None, True, False, (1, 2), {"a": 1}, object(), 1j])
def test_non_values_are_malformed(env, expr):
    with pytest.raises(errors.MalformedExpression):
        evaluate(expr, env)


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_simple_expression(env):
    assert evaluate(L(S("+"), 1, 2), env) == 3


def test_nested_expression(env):
    expr = L(S("*"), L(S("+"), 1, 2), L(S("-"), 10, 4))
    assert evaluate(expr, env) == 18


def test_operator_position_is_evaluated(env):
    expr = L(L(S("fn"), [S("a")], S("a")), 7)
    assert evaluate(expr, env) == 7


def test_operands_evaluated_left_to_right(env, effects):
    evaluate(L(S("+"), L(S("note"), 1), L(S("note"), 2), L(S("note"), 3)), env)
    assert effects == [1, 2, 3]


def test_failing_operand_aborts_application(env, effects):
    expr = L(S("note"), L(S("note"), 2), L(S("fail")), L(S("note"), 3))
    with pytest.raises(errors.PrimitiveError):
        evaluate(expr, env)
    # (note 2) ran, (note 3) did not, and the outer note was never applied.
    assert effects == [2]


def test_side_effects_before_failure_are_kept(env):
    expr = L(S("do"), L(S("def"), S("a"), 1), L(S("fail")), L(S("def"), S("b"), 2))
    with pytest.raises(errors.PrimitiveError):
        evaluate(expr, env)
    assert env.lookup(S("a")) == 1
    assert S("b") not in env


def test_not_callable(env, effects):
    expr = L(1, L(S("note"), 2))
    with pytest.raises(errors.NotCallable) as info:
        evaluate(expr, env)
    assert info.value.value == 1
    assert effects == [2]


@pytest.mark.parametrize("head", ["str", T, Nil, [1], 2.5])
def test_various_non_callables(env, head):
    with pytest.raises(errors.NotCallable):
        evaluate(Pair(head, Nil), env)


def test_improper_argument_list_is_rejected_before_evaluation(env, effects):
    expr = Pair(S("note"), Pair(L(S("note"), 1), 2))
    with pytest.raises(errors.MalformedExpression):
        evaluate(expr, env)
    assert effects == []


def test_primitive_error_keeps_cause(env):
    with pytest.raises(errors.PrimitiveError) as info:
        evaluate(L(S("fail")), env)
    assert info.value.name == "fail"
    assert isinstance(info.value.__cause__, ValueError)
    assert isinstance(info.value.cause, ValueError)


def test_primitive_type_errors_are_wrapped(env):
    with pytest.raises(errors.PrimitiveError) as info:
        evaluate(L(S("+"), 1, "two"), env)
    assert isinstance(info.value.cause, TypeError)


def test_reentrant_primitive_errors_are_wrapped(env):
    def call_with(args):
        fn, arg = args
        return evaluate(Pair(fn, L(arg)), env)

    env.define(S("call-with"), Primitive("call-with", call_with))
    assert evaluate(L(S("call-with"), S("-"), 5), env) == 5
    with pytest.raises(errors.PrimitiveError) as info:
        evaluate(L(S("call-with"), L(S("fn"), [S("a")], S("nowhere")), 1), env)
    assert info.value.name == "call-with"
    assert isinstance(info.value.cause, errors.UnboundSymbol)
    assert info.value.__cause__ is info.value.cause


def test_all_errors_are_eval_errors(env):
    for expr in (S("nope"), L(1), None, L(S("fail"))):
        with pytest.raises(errors.EvalError):
            evaluate(expr, env)


# -----------------------------------------------------
# Special form names
# -----------------------------------------------------

def test_special_form_names_stay_syntax(env, effects):
    env.define(S("quote"), env.lookup(S("note")))
    # Still the quote form: the operand is returned unevaluated.
    assert evaluate(L(S("quote"), L(S("note"), 1)), env) == L(S("note"), 1)
    assert effects == []


def test_improper_special_form_operands(env):
    with pytest.raises(errors.MalformedExpression):
        evaluate(Pair(S("do"), Pair(1, 2)), env)


def test_evaluation_does_not_mutate_the_expression(env):
    expr = L(S("do"), L(S("def"), S("x"), L(S("+"), 1, 2)), S("x"))
    before = L(S("do"), L(S("def"), S("x"), L(S("+"), 1, 2)), S("x"))
    assert evaluate(expr, env) == 3
    assert expr == before
