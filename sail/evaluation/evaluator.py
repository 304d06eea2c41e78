"""Core evaluator and trampoline for the Sail interpreter.

Implements special-form dispatch and tail-call aware application via a simple
trampoline using TailCall objects. Closure bodies, `do` and the branches of
`if` are tail positions, so tail recursion runs in constant native stack.
Non-tail recursion still uses the Python stack and fails with RecursionLimit
once that is exhausted.
"""

from __future__ import annotations

import sys
from typing import Callable, Iterable

from sail import SExpression, LispValue
from sail.errors import MalformedExpression, RecursionLimit
from sail.evaluation.apply import apply, run_tail_calls
from sail.evaluation.special_forms import SPECIAL_FORMS
from sail.types.boolean import BooleanType
from sail.types.closure import Closure
from sail.types.environment import Environment
from sail.types.nil import Nil, NilType
from sail.types.pair import Pair, to_list
from sail.types.primitive import Primitive
from sail.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: evaluate `expr` in `env` and return its value.

    Raises an EvalError subclass when evaluation cannot proceed. Side effects
    performed before the failure are kept.
    """
    try:
        return run_tail_calls(evaluate0(expr, env, True), evaluate0)
    except RecursionError:
        raise RecursionLimit(sys.getrecursionlimit()) from None


def evaluate0(
    expr: SExpression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns either a value or, only when `is_tail_call` is set, a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(head, tail):
            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                operands = to_list(tail, "Special form operands")
                return SPECIAL_FORMS[head](operands, env, evaluate0, is_tail_call)

            # Shape is checked before anything is evaluated.
            operands = to_list(tail, "Argument list")
            fn = evaluate0(head, env)
            args = [evaluate0(arg, env) for arg in operands]
            return apply(fn, args, env, evaluate0, is_tail_call)

        case bool():
            # bool is an int subclass; Sail booleans are T and F.
            pass

        case int() | float() | str() | list():
            return expr

        case NilType() | BooleanType() | Primitive() | Closure():
            return expr

    raise MalformedExpression(f"Cannot evaluate {expr!r}", expr)


def apply_value(fn: LispValue, args: Iterable[LispValue]) -> LispValue:
    """Apply a Sail callable to already-evaluated arguments.

    For primitives (map, apply, sort keys...) that call back into Sail code.
    """
    try:
        return run_tail_calls(apply(fn, list(args), None, evaluate0), evaluate0)
    except RecursionError:
        raise RecursionLimit(sys.getrecursionlimit()) from None


def run_program(
    exprs: Iterable[SExpression],
    global_env: Environment,
    eval_fn: Callable[[SExpression, Environment], LispValue] = evaluate,
) -> LispValue:
    """Evaluate a top-level program in a fresh frame below `global_env`.

    Expressions are evaluated in order; the last value is the program's
    result, or Nil for an empty program.
    """
    env = global_env.child()
    result: LispValue = Nil
    for expr in exprs:
        result = eval_fn(expr, env)
    return result
