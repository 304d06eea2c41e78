"""Application engine for Sail.

Centralizes function application for the evaluator:
- Primitives are invoked with the evaluated argument list; their failures
  surface as PrimitiveError.
- Closures get a fresh frame parented to their captured environment. In tail
  position the body is handed back as a TailCall for the trampoline to run;
  elsewhere it is run to completion here.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sail import LispValue, SExpression, EvaluatorFn
from sail.errors import NotCallable, PrimitiveError
from sail.types.closure import Closure
from sail.types.environment import Environment
from sail.types.nil import Nil
from sail.types.primitive import Primitive
from sail.types.tail_call import TailCall

logger = logging.getLogger(__name__)


def eval_body(
    body: Sequence[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """Evaluate forms in order in `env`; the last one sits in tail position."""
    if not body:
        return Nil
    for expr in body[:-1]:
        evaluate_fn(expr, env)
    return evaluate_fn(body[-1], env, is_tail_call)


def run_tail_calls(result: LispValue, evaluate_fn: EvaluatorFn) -> LispValue:
    """Step the trampoline until a plain value comes back."""
    while isinstance(result, TailCall):
        result = eval_body(result.fn.body, result.env, evaluate_fn, True)
    return result


def apply_primitive(fn: Primitive, args: list[LispValue]) -> LispValue:
    try:
        return fn(args)
    except RecursionError:
        # Native stack exhaustion belongs to the evaluator, not the primitive.
        raise
    except Exception as exc:
        logger.debug("Primitive %s raised %r", fn.name, exc)
        raise PrimitiveError(fn.name, exc) from exc


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool,
) -> LispValue | TailCall:
    """Apply a Closure.

    Raises ArityMismatch unless exactly `fn.arity` arguments were supplied.
    In tail position a TailCall is returned; otherwise the body is evaluated
    (and its own tail calls trampolined) before returning.
    """
    frame = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, frame)
    return run_tail_calls(eval_body(fn.body, frame, evaluate_fn, True), evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment | None,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply either a Closure or a Primitive.

    `env` is the caller's environment. It plays no part in name resolution
    inside a closure body, which only sees the closure's captured chain.
    Anything else in operator position raises NotCallable.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn, tail)
    elif isinstance(head, Primitive):
        return apply_primitive(head, args)
    else:
        raise NotCallable(head)
