from __future__ import annotations

import logging
from typing import Callable, Iterable, Mapping, Union

from sail import SExpression, LispValue
from sail.errors import EvalError
from sail.evaluation.evaluator import evaluate, run_program
from sail.types.environment import Environment
from sail.types.primitive import Primitive
from sail.types.symbol import Symbol

logger = logging.getLogger(__name__)

PrimitiveTable = Union[Mapping[Union[str, Symbol], Callable], Iterable[Primitive]]


def register(env: Environment, primitives: PrimitiveTable) -> None:
    """Bind native operations into `env`.

    Accepts either an iterable of Primitive objects, bound under their own
    names, or a mapping from name to Primitive or plain callable taking the
    argument list. Plain callables are wrapped in a Primitive.
    """
    if isinstance(primitives, Mapping):
        items = primitives.items()
    else:
        items = ((p.name, p) for p in primitives)

    bindings: dict[Symbol, Primitive] = {}
    for name, fn in items:
        sym = name if isinstance(name, Symbol) else Symbol(name)
        if not isinstance(fn, Primitive):
            if not callable(fn):
                raise TypeError(f"Primitive {sym} must be callable, got {fn!r}")
            fn = Primitive(sym.id, fn)
        bindings[sym] = fn
    env.update(bindings)


class Interpreter:
    """
    Host harness around the evaluator.

    Owns a global frame holding the registered primitives. `eval` works in a
    session frame that persists across calls (REPL style); `run` evaluates a
    whole program in a fresh frame below the global one each time.
    One Interpreter must only be driven from one thread at a time.
    Constructing one never touches process-wide state such as the native
    recursion limit; see `sail.config.apply_recursion_limit`.
    """

    def __init__(
        self,
        primitives: PrimitiveTable | None = None,
        *,
        eval_fn: Callable[[SExpression, Environment], LispValue] | None = None,
    ):
        self.eval_fn = eval_fn or evaluate
        self.globals: Environment = Environment()
        if primitives is not None:
            register(self.globals, primitives)
        self.session: Environment = self.globals.child()

    def register(self, primitives: PrimitiveTable) -> None:
        register(self.globals, primitives)

    def define(self, name: str | Symbol, value: LispValue) -> None:
        sym = name if isinstance(name, Symbol) else Symbol(name)
        self.globals.define(sym, value)

    def eval(self, expr: SExpression) -> LispValue:
        """Evaluate one expression in the session frame."""
        return self.eval_fn(expr, self.session)

    def run(self, exprs: Iterable[SExpression]) -> LispValue:
        """Run a program (a sequence of expressions) and return its last value."""
        exprs = list(exprs)
        logger.debug("Running program of %d expression(s)", len(exprs))
        try:
            return run_program(exprs, self.globals, self.eval_fn)
        except EvalError as exc:
            logger.debug("Program failed: %s", exc)
            raise

