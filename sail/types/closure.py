"""Closure representation and argument binding for Sail."""

from __future__ import annotations

from typing import Iterable

from sail import SExpression, LispValue
from sail.errors import ArityMismatch, MalformedExpression
from sail.types.environment import Environment
from sail.types.symbol import Symbol


class Closure:
    """A first-class function: parameters, body forms and the captured env."""

    __slots__ = ("params", "body", "env")

    def __init__(
        self,
        params: Iterable[Symbol],
        body: Iterable[SExpression],
        env: Environment,
    ):
        params = tuple(params)
        for p in params:
            if not isinstance(p, Symbol):
                raise MalformedExpression(f"Parameter must be a symbol, got {p!r}", p)
        if len(set(params)) != len(params):
            raise MalformedExpression("Duplicate parameter name in parameter list")
        self.params: tuple[Symbol, ...] = params
        self.body: tuple[SExpression, ...] = tuple(body)
        # Captured by reference: later definitions in env stay visible.
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        from sail.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind argument values to this closure's parameters and return the new
        call frame. The frame's parent is the captured environment, never the
        caller's.
        """
        if len(args) != len(self.params):
            raise ArityMismatch(len(self.params), len(args))
        frame = Environment(outer=self.env)
        frame.vars.update(zip(self.params, args))
        return frame
