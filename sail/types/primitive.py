"""Native operations exposed to Sail code.

A primitive wraps a Python callable taking the list of already-evaluated
arguments and returning a Sail value. Argument checking and side effects
are the primitive's own business.
"""

from __future__ import annotations

from typing import Callable, Optional

from sail import LispValue

NativeFn = Callable[[list[LispValue]], LispValue]


class Primitive:
    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __repr__(self) -> str:
        return f"<primitive {self.name}>"


def primitive(name: Optional[str] = None) -> Callable[[NativeFn], Primitive]:
    """Decorator turning a native function into a Primitive.

        @primitive("+")
        def add(args):
            return sum(args)
    """
    def wrap(fn: NativeFn) -> Primitive:
        return Primitive(name or fn.__name__, fn)
    return wrap
