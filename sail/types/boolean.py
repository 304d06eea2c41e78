"""Sail booleans.

`#T` and `#F` are the only boolean values. Conditionals test values with
`is_truthy`: only `F` is false, and every other value, including nil, 0 and
the empty string, counts as true.
"""

from __future__ import annotations

from sail import LispValue


class BooleanType:
    __slots__ = ("value",)

    _instances: dict[bool, BooleanType] = {}

    # Only two instances ever exist, so identity checks against F are safe.
    def __new__(cls, value: bool) -> BooleanType:
        value = bool(value)
        inst = cls._instances.get(value)
        if inst is None:
            inst = super().__new__(cls)
            inst.value = value
            inst = cls._instances.setdefault(value, inst)
        return inst

    def __repr__(self):
        return "#T" if self.value else "#F"

    # Host convenience only; the evaluator never relies on Python truthiness.
    def __bool__(self):
        return self.value

    def __reduce__(self):
        return "T" if self.value else "F"


T = BooleanType(True)
F = BooleanType(False)


def from_bool(value: bool) -> BooleanType:
    """Map a Python bool onto the Sail singletons."""
    return T if value else F


def is_truthy(value: LispValue) -> bool:
    return value is not F
