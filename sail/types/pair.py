"""Cons cells and proper-list helpers.

A list is either Nil or a Pair whose tail is a list. Pairs with any other
tail are legal values (improper lists) but cannot be used where an operand
list is expected.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from sail import LispValue
from sail.errors import MalformedExpression
from sail.types.nil import Nil


class Pair:
    __slots__ = ("head", "tail")
    __match_args__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue = Nil):
        self.head = head
        self.tail = tail

    def __iter__(self) -> Iterator[LispValue]:
        cell: LispValue = self
        while isinstance(cell, Pair):
            yield cell.head
            cell = cell.tail
        if cell is not Nil:
            raise MalformedExpression("Cannot iterate over an improper list", self)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        a: LispValue = self
        b: LispValue = other
        # Walk tails iteratively so long lists do not recurse per element.
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a is b:
                return True
            if not is_equal(a.head, b.head):
                return False
            a, b = a.tail, b.tail
        return is_equal(a, b)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        from sail.printer import to_string
        return to_string(self)


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: same type and equal contents, element-wise for sequences."""
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def from_iterable(items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a list from `items`, ending in `tail` (Nil for a proper list)."""
    result = tail
    for item in reversed(list(items)):
        result = Pair(item, result)
    return result


def make_list(*items: LispValue) -> LispValue:
    return from_iterable(items)


def is_list(value: LispValue) -> bool:
    """True for Nil and for Pair chains that end in Nil."""
    while isinstance(value, Pair):
        value = value.tail
    return value is Nil


def to_list(value: LispValue, what: str = "list") -> list[LispValue]:
    """Copy a proper list into a Python list.

    Raises MalformedExpression if `value` is not a proper list; `what` names
    the thing being converted in the error message.
    """
    items: list[LispValue] = []
    cell = value
    while isinstance(cell, Pair):
        items.append(cell.head)
        cell = cell.tail
    if cell is not Nil:
        raise MalformedExpression(f"{what} must be a proper list", value)
    return items
