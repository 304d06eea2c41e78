"""Printed representation of Sail values.

`to_string` renders values the way Sail source writes them: lists in
parentheses, vectors in brackets, booleans as #T/#F and the unit value as
nil. With `readable=False` strings are emitted raw (for display output).
With `color=True` symbols and callables get ANSI colors, for REPL-style hosts.
"""

from __future__ import annotations

from io import StringIO

from sail import LispValue
from sail.types.boolean import BooleanType
from sail.types.closure import Closure
from sail.types.nil import Nil
from sail.types.pair import Pair
from sail.types.primitive import Primitive
from sail.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_CLOSURE = "\033[92m"
COLOR_PRIMITIVE = "\033[95m"

STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
}


def _paint(text: str, code: str, color: bool) -> str:
    return f"{code}{text}{RESET}" if color else text


def _write(buffer: StringIO, obj: LispValue, readable: bool, color: bool) -> None:
    if obj is Nil:
        buffer.write("nil")
    elif isinstance(obj, BooleanType):
        buffer.write(repr(obj))
    elif isinstance(obj, Symbol):
        buffer.write(_paint(obj.id, COLOR_SYMBOL, color))
    elif isinstance(obj, str):
        if readable:
            buffer.write('"')
            buffer.write("".join(STRING_ESCAPES.get(c, c) for c in obj))
            buffer.write('"')
        else:
            buffer.write(obj)
    elif isinstance(obj, Pair):
        buffer.write("(")
        cell: LispValue = obj
        first = True
        # Tails are walked in a loop; only nesting in heads recurses.
        while isinstance(cell, Pair):
            if not first:
                buffer.write(" ")
            _write(buffer, cell.head, readable, color)
            first = False
            cell = cell.tail
        if cell is not Nil:
            buffer.write(" . ")
            _write(buffer, cell, readable, color)
        buffer.write(")")
    elif isinstance(obj, list):
        buffer.write("[")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(buffer, item, readable, color)
        buffer.write("]")
    elif isinstance(obj, Closure):
        with StringIO() as inner:
            inner.write("(fn [")
            inner.write(" ".join(p.id for p in obj.params))
            inner.write("]")
            for expr in obj.body:
                inner.write(" ")
                _write(inner, expr, readable, False)
            inner.write(")")
            buffer.write(_paint(inner.getvalue(), COLOR_CLOSURE, color))
    elif isinstance(obj, Primitive):
        buffer.write(_paint(repr(obj), COLOR_PRIMITIVE, color))
    else:
        buffer.write(str(obj))


def to_string(obj: LispValue, readable: bool = True, color: bool = False) -> str:
    with StringIO() as buffer:
        _write(buffer, obj, readable, color)
        return buffer.getvalue()
