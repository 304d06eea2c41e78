from __future__ import annotations
import sys


class Symbol:
    """An interned name: Symbol("x") always returns the same object."""

    __slots__ = ("id",)

    _table: dict[str, Symbol] = {}

    def __new__(cls, name: str) -> Symbol:
        if not isinstance(name, str):
            raise TypeError(f"Symbol name must be a str, got {type(name).__name__}")
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            sym.id = sys.intern(name)
            # setdefault publishes atomically: racing threads all get the winner.
            sym = cls._table.setdefault(sym.id, sym)
        return sym

    @property
    def name(self) -> str:
        return self.id

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __reduce__(self):
        return (Symbol, (self.id,))

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
