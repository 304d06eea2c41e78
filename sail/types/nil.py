from __future__ import annotations


class NilType:
    """The unit value; also terminates every proper list."""

    __slots__ = ()

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    # copy/pickle hand back the module singleton
    def __reduce__(self):
        return "Nil"


Nil = NilType()
