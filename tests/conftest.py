import pytest

from sail.interpreter import register
from sail.types import Environment, Nil, from_bool

# Every test gets a fresh global frame with a handful of primitives.
# `note` records its single argument in the `effects` list and returns it,
# which makes evaluation order and skipped branches observable.


def _mul(args):
    result = 1
    for x in args:
        result *= x
    return result


def _fail(args):
    raise ValueError("boom")


def _push(args):
    vec, item = args
    vec.append(item)
    return vec


@pytest.fixture
def effects():
    return []


@pytest.fixture
def env(effects):
    def note(args):
        effects.append(args[0])
        return args[0]

    e = Environment()
    register(
        e,
        {
            "+": lambda args: sum(args),
            "-": lambda args: args[0] - sum(args[1:]),
            "*": _mul,
            "=": lambda args: from_bool(args[0] == args[1]),
            "<": lambda args: from_bool(args[0] < args[1]),
            "vector": lambda args: list(args),
            "push": _push,
            "note": note,
            "fail": _fail,
            "unit": lambda args: Nil,
        },
    )
    return e
