"""Sail value model and environments."""

from sail.types.symbol import Symbol
from sail.types.nil import Nil, NilType
from sail.types.boolean import BooleanType, T, F, from_bool, is_truthy
from sail.types.pair import Pair, from_iterable, is_equal, is_list, make_list, to_list
from sail.types.primitive import Primitive, primitive
from sail.types.environment import Environment
from sail.types.closure import Closure
from sail.types.tail_call import TailCall

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "BooleanType",
    "T",
    "F",
    "from_bool",
    "is_truthy",
    "Pair",
    "from_iterable",
    "is_equal",
    "is_list",
    "make_list",
    "to_list",
    "Primitive",
    "primitive",
    "Environment",
    "Closure",
    "TailCall",
]
