from __future__ import annotations

from typing import Any


class SailError(Exception):
    """ Base class for all Sail errors"""
    pass


class EvalError(SailError):
    """ Raised when evaluation of an expression cannot proceed"""
    pass


class UnboundSymbol(EvalError):
    """ Raised when a symbol is looked up or set before it is bound"""

    def __init__(self, name: Any):
        super().__init__(f"Unbound symbol {name}")
        self.name = name


class NotCallable(EvalError):
    """ Raised when the operator position does not evaluate to a callable"""

    def __init__(self, value: Any):
        from sail.printer import to_string
        super().__init__(f"Cannot apply non-function {to_string(value)}")
        self.value = value


class ArityMismatch(EvalError):
    """ Raised when a closure is applied to the wrong number of arguments"""

    def __init__(self, expected: int, got: int):
        super().__init__(f"Expected {expected} argument(s), got {got}")
        self.expected = expected
        self.got = got


class MalformedExpression(EvalError):
    """ Raised when an expression or a special form's operands have the wrong shape"""

    def __init__(self, message: str, expr: Any = None):
        super().__init__(message)
        self.expr = expr


class PrimitiveError(EvalError):
    """ Raised when a native primitive fails; the original exception is the cause"""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"Primitive {name} failed: {cause}")
        self.name = name
        self.cause = cause


class RecursionLimit(EvalError):
    """ Raised when non-tail recursion exhausts the native stack"""

    def __init__(self, limit: int):
        super().__init__(f"Recursion depth exceeded (limit {limit})")
        self.limit = limit
