from sail.types.closure import Closure
from sail.types.environment import Environment


class TailCall:
    """A closure body still to be run, returned from tail position for the trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
