from timeit import timeit

from sail.interpreter import Interpreter
from sail.types import Environment, Symbol, make_list, from_bool

S = Symbol
L = make_list

PRIMITIVES = {
    "+": lambda args: sum(args),
    "-": lambda args: args[0] - sum(args[1:]),
    "*": lambda args: args[0] * args[1],
    "<=": lambda args: from_bool(args[0] <= args[1]),
}


def time_program(program: list, rounds: int) -> float:
    """Time repeated runs of a program; each run gets a fresh program frame."""
    itp = Interpreter(PRIMITIVES)
    # Warmup
    itp.run(program)
    # Timed
    return timeit(lambda: itp.run(program), number=rounds)


# Micro-benchmark: environment lookup chain (no evaluation involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42)
    env = root
    for _ in range(n_envs):
        env = env.child()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


# ((fn [x y] (+ x y)) 1 2)
CLOSURE_APPLY = [L(L(S("fn"), [S("x"), S("y")], L(S("+"), S("x"), S("y"))), 1, 2)]

# (def fact (fn [n acc] (if (<= n 1) acc (fact (- n 1) (* n acc)))))
# (fact 100 1)
TAIL_RECURSION = [
    L(S("def"), S("fact"), L(
        S("fn"), [S("n"), S("acc")],
        L(S("if"), L(S("<="), S("n"), 1),
          S("acc"),
          L(S("fact"), L(S("-"), S("n"), 1), L(S("*"), S("n"), S("acc")))))),
    L(S("fact"), 100, 1),
]

# (def i 0) (def acc 0)
# (while (<= i 500) (set acc (+ acc i)) (set i (+ i 1)))
WHILE_SUM = [
    L(S("def"), S("i"), 0),
    L(S("def"), S("acc"), 0),
    L(S("while"), L(S("<="), S("i"), 500),
      L(S("set"), S("acc"), L(S("+"), S("acc"), S("i"))),
      L(S("set"), S("i"), L(S("+"), S("i"), 1))),
    S("acc"),
]


def _print_one(name: str, program: list, rounds: int) -> None:
    t = time_program(program, rounds)
    print(f"Benchmark: {name}")
    print(f"  time: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print_one("closure application", CLOSURE_APPLY, rounds=20000)
    _print_one("tail recursion (factorial)", TAIL_RECURSION, rounds=500)
    _print_one("while loop sum 0..500", WHILE_SUM, rounds=500)
