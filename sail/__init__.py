# Core type aliases for Sail's data model.
# Atoms are plain Python values (int, float, str) plus a few singletons
# (Nil, T, F). Lists are chains of Pair cells ending in Nil, vectors are
# Python lists, and callables are Primitive or Closure instances.
#
# Naming guidance:
# - SExpression: use where a value is treated as code (special forms, quoting).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; code and data share one representation.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code-as-data)
SExpression = LispValue

# Evaluator function type: single-step evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
