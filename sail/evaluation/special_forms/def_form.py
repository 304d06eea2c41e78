from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.environment import Environment
from sail.types.symbol import Symbol


def def_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (def name value)
    Binds in the innermost frame only; an outer binding of the same name is
    shadowed, not changed. Returns the bound value.
    """
    if len(operands) != 2:
        raise MalformedExpression("def requires exactly 2 operands: (def name value)")

    name, val_expr = operands
    if not isinstance(name, Symbol):
        raise MalformedExpression(f"def first operand must be a Symbol, got {name!r}", name)
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
