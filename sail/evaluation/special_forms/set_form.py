from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.symbol import Symbol
from sail.types.environment import Environment


def set_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if len(operands) != 2:
        raise MalformedExpression("set requires exactly 2 operands: (set name value)")
    var_sym, val_expr = operands
    if not isinstance(var_sym, Symbol):
        raise MalformedExpression(f"set first operand must be a Symbol, got {var_sym!r}", var_sym)
    # The value is computed before the target is resolved, so an unbound
    # target still sees the value expression's side effects.
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
