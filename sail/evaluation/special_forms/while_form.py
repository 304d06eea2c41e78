from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.boolean import is_truthy
from sail.types.nil import Nil
from sail.types.environment import Environment


def while_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (while cond body...)
    Re-evaluates cond before every pass and stops at the first #F. There is
    no iteration bound. Always returns nil.
    """
    if not operands:
        raise MalformedExpression("while requires a condition")

    cond, *body = operands
    while is_truthy(evaluate_fn(cond, env)):
        for expr in body:
            evaluate_fn(expr, env)
    return Nil
