from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.environment import Environment


def quote_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    if len(operands) != 1:
        raise MalformedExpression("quote expects exactly 1 operand")
    return operands[0]
