from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.boolean import is_truthy
from sail.types.nil import Nil
from sail.types.environment import Environment


def if_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    if len(operands) not in (2, 3):
        raise MalformedExpression("if requires a condition, a then-branch and an optional else-branch")

    cond = evaluate_fn(operands[0], env)

    if is_truthy(cond):
        return evaluate_fn(operands[1], env, is_tail_call)
    elif len(operands) == 3:
        return evaluate_fn(operands[2], env, is_tail_call)
    else:
        return Nil
