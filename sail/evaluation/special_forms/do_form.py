from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.evaluation.apply import eval_body
from sail.types.environment import Environment


def do_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    return eval_body(operands, env, evaluate_fn, is_tail_call)
