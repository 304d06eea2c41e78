from sail import EvaluatorFn
from sail import SExpression, LispValue
from sail.errors import MalformedExpression
from sail.types.closure import Closure
from sail.types.environment import Environment
from sail.types.nil import Nil
from sail.types.pair import Pair, to_list


def _param_list(form: SExpression) -> list[SExpression]:
    # [a b] reads as a vector, (a b) as a list; both are accepted.
    if isinstance(form, list):
        return form
    if form is Nil or isinstance(form, Pair):
        return to_list(form, "Parameter list")
    raise MalformedExpression(f"fn parameter list must be a vector or list, got {form!r}", form)


def fn_form(
    operands: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool,
) -> LispValue:
    """
    (fn [params...] body...)
    Nothing is evaluated here. The closure keeps a reference to `env`, so
    bindings added to it later are visible when the closure runs.
    An empty body makes a function that returns nil.
    """
    if not operands:
        raise MalformedExpression("fn requires at least a parameter list")

    params = _param_list(operands[0])
    return Closure(params, operands[1:], env)
