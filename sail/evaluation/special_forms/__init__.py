"""Registry of special forms for the Sail evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these names always denote syntax, even where a frame binds the same symbol.

Every handler has the signature

    handler(operands, env, evaluate_fn, is_tail_call) -> value

where `operands` is the Python list of unevaluated operand expressions.
"""

from sail.types.symbol import Symbol
from sail.evaluation.special_forms.def_form import def_form
from sail.evaluation.special_forms.set_form import set_form
from sail.evaluation.special_forms.if_form import if_form
from sail.evaluation.special_forms.while_form import while_form
from sail.evaluation.special_forms.do_form import do_form
from sail.evaluation.special_forms.fn_form import fn_form
from sail.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Symbol("def"): def_form,
    Symbol("set"): set_form,
    Symbol("if"): if_form,
    Symbol("while"): while_form,
    Symbol("do"): do_form,
    Symbol("fn"): fn_form,
    Symbol("quote"): quote_form,
}
