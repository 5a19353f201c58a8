"""Registry of special forms for the rlisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, by exact head name and before evaluating
anything, to dispatch special forms ahead of ordinary function application.
Each handler receives the raw argument forms, the current environment and the
evaluator, and decides itself what to evaluate.
"""

from rlisp.types.symbol import Symbol
from rlisp.evaluation.special_forms.quote_forms import quote_form
from rlisp.evaluation.special_forms.if_form import if_form
from rlisp.evaluation.special_forms.define_form import defparameter_form
from rlisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("defparameter"): defparameter_form,
    Symbol("defun"): defun_form,
}
