"""Registry of special forms for the Lispy evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Handlers receive the operands unevaluated.
"""

from lispy.types.symbol import Symbol
from lispy.evaluation.special_forms.quote_form import quote_form
from lispy.evaluation.special_forms.set_form import setq_form
from lispy.evaluation.special_forms.define_form import defun_form
from lispy.evaluation.special_forms.cond_form import cond_form
from lispy.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("setq"): setq_form,
    Symbol("defun"): defun_form,
    Symbol("cond"): cond_form,
    Symbol("\\"): lambda_form,
    Symbol("lambda"): lambda_form,
}
