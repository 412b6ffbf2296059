"""Registry of special forms for the pairlisp evaluator.

Maps names to handler functions that receive their argument expressions
unevaluated. The evaluator consults this table before primitives and
user-defined closures.
"""

from pairlisp.evaluation.special_forms.quote_form import quote_form
from pairlisp.evaluation.special_forms.lambda_form import lambda_form
from pairlisp.evaluation.special_forms.define_form import define_form
from pairlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "lambda": lambda_form,
    "define": define_form,
    "if": if_form,
}
