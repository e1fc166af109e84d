"""Registry of special forms for the Sigma evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table, keyed on the literal head symbol, before
ordinary function application.
"""

from sigma.types.symbol import DEFINE, BEGIN, LAMBDA
from sigma.evaluation.special_forms.begin_form import begin_form
from sigma.evaluation.special_forms.lambda_form import lambda_form
from sigma.evaluation.special_forms.define_form import define_form

SPECIAL_FORMS = {
    DEFINE: define_form,
    BEGIN: begin_form,
    LAMBDA: lambda_form,
}
