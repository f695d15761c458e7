"""Registry of expression forms for the Easel evaluator.

Maps node type names to handler functions `(node, scope, evaluate_fn) -> value`.
The evaluator consults this table to dispatch every expression node.
"""

from easel.evaluation.expression_forms.var_form import var_form, literal_form
from easel.evaluation.expression_forms.operator_forms import unary_form, binary_form
from easel.evaluation.expression_forms.collection_forms import array_form, instance_form
from easel.evaluation.expression_forms.call_form import call_form
from easel.evaluation.expression_forms.get_form import get_form

EXPRESSION_FORMS = {
    "Var": var_form,
    "Literal": literal_form,
    "Unary": unary_form,
    "Binary": binary_form,
    "Array": array_form,
    "Instance": instance_form,
    "Call": call_form,
    "Get": get_form,
}
