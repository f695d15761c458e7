"""Registry of statement forms for the Easel executor.

Maps node type names to handlers `(node, scope, evaluate_fn, run_fn) -> Completion`.
Node types missing from this table are executed as bare expression statements.
"""

from easel.evaluation.statement_forms.define_form import var_form
from easel.evaluation.statement_forms.set_forms import set_form, set_var_form, set_property_form
from easel.evaluation.statement_forms.struct_form import struct_form
from easel.evaluation.statement_forms.func_form import func_form, return_form
from easel.evaluation.statement_forms.loop_forms import while_form, for_form
from easel.evaluation.statement_forms.conditional_form import conditional_form

STATEMENT_FORMS = {
    "Var": var_form,
    "Set": set_form,
    "SetVar": set_var_form,
    "SetProperty": set_property_form,
    "Struct": struct_form,
    "Func": func_form,
    "Return": return_form,
    "While": while_form,
    "For": for_form,
    "Conditional": conditional_form,
}
