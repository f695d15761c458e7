from easel import EvaluatorFn, Node
from easel.types.completion import NORMAL, Completion
from easel.types.node import name_field
from easel.types.scope import Scope


def var_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    """Declare (or re-declare) a variable. A Var without a value is a bare reference."""
    if node.get("value") is None:
        evaluate_fn(node, scope)
        return NORMAL
    scope.define(name_field(node), evaluate_fn(node["value"], scope))
    return NORMAL
