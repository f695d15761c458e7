from easel import EvaluatorFn, Node, Value
from easel.types.node import field, name_field
from easel.types.scope import Scope


def var_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    return scope.lookup(name_field(node))


def literal_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    # Numeric literals carry their display text in "value" and the number in "content"
    if "content" in node:
        return node["content"]
    return field(node, "value")
