from easel import EvaluatorFn, Node, Value
from easel.evaluation.operators import apply_binary, apply_unary
from easel.types.node import field
from easel.types.scope import Scope


def unary_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    operand = evaluate_fn(field(node, "value", "apply"), scope)
    return apply_unary(field(node, "operator"), operand)


def binary_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    # No short-circuit: && and || see both operands already evaluated
    left = evaluate_fn(field(node, "left"), scope)
    right = evaluate_fn(field(node, "right"), scope)
    return apply_binary(field(node, "operator"), left, right)
