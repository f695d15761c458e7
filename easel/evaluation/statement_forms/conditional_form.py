from easel import EvaluatorFn, Node, Value
from easel.errors import EaselTypeError
from easel.types.completion import Completion
from easel.types.node import block_field, field
from easel.types.scope import Scope


def require_boolean(value: Value, where: str) -> bool:
    if not isinstance(value, bool):
        raise EaselTypeError(f"Expected boolean value in {where} condition, got {value!r}")
    return value


def conditional_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    # Both branches run in the current scope; their bindings outlive the statement
    condition = require_boolean(evaluate_fn(field(node, "condition"), scope), "if")
    if condition:
        return run_fn(block_field(node, "body"), scope)
    return run_fn(block_field(node, "otherwise"), scope)
