from easel import EvaluatorFn, Node, Value
from easel.evaluation.apply import apply
from easel.types.node import block_field, field
from easel.types.scope import Scope


def describe_caller(caller: Node) -> str:
    """Best-effort name of a caller expression for error messages."""
    if isinstance(caller, str):
        return caller
    if hasattr(caller, "get"):
        if "name" in caller:
            return str(caller["name"])
        if caller.get("type") == "Get":
            prop = caller.get("property")
            return f"{describe_caller(caller.get('caller'))}.{describe_caller(prop)}"
        if "value" in caller:
            return str(caller["value"])
    return repr(caller)


def call_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    caller_expr = field(node, "caller")
    caller = evaluate_fn(caller_expr, scope)
    args = [evaluate_fn(arg, scope) for arg in block_field(node, "args")]
    return apply(caller, args, describe_caller(caller_expr))
