from easel import EvaluatorFn, Node
from easel.errors import UnknownNodeError
from easel.types.completion import NORMAL, Completion, ReturnSignal
from easel.types.function_fn import UserFunction
from easel.types.node import block_field, field, name_field
from easel.types.scope import Scope


def func_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    name = name_field(node)
    params = field(node, "params", "args")
    if not isinstance(params, list) or not all(isinstance(p, str) for p in params):
        raise UnknownNodeError(f"Function {name} params must be a list of names, got {params!r}")
    scope.define(name, UserFunction(name, list(params), block_field(node, "body"), scope, run_fn))
    return NORMAL


def return_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    return ReturnSignal(evaluate_fn(field(node, "value"), scope))
