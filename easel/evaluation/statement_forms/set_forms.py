"""Assignment statements.

SetVar re-binds an existing name. SetProperty writes a struct field or an array
slot. A plain `Set` node is routed by its shape: with a `name` it is a variable
assignment, with `caller` and `property` it is a property assignment.
"""

from easel import EvaluatorFn, Node, Value
from easel.errors import EaselLookupError, EaselTypeError, UnknownNodeError
from easel.evaluation.expression_forms.get_form import array_index, caller_node, property_key
from easel.types.completion import NORMAL, Completion
from easel.types.node import field, name_field
from easel.types.scope import Scope
from easel.types.struct import StructInstance


def set_var_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    name = name_field(node)
    if name not in scope:
        raise EaselLookupError(f"Variable {name} not found in scope")
    scope.assign(name, evaluate_fn(field(node, "value"), scope))
    return NORMAL


def write_property(target: Value, key: Value, value: Value) -> None:
    if isinstance(target, list):
        target[array_index(target, key)] = value
        return
    if isinstance(target, StructInstance):
        if not isinstance(key, str):
            raise EaselTypeError(f"Expected string as property, got {key!r}")
        target.set(key, value)
        return
    raise EaselTypeError(f"Expected instance but got {target!r}")


def set_property_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    target = evaluate_fn(caller_node(node), scope)
    key = property_key(node, scope, evaluate_fn)
    write_property(target, key, evaluate_fn(field(node, "value"), scope))
    return NORMAL


def set_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    if "name" in node:
        return set_var_form(node, scope, evaluate_fn, run_fn)
    if "caller" in node and "property" in node:
        return set_property_form(node, scope, evaluate_fn, run_fn)
    raise UnknownNodeError(f"Set node needs either a name or a caller and property: {node!r}")
