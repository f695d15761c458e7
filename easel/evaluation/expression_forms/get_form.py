"""Property reads: `object.field`, `array[index]`, `object[expr]`.

The caller is always an expression and is evaluated (a bare string stands for a
variable reference). With `isExpr` the property is an expression evaluated in
the current scope, otherwise it is a fixed key. Reading a user function off a
struct instance yields a method bound to that instance.
"""

from __future__ import annotations

from numbers import Number

from easel import EvaluatorFn, Node, Value
from easel.errors import EaselLookupError, EaselTypeError, UnknownNodeError
from easel.types.function_fn import BoundMethod, UserFunction
from easel.types.node import field, is_node, node_type
from easel.types.scope import Scope
from easel.types.struct import StructInstance


def caller_node(node: Node) -> Node:
    caller = field(node, "caller")
    if isinstance(caller, str):
        return {"type": "Var", "name": caller}
    return caller


def property_key(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    prop = field(node, "property")
    if node.get("isExpr", False):
        return evaluate_fn(prop, scope)
    if isinstance(prop, str):
        return prop
    if is_node(prop):
        kind = node_type(prop)
        if kind == "Literal":
            return evaluate_fn(prop, scope)
        if kind == "Var" and isinstance(prop.get("name"), str):
            return prop["name"]
    raise UnknownNodeError(f"Cannot use {prop!r} as a property name")


def array_index(array: list, key: Value) -> int:
    if isinstance(key, bool) or not isinstance(key, Number):
        raise EaselTypeError(f"Expected number as index, got {key!r}")
    index = int(key)
    if index != key or not 0 <= index < len(array):
        raise EaselLookupError(f"Index {key!r} out of range for array of length {len(array)}")
    return index


def read_property(target: Value, key: Value) -> Value:
    if isinstance(target, list):
        return target[array_index(target, key)]
    if isinstance(target, StructInstance):
        if not isinstance(key, str):
            raise EaselTypeError(f"Expected string as property, got {key!r}")
        return target.get(key)
    raise EaselTypeError(f"Expected instance but got {target!r}")


def get_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> Value:
    target = evaluate_fn(caller_node(node), scope)
    key = property_key(node, scope, evaluate_fn)
    value = read_property(target, key)
    # only Easel functions take the receiver; natives stored in fields are called as-is
    if isinstance(target, StructInstance) and isinstance(value, UserFunction):
        return BoundMethod(target, value)
    return value
