from collections.abc import Mapping

from easel import EvaluatorFn, Node, Value
from easel.errors import EaselTypeError, UnknownNodeError
from easel.types.node import field, name_field
from easel.types.scope import Scope
from easel.types.struct import StructInstance, StructType


def array_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> list[Value]:
    elements = field(node, "value")
    if not isinstance(elements, list):
        raise UnknownNodeError(f"Array node expects a list of elements, got {elements!r}")
    return [evaluate_fn(element, scope) for element in elements]


def instance_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn) -> StructInstance:
    name = name_field(node)
    constructor = scope.lookup(name, kind="Struct")
    if not isinstance(constructor, StructType):
        raise EaselTypeError(f"{name} is not a struct")

    members = field(node, "members")
    if not isinstance(members, Mapping):
        raise UnknownNodeError(f"Instance node expects a mapping of members, got {members!r}")
    fields = {key: evaluate_fn(expr, scope) for key, expr in members.items()}
    return constructor.construct(fields)
