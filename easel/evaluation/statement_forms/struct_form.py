from easel import EvaluatorFn, Node
from easel.errors import UnknownNodeError
from easel.types.completion import NORMAL, Completion
from easel.types.node import field, name_field
from easel.types.scope import Scope
from easel.types.struct import StructType


def struct_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    name = name_field(node)
    members = field(node, "members")
    if not isinstance(members, list) or not all(isinstance(m, str) for m in members):
        raise UnknownNodeError(f"Struct {name} members must be a list of names, got {members!r}")
    scope.define(name, StructType(name, members))
    return NORMAL
