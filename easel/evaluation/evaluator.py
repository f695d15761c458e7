"""Expression evaluator for Easel.

`evaluate` maps an expression node and a scope to a value. It never mutates the
scope; statements do that (see easel.evaluation.executor).
"""

from __future__ import annotations

from easel import Node, Value
from easel.errors import UnknownNodeError
from easel.evaluation.expression_forms import EXPRESSION_FORMS
from easel.types.node import node_type
from easel.types.scope import Scope


def evaluate(expr: Node, scope: Scope) -> Value:
    """Evaluate an expression node in `scope` and return its value."""
    kind = node_type(expr)
    form = EXPRESSION_FORMS.get(kind)
    if form is None:
        raise UnknownNodeError(f"Unknown expression type: {kind}")
    return form(expr, scope, evaluate)
