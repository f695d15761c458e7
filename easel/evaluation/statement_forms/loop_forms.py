"""Looping statements for Easel: While and For.

A Return inside a loop body stops the loop and travels on to the enclosing
function call untouched.
"""

from __future__ import annotations

import math
from numbers import Number

from easel import EvaluatorFn, Node, Value
from easel.errors import EaselTypeError, UnknownNodeError
from easel.evaluation.statement_forms.conditional_form import require_boolean
from easel.types.completion import NORMAL, Completion
from easel.types.node import block_field, field, name_field
from easel.types.scope import Scope


def while_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    """Re-check the condition before every pass; the body runs in `scope` itself."""
    condition = field(node, "condition")
    body = block_field(node, "body")
    while require_boolean(evaluate_fn(condition, scope), "while"):
        completion = run_fn(body, scope)
        if completion.is_return:
            return completion
    return NORMAL


def range_bound(value: Value, which: str) -> int:
    if isinstance(value, bool) or not isinstance(value, Number) or not math.isfinite(value):
        raise EaselTypeError(f"Expected number as range {which}, got {value!r}")
    return int(value)


def for_form(node: Node, scope: Scope, evaluate_fn: EvaluatorFn, run_fn) -> Completion:
    """Iterate the half-open range [start, end) in one loop-local scope.

    The bounds are evaluated once and fix the number of passes at end - start.
    The loop variable starts at `start` and after every pass it becomes its
    current value plus one, so a body that moves it shifts the values seen by
    later passes but never the pass count. A non-numeric value is left alone.
    """
    loop_var = name_field(node, "id")
    bounds = field(node, "range")
    if not isinstance(bounds, list) or len(bounds) != 2:
        raise UnknownNodeError(f"For range must hold exactly two expressions, got {bounds!r}")
    start = range_bound(evaluate_fn(bounds[0], scope), "begin")
    end = range_bound(evaluate_fn(bounds[1], scope), "end")
    body = block_field(node, "body")

    local_scope = scope.snapshot()
    local_scope.define(loop_var, start)
    for _ in range(end - start):
        completion = run_fn(body, local_scope)
        if completion.is_return:
            return completion
        current = local_scope.lookup(loop_var)
        if isinstance(current, Number) and not isinstance(current, bool):
            local_scope.define(loop_var, current + 1)
    return NORMAL
