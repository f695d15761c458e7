"""Statement executor for Easel.

`execute` runs one statement against a scope, mutating it in place, and reports
how the statement completed. `run` executes a statement sequence and stops at
the first Return, handing its ReturnSignal to the caller (the function call
boundary in easel.types.function_fn).
"""

from __future__ import annotations

import logging

from easel import Node
from easel.evaluation.evaluator import evaluate
from easel.evaluation.statement_forms import STATEMENT_FORMS
from easel.types.completion import NORMAL, Completion
from easel.types.node import node_type
from easel.types.scope import Scope

logger = logging.getLogger(__name__)


def execute(stmt: Node, scope: Scope) -> Completion:
    """Execute a single statement node in `scope`."""
    kind = node_type(stmt)
    logger.debug("executing %s", kind)
    form = STATEMENT_FORMS.get(kind)
    if form is None:
        # Bare expression statement: evaluate for its effects, drop the value
        evaluate(stmt, scope)
        return NORMAL
    return form(stmt, scope, evaluate, run)


def run(statements: list[Node], scope: Scope) -> Completion:
    """Execute statements in order; a Return stops the sequence."""
    for stmt in statements:
        completion = execute(stmt, scope)
        if completion.is_return:
            return completion
    return NORMAL
