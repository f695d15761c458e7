from __future__ import annotations

import logging
import sys
from typing import Mapping, TextIO

from easel import Node, Value
from easel.builtin.stdlib_builtin import register
from easel.config import get_recursion_limit
from easel.errors import EaselRecursionError, EaselReturnError
from easel.evaluation.executor import run
from easel.reader.ast_loader import load_ast
from easel.types.scope import Scope

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Easel programs (lists of AST nodes) against one root scope.
    The root scope is built once from the injected bindings plus the standard
    library and keeps its definitions across calls to `run`.
    """

    def __init__(
        self,
        bindings: Mapping[str, Value] | None = None,
        stdlib: bool = True,
        *,
        stdout: TextIO | None = None,
        stdin: TextIO | None = None,
    ):
        # each Easel call nests a dozen or so Python frames
        sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))
        self.scope: Scope = Scope()
        if stdlib:
            register(self.scope, stdout=stdout, stdin=stdin)
        if bindings:
            self.scope.update(bindings)

    def run(self, program: list[Node]) -> Scope:
        """Execute the statements in order and return the root scope."""
        logger.debug("running %d top-level statements", len(program))
        try:
            completion = run(program, self.scope)
        except RecursionError as ex:
            raise EaselRecursionError("Maximum call depth exceeded") from ex
        if completion.is_return:
            raise EaselReturnError("Return statement outside of a function body")
        return self.scope

    def run_json(self, text: str) -> Scope:
        return self.run(load_ast(text))
