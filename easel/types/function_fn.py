"""User-defined functions and bound methods for Easel."""

from __future__ import annotations

import logging
from typing import Callable

from easel import Node, Value
from easel.errors import EaselArityError
from easel.types.absent import Absent
from easel.types.completion import Completion
from easel.types.scope import Scope

logger = logging.getLogger(__name__)

RunFn = Callable[[list[Node], Scope], Completion]


class UserFunction:
    """A function declared by a Func statement.

    Holds the scope it was declared in. Every invocation takes a shallow copy of
    that scope *at call time*, binds the parameters into the copy and runs the
    body there. Names added to the declaring scope after the declaration are
    therefore visible to later calls, and plain re-assignments made by the body
    never leak back out.
    """

    __slots__ = ("name", "params", "body", "scope", "run_fn")

    def __init__(
        self,
        name: str,
        params: list[str],
        body: list[Node],
        scope: Scope,
        run_fn: RunFn,
    ):
        self.name: str = name
        self.params: list[str] = params
        self.body: list[Node] = body
        self.scope: Scope = scope
        self.run_fn: RunFn = run_fn

    def __call__(self, args: list[Value]) -> Value:
        # surplus arguments are dropped, missing ones are an error
        if len(args) < len(self.params):
            raise EaselArityError(
                f"Function {self.name} expects {len(self.params)} args, got {len(args)}"
            )
        call_scope = self.scope.snapshot()
        for param, arg in zip(self.params, args):
            call_scope.define(param, arg)

        logger.debug("calling %s(%s)", self.name, ", ".join(map(repr, args)))
        completion = self.run_fn(self.body, call_scope)
        if completion.is_return:
            return completion.value
        return Absent

    def __repr__(self) -> str:
        return f"<function {self.name}({', '.join(self.params)})>"


class BoundMethod:
    """A callable read off an object; invocation passes the object first."""

    __slots__ = ("receiver", "fn")

    def __init__(self, receiver: Value, fn: Callable[[list[Value]], Value]):
        self.receiver: Value = receiver
        self.fn = fn

    def __call__(self, args: list[Value]) -> Value:
        return self.fn([self.receiver, *args])

    def __repr__(self) -> str:
        return f"<bound {self.fn!r} of {self.receiver!r}>"
