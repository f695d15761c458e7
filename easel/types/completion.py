"""Outcome of executing a statement.

A statement either completes normally or asks the enclosing function call to
return a value. The executor passes these up the statement chain instead of
raising, so returns and errors travel on separate channels.
"""

from __future__ import annotations

from dataclasses import dataclass

from easel import Value


class Completion:
    is_return: bool = False


class NormalCompletion(Completion):
    def __repr__(self):
        return "NORMAL"


@dataclass(frozen=True)
class ReturnSignal(Completion):
    value: Value

    @property
    def is_return(self) -> bool:
        return True


NORMAL = NormalCompletion()
