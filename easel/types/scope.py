"""Runtime scope for Easel.

A Scope is a flat mapping from identifier to evaluated value. There is no
`outer` chain: a function call works on a shallow copy of the scope it was
declared in (see `snapshot`), so plain bindings made during the call stay local
while arrays and struct instances stay shared with the caller.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from easel import Value
from easel.errors import EaselLookupError


class Scope:
    """Mapping from identifier names to Easel values."""

    __slots__ = ("vars",)

    def __init__(self, bindings: Optional[Mapping[str, Value]] = None):
        self.vars: dict[str, Value] = dict(bindings) if bindings else {}

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value`, creating or overwriting the binding."""
        self.vars[name] = value

    def assign(self, name: str, value: Value) -> None:
        """Overwrite an existing binding for `name`.

        Raises EaselLookupError if the name is not bound.
        """
        if name not in self.vars:
            raise EaselLookupError(f"Variable {name} not found in scope")
        self.vars[name] = value

    def lookup(self, name: str, kind: str = "Variable") -> Value:
        """Return the value bound to `name`.

        `kind` only changes the error message (Variable, Struct, Function...).
        Raises EaselLookupError if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise EaselLookupError(f"{kind} {name} not found in scope") from None

    def snapshot(self) -> Scope:
        """Shallow copy: same bindings, reference values remain shared."""
        return Scope(self.vars)

    def update(self, mapping: Mapping[str, Value]) -> None:
        """Bulk-define a mapping of name -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def as_dict(self) -> dict[str, Value]:
        return dict(self.vars)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __getitem__(self, name: str) -> Value:
        return self.lookup(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Scope {")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}>")
            return buffer.getvalue()
