"""Struct declarations and instances.

A StructType is the constructor registered under a struct's name. Fields are
validated structurally: every supplied field must be declared, declared fields
that are not supplied are simply absent from the instance.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping

from easel import Value
from easel.errors import EaselArityError, EaselLookupError, EaselTypeError


class StructType:
    """Constructor for instances of a declared struct."""

    __slots__ = ("name", "members")

    def __init__(self, name: str, members: list[str]):
        self.name: str = name
        self.members: tuple[str, ...] = tuple(members)

    def construct(self, fields: Mapping[str, Value]) -> StructInstance:
        for field in fields:
            if field not in self.members:
                raise EaselTypeError(f"Field {field} not found in struct {self.name}")
        return StructInstance(self, dict(fields))

    def __call__(self, args: list[Value]) -> StructInstance:
        # Positional construction follows the declared member order
        if len(args) > len(self.members):
            raise EaselArityError(
                f"{self.name} constructor expects at most {len(self.members)} args"
            )
        return self.construct(dict(zip(self.members, args)))

    def __repr__(self) -> str:
        return f"<struct {self.name} ({', '.join(self.members)})>"


class StructInstance:
    """A record built by a StructType. Shared by reference, equal by identity."""

    __slots__ = ("struct", "fields")

    def __init__(self, struct: StructType, fields: dict[str, Value]):
        self.struct: StructType = struct
        self.fields: dict[str, Value] = fields

    @property
    def name(self) -> str:
        return self.struct.name

    def get(self, field: str) -> Value:
        try:
            return self.fields[field]
        except KeyError:
            raise EaselLookupError(
                f"Property {field} not found in instance {self.name}"
            ) from None

    def set(self, field: str, value: Value) -> None:
        if field not in self.struct.members:
            raise EaselTypeError(f"Field {field} not found in struct {self.name}")
        self.fields[field] = value

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"{self.name} {{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.fields.items()))
            buffer.write("}")
            return buffer.getvalue()
