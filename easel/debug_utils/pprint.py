"""Display helpers for Easel values.

`to_display` produces the text the `print` built-in writes. `format_scope`
renders a whole scope, one binding per line, for debugging a finished run.
"""

from __future__ import annotations

import math
from io import StringIO
from typing import Mapping

from easel import Value
from easel.types.absent import AbsentType
from easel.types.function_fn import BoundMethod, UserFunction
from easel.types.scope import Scope
from easel.types.struct import StructInstance, StructType


def format_number(n: int | float) -> str:
    if isinstance(n, float) and math.isfinite(n) and n.is_integer():
        return str(int(n))
    return str(n)


def to_display(value: Value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, AbsentType):
        return "none"
    if isinstance(value, list):
        return "[" + ", ".join(to_display(v) for v in value) + "]"
    if isinstance(value, StructInstance):
        with StringIO() as buffer:
            buffer.write(f"{value.name} {{")
            buffer.write(", ".join(f"{k}: {to_display(v)}" for k, v in value.fields.items()))
            buffer.write("}")
            return buffer.getvalue()
    if isinstance(value, UserFunction):
        return f"function {value.name}"
    if isinstance(value, StructType):
        return f"struct {value.name}"
    if isinstance(value, BoundMethod):
        return to_display(value.fn)
    if callable(value):
        return f"function {getattr(value, '__name__', 'native')}"
    return repr(value)


def format_scope(scope: Scope | Mapping[str, Value]) -> str:
    bindings = scope.vars if isinstance(scope, Scope) else scope
    with StringIO() as buffer:
        for name in sorted(bindings):
            buffer.write(f"{name} = {to_display(bindings[name])}\n")
        return buffer.getvalue()
