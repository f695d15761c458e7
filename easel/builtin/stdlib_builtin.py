"""Standard library bindings for the Easel runtime.

The executor itself performs no I/O; everything a program can do to the outside
world goes through the natives registered here. Each native takes the list of
evaluated arguments, like every other Easel callable.
"""
from __future__ import annotations

import sys
from functools import partial
from typing import TextIO

from easel import Value
from easel.debug_utils.pprint import to_display
from easel.errors import EaselArityError, EaselTypeError
from easel.types.absent import Absent
from easel.types.scope import Scope


def print_builtin(stdout: TextIO | None, args: list[Value]) -> Value:
    """Write each argument's display form on its own line."""
    out = stdout if stdout is not None else sys.stdout
    for arg in args:
        out.write(to_display(arg) + "\n")
    return Absent


def input_builtin(stdin: TextIO | None, args: list[Value]) -> str:
    """Read one line of input, without surrounding whitespace."""
    source = stdin if stdin is not None else sys.stdin
    return source.readline().strip()


# -------------------------------
# Arrays
# -------------------------------
def _array_arg(name: str, args: list[Value], arity: int) -> list:
    if len(args) != arity:
        raise EaselArityError(f"{name} expects {arity} args, got {len(args)}")
    if not isinstance(args[0], list):
        raise EaselTypeError(f"{name}: expected array as first argument, got {args[0]!r}")
    return args[0]


def array_push(args: list[Value]) -> list:
    array = _array_arg("STDLIB_ARRAY_PUSH", args, 2)
    array.append(args[1])
    return array


def array_pop(args: list[Value]) -> list:
    array = _array_arg("STDLIB_ARRAY_POP", args, 1)
    if array:
        array.pop()
    return array


def array_reverse(args: list[Value]) -> list:
    array = _array_arg("STDLIB_ARRAY_REVERSE", args, 1)
    array.reverse()
    return array


def array_sort(args: list[Value]) -> list:
    """Sort in place; elements must be all numbers or all strings."""
    array = _array_arg("STDLIB_ARRAY_SORT", args, 1)
    numbers = all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in array)
    strings = all(isinstance(v, str) for v in array)
    if not (numbers or strings):
        raise EaselTypeError("Expected number or string as array elements!")
    array.sort()
    return array


def register(scope: Scope, stdout: TextIO | None = None, stdin: TextIO | None = None) -> None:
    """Register all standard library natives into the given scope."""
    scope.update(
        {
            "print": partial(print_builtin, stdout),
            "input": partial(input_builtin, stdin),
            "STDLIB_ARRAY_PUSH": array_push,
            "STDLIB_ARRAY_POP": array_pop,
            "STDLIB_ARRAY_REVERSE": array_reverse,
            "STDLIB_ARRAY_SORT": array_sort,
        }
    )
