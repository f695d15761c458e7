"""Operator tables for Unary and Binary expressions.

Operators are keyed by symbol. The parser may also hand over its token names
(Plus, Lte, Equiv...), which are mapped onto the symbols first.
"""

from __future__ import annotations

import math
import re
from numbers import Number
from typing import Callable

from easel import Value
from easel.errors import EaselTypeError, UnknownNodeError
from easel.types.absent import AbsentType

TOKEN_ALIASES = {
    "Plus": "+",
    "Minus": "-",
    "Asterisk": "*",
    "Slash": "/",
    "Modulo": "%",
    "Lt": "<",
    "Lte": "<=",
    "Gt": ">",
    "Gte": ">=",
    "Equiv": "==",
    "NotEquiv": "!=",
    "And": "&&",
    "Or": "||",
    "Not": "!",
}


def _is_number(value: Value) -> bool:
    # bool is a Number subclass, which is what coercive equality wants
    return isinstance(value, Number)


NUMERIC_TEXT = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _to_number(value: Value) -> Value:
    # plain decimal text only: no digit separators, no inf/nan spellings
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if NUMERIC_TEXT.fullmatch(text) is None:
            return None
        return float(text)
    return value


# -------------------------------
# Equality
# -------------------------------
def loose_equals(a: Value, b: Value) -> bool:
    """Coercive equality.

    Numbers and booleans compare numerically, a string against a number is
    converted when it parses as one, arrays/instances/callables compare by
    identity and Absent only equals Absent.
    """
    if a is b:
        return True
    if isinstance(a, AbsentType) or isinstance(b, AbsentType):
        return False
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if _is_number(a) and _is_number(b):
        return a == b
    if isinstance(a, str) and _is_number(b):
        return _to_number(a) == b
    if _is_number(a) and isinstance(b, str):
        return a == _to_number(b)
    return False


# -------------------------------
# Arithmetic
# -------------------------------
def divide(a: Value, b: Value) -> Value:
    if _is_number(a) and _is_number(b) and b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1, b)
    return a / b


def remainder(a: Value, b: Value) -> Value:
    if _is_number(a) and _is_number(b):
        if b == 0:
            return math.nan
        result = math.fmod(a, b)
        # keep integer results integral
        if isinstance(a, int) and isinstance(b, int):
            return int(result)
        return result
    raise TypeError("% expects numbers")


UNARY_OPERATORS: dict[str, Callable[[Value], Value]] = {
    "!": lambda a: not a,
}

BINARY_OPERATORS: dict[str, Callable[[Value, Value], Value]] = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "<=": lambda a, b: a <= b,
    ">=": lambda a, b: a >= b,
    "==": loose_equals,
    "!=": lambda a, b: not loose_equals(a, b),
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": divide,
    "%": remainder,
    "&&": lambda a, b: a and b,
    "||": lambda a, b: a or b,
}


def _resolve(operator: Value, table: dict) -> Callable:
    symbol = TOKEN_ALIASES.get(operator, operator) if isinstance(operator, str) else operator
    try:
        return table[symbol]
    except (KeyError, TypeError):
        raise UnknownNodeError(f"Unknown operator {operator!r}") from None


def apply_unary(operator: str, operand: Value) -> Value:
    return _resolve(operator, UNARY_OPERATORS)(operand)


def apply_binary(operator: str, left: Value, right: Value) -> Value:
    fn = _resolve(operator, BINARY_OPERATORS)
    try:
        return fn(left, right)
    except TypeError as ex:
        raise EaselTypeError(
            f"Cannot apply {operator} to {type(left).__name__} and {type(right).__name__}"
        ) from ex
