"""Application engine for Easel.

Every callable value shares one invocation contract: it is called with a single
list holding the already-evaluated arguments, in order. User functions, struct
constructors, bound methods and native built-ins all follow it, so the Call
expression never needs to know which kind it is invoking.
"""

from easel import Value
from easel.errors import EaselLookupError, EaselTypeError


def apply(fn: Value, args: list[Value], name: str = "<expression>") -> Value:
    """Invoke `fn` with `args`.

    - An absent/falsy callee is reported as a missing function.
    - Anything else that is not callable raises a type error.
    """
    if not fn:
        raise EaselLookupError(f"Function {name} not found in scope")
    if not callable(fn):
        raise EaselTypeError(f"Variable {name} is not a function")
    return fn(args)
