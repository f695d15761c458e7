from easel.types.absent import Absent, AbsentType
from easel.types.completion import NORMAL, Completion, ReturnSignal
from easel.types.function_fn import BoundMethod, UserFunction
from easel.types.scope import Scope
from easel.types.struct import StructInstance, StructType

__all__ = [
    "Absent",
    "AbsentType",
    "NORMAL",
    "Completion",
    "ReturnSignal",
    "BoundMethod",
    "UserFunction",
    "Scope",
    "StructInstance",
    "StructType",
]
