# Core type aliases for Easel's data model.
# Runtime values are plain Python objects (int, float, str, bool, list) plus the
# classes in easel.types (StructInstance, UserFunction, ...). AST nodes are the
# JSON-style mappings handed over by the external parser.
#
# Naming guidance:
# - Node:  Use in evaluator/executor code to denote a syntax tree node.
# - Value: Use in runtime code to denote an evaluated value.

from typing import Any, Callable, Mapping

# Runtime value alias
Value = Any
# AST node alias: a mapping with at least a "type" key
Node = Mapping[str, Any]

# Evaluator function type: passed into expression/statement form handlers
EvaluatorFn = Callable[..., Value]
