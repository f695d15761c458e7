"""Reading serialized Easel programs.

The parser hands programs over as JSON: a list of AST node objects. Its file
output wraps that JSON in a JSON string once more, so a decoded string is
decoded a second time.
"""

from __future__ import annotations

import json
from pathlib import Path

from easel import Node
from easel.errors import EaselSyntaxError
from easel.types.node import is_node


def load_ast(text: str) -> list[Node]:
    try:
        program = json.loads(text)
        if isinstance(program, str):
            program = json.loads(program)
    except json.JSONDecodeError as ex:
        raise EaselSyntaxError(f"Invalid program JSON: {ex}") from ex

    if is_node(program):
        program = [program]
    if not isinstance(program, list):
        raise EaselSyntaxError(f"Expected a list of statements, got {type(program).__name__}")
    for index, node in enumerate(program):
        if not is_node(node):
            raise EaselSyntaxError(f"Statement {index} is not an AST node: {node!r}")
    return program


def load_ast_file(path: str | Path) -> list[Node]:
    return load_ast(Path(path).read_text(encoding="utf-8"))
