"""Accessors for the externally produced AST.

Nodes arrive as JSON-style mappings. These helpers read their fields and turn
shape violations into UnknownNodeError so handlers can stay short.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from easel import Node
from easel.errors import UnknownNodeError

_MISSING = object()


def node_type(node: Any) -> str:
    if not isinstance(node, Mapping) or not isinstance(node.get("type"), str):
        raise UnknownNodeError(f"Expected an AST node but got {node!r}")
    return node["type"]


def is_node(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


def field(node: Node, key: str, *aliases: str) -> Any:
    """Return node[key], falling back to alternative field names."""
    for name in (key, *aliases):
        value = node.get(name, _MISSING)
        if value is not _MISSING:
            return value
    raise UnknownNodeError(f"{node.get('type')} node is missing field '{key}'")


def name_field(node: Node, key: str = "name") -> str:
    name = field(node, key)
    if not isinstance(name, str):
        raise UnknownNodeError(f"{node.get('type')} node has a non-string {key}: {name!r}")
    return name


def block_field(node: Node, key: str) -> list[Node]:
    """Return a statement sequence field (body, otherwise...)."""
    block = field(node, key)
    if block is None:
        return []
    if not isinstance(block, list):
        raise UnknownNodeError(f"{node.get('type')} node expects a list for {key}, got {block!r}")
    return block
