"""Persisted form of predicate trees.

A node is stored as one of:

    {"operator": "AND" | "OR", "children": [node, ...]}
    {"field": str, "op": str, "value": str}

Only the triple of a comparison is stored. Decoding recompiles it, so a
corrupted or hand-edited filter fails with a decode error instead of loading
as a filter that silently matches nothing. Every level of the tree is
validated; errors name the path of the offending node, e.g.
``filter.children[1].children[0]``.
"""

from typing import Any

from todolists.domain.shared.errors import TodoError
from todolists.domain.shared.result import Err, Ok, Result

from .nodes import ComparisonNode, LogicalNode, LogicalOp, Node

_ROOT = "filter"


def encode(node: Node) -> dict[str, Any]:
    """Encode a node tree into plain dicts, lists and strings."""
    if isinstance(node, LogicalNode):
        return {
            "operator": node.operator.value,
            "children": [encode(child) for child in node.children],
        }
    return {"field": node.field, "op": node.op, "value": node.value}


def decode(data: Any) -> Result[Node, TodoError]:
    """Decode a persisted node tree.

    Args:
        data: Value produced by ``encode`` (after a JSON round trip)

    Returns:
        Ok(node), or Err(TodoError) of kind DECODE_ERROR.
    """
    return _decode(data, _ROOT)


def _fail(path: str, message: str) -> Err[TodoError]:
    return Err(TodoError.decode_error(f"{path}: {message}", path=path))


def _decode(data: Any, path: str) -> Result[Node, TodoError]:
    if not isinstance(data, dict):
        return _fail(path, f"expected a mapping, got {type(data).__name__}")
    if "operator" in data:
        return _decode_logical(data, path)
    if "field" in data:
        return _decode_comparison(data, path)
    return _fail(path, "node has neither 'operator' nor 'field'")


def _decode_logical(data: dict[str, Any], path: str) -> Result[Node, TodoError]:
    raw_operator = data["operator"]
    try:
        operator = LogicalOp(raw_operator)
    except ValueError:
        return _fail(path, f"unknown logical operator: {raw_operator!r}")

    raw_children = data.get("children", [])
    if raw_children is None:
        raw_children = []
    if not isinstance(raw_children, list):
        return _fail(path, "'children' must be a list")

    children: list[Node] = []
    for index, raw_child in enumerate(raw_children):
        child = _decode(raw_child, f"{path}.children[{index}]")
        if isinstance(child, Err):
            return child
        children.append(child.value)
    return Ok(LogicalNode(operator, tuple(children)))


def _decode_comparison(data: dict[str, Any], path: str) -> Result[Node, TodoError]:
    for key in ("field", "op", "value"):
        if key not in data:
            return _fail(path, f"missing '{key}' in comparison")
        if not isinstance(data[key], str):
            return _fail(path, f"'{key}' must be a string")

    if not data["op"]:
        return _fail(path, "empty operator in comparison")

    result = ComparisonNode.create(data["field"], data["op"], data["value"])
    if isinstance(result, Err):
        return _fail(path, result.error.message)
    return Ok(result.value)
