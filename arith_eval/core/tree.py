"""Expression tree nodes and render helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union


@dataclass(frozen=True)
class Literal:
    value: float


@dataclass(frozen=True)
class BinaryOp:
    operator: str
    left: "Node"
    right: "Node"


Node = Union[Literal, BinaryOp]


def negate(operand: Node) -> BinaryOp:
    """Builds the tree for unary minus as `-1 * operand`, which keeps the sign of zero."""
    return BinaryOp("*", Literal(-1.0), operand)


def node_to_dict(node: Node) -> Dict[str, Any]:
    if isinstance(node, Literal):
        return {"type": "literal", "value": node.value}
    return {
        "type": "binary",
        "operator": node.operator,
        "left": node_to_dict(node.left),
        "right": node_to_dict(node.right),
    }


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_infix(node: Node) -> str:
    """Renders a tree as a fully parenthesised infix string."""
    if isinstance(node, Literal):
        return _format_number(node.value)
    return "({} {} {})".format(to_infix(node.left), node.operator, to_infix(node.right))
