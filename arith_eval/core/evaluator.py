"""Post-order evaluation of expression trees."""

from __future__ import annotations

import math

from .errors import ExpressionArithmeticError
from .tree import Literal, Node

DIVISION_POLICIES = ("error", "ieee")


def _ieee_divide(left: float, right: float) -> float:
    if right != 0.0:
        return left / right
    if left == 0.0 or math.isnan(left):
        return math.nan
    return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _apply(operator: str, left: float, right: float, division_by_zero: str) -> float:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if division_by_zero == "ieee":
            return _ieee_divide(left, right)
        if right == 0.0:
            raise ExpressionArithmeticError("Division by zero")
        return left / right
    raise ExpressionArithmeticError("Unsupported operator '{}'".format(operator))


def evaluate_tree(node: Node, division_by_zero: str = "error") -> float:
    """Computes the value of a tree.

    Args:
        node: Root of the expression tree.
        division_by_zero: `"error"` raises on a zero divisor, `"ieee"` yields
            infinity or NaN.

    Returns:
        Float value of the expression.

    Raises:
        ExpressionArithmeticError: On division by zero under the `"error"`
            policy.
    """
    if division_by_zero not in DIVISION_POLICIES:
        raise ValueError("Unknown division_by_zero policy '{}'".format(division_by_zero))
    return _evaluate(node, division_by_zero)


def _evaluate(node: Node, division_by_zero: str) -> float:
    if isinstance(node, Literal):
        return float(node.value)
    left = _evaluate(node.left, division_by_zero)
    right = _evaluate(node.right, division_by_zero)
    return _apply(node.operator, left, right, division_by_zero)
