"""Public evaluation entry points, raising and result-dict flavoured."""

from __future__ import annotations

from typing import Any, Dict, Optional

from arith_eval.core import EvalError, evaluate_tree, node_to_dict, parse, to_infix
from arith_eval.core.tree import Node
from arith_eval.utils.config_loader import EvaluatorSettings
from arith_eval.utils.logger import get_logger

from .utils import prepare_expression

logger = get_logger("arith_eval.tools.calculator")


def _ok(result: Any, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": True, "result": result, "method": method, "metadata": metadata}


def _error(exc: EvalError, method: str, **metadata: Any) -> Dict[str, Any]:
    details = exc.to_dict()
    metadata["error_type"] = details.pop("type")
    details.pop("message")
    metadata.update(details)
    return {"ok": False, "error": str(exc), "method": method, "metadata": metadata}


def parse_prepared(expression: str, settings: Optional[EvaluatorSettings] = None) -> Node:
    settings = settings or EvaluatorSettings()
    return parse(prepare_expression(expression, settings), max_depth=settings.max_depth)


def evaluate(expression: str, settings: Optional[EvaluatorSettings] = None) -> float:
    """Evaluates an arithmetic expression.

    Args:
        expression: Text such as `"2*(3+4)"`.
        settings: Evaluator settings; defaults apply when omitted.

    Returns:
        Float value of the expression.

    Raises:
        LexError: On characters outside the expression alphabet.
        ExpressionSyntaxError: On malformed or over-long input.
        ExpressionArithmeticError: On division by zero under the default policy.
    """
    settings = settings or EvaluatorSettings()
    tree = parse_prepared(expression, settings)
    return evaluate_tree(tree, division_by_zero=settings.division_by_zero)


def evaluate_expression(expression: str, settings: Optional[EvaluatorSettings] = None) -> Dict[str, Any]:
    try:
        value = evaluate(expression, settings)
        return _ok(value, "recursive_descent", expression=expression)
    except EvalError as exc:
        logger.debug("evaluate_failed error_type=%s error=%s", type(exc).__name__, exc)
        return _error(exc, "evaluate_expression", expression=expression)


def parse_expression(expression: str, settings: Optional[EvaluatorSettings] = None) -> Dict[str, Any]:
    try:
        tree = parse_prepared(expression, settings)
        return _ok({"tree": node_to_dict(tree), "infix": to_infix(tree)}, "recursive_descent", expression=expression)
    except EvalError as exc:
        logger.debug("parse_failed error_type=%s error=%s", type(exc).__name__, exc)
        return _error(exc, "parse_expression", expression=expression)
