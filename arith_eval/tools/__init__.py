"""Evaluation entry points and input preparation."""

from .calculator import evaluate, evaluate_expression, parse_expression, parse_prepared
from .utils import normalize_math_unicode, prepare_expression

__all__ = [
    "evaluate",
    "evaluate_expression",
    "parse_expression",
    "parse_prepared",
    "normalize_math_unicode",
    "prepare_expression",
]
